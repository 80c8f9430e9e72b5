"""Client DNS overwrite: rewrite homeserver URLs to the address actually dialed."""

import logging

import httpx

logger = logging.getLogger(__name__)


class ClientDnsOverwrite:
    """Maps a hostname to a replacement base URL (scheme, host and port).

    Path and query of the original URL are kept, so only the network
    target changes. Unmapped hosts pass through untouched.
    """

    def __init__(self, mappings: dict[str, str] | None = None):
        self._mappings: dict[str, httpx.URL] = {}
        for name, value in (mappings or {}).items():
            try:
                target = httpx.URL(value)
            except httpx.InvalidURL as e:
                raise ValueError(f"Invalid DNS overwrite for '{name}': {value!r} ({e})") from e
            if target.scheme not in ("http", "https") or not target.host:
                raise ValueError(f"Invalid DNS overwrite for '{name}': {value!r} is not an http(s) base URL")
            self._mappings[name.strip().lower()] = target
        if self._mappings:
            logger.info("DNS overwrite active for hosts %s", sorted(self._mappings))

    def transform(self, url: str | httpx.URL) -> httpx.URL:
        initial = httpx.URL(url)
        target = self._mappings.get(initial.host.lower())
        if target is None:
            return initial
        rewritten = initial.copy_with(scheme=target.scheme, host=target.host, port=target.port)
        logger.debug("DNS overwrite: %s -> %s", initial.host, rewritten)
        return rewritten
