"""REST directory provider: delegate searches to a remote HTTP backend."""

from typing import Any

import httpx
from pydantic import ValidationError

from mxdirectory.contracts.directory_v1 import UserDirectorySearchResult
from mxdirectory.core.config import config
from mxdirectory.core.logger import logger
from mxdirectory.directory.interface import DirectoryProvider


class RestDirectoryProvider(DirectoryProvider):
    """POSTs {"by": "name"|"threepid", "search_term": ...} to the backend endpoint."""

    def __init__(
        self,
        base_url: str | None = None,
        endpoint: str | None = None,
        enabled: bool | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        rest_url = base_url if base_url is not None else config.rest_url
        self._base_url = rest_url.rstrip("/") if rest_url else ""
        self._endpoint = endpoint or config.rest_endpoint
        self._enabled = config.rest_enabled if enabled is None else enabled
        self._owns_client = client is None
        self._client = client

    def is_enabled(self) -> bool:
        return self._enabled and bool(self._base_url)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=config.http_timeout,
                headers={"User-Agent": config.user_agent},
            )
        return self._client

    async def _search(self, by: str, query: str) -> UserDirectorySearchResult:
        payload: dict[str, Any] = {"by": by, "search_term": query}
        url = self._base_url + self._endpoint
        try:
            response = await self._get_client().post(url, json=payload)
            response.raise_for_status()
            return UserDirectorySearchResult.model_validate_json(response.content)
        except httpx.HTTPStatusError as e:
            logger.warning(
                "REST directory backend returned %s for by=%s: %s",
                e.response.status_code,
                by,
                e.response.text[:300],
            )
        except httpx.HTTPError as e:
            logger.warning("REST directory backend unreachable at %s: %s", url, e)
        except ValidationError as e:
            logger.warning("REST directory backend sent an invalid reply for by=%s: %s", by, e)
        return UserDirectorySearchResult()

    async def search_by_display_name(self, query: str) -> UserDirectorySearchResult:
        return await self._search("name", query)

    async def search_by_threepid(self, query: str) -> UserDirectorySearchResult:
        return await self._search("threepid", query)

    async def close(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
