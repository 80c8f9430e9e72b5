"""Directory manager: query the homeserver, fan out to providers, merge."""

import asyncio
from collections.abc import Iterable

import httpx

from mxdirectory.contracts.directory_v1 import UserDirectorySearchResult
from mxdirectory.core.errors import MatrixError
from mxdirectory.core.logger import logger
from mxdirectory.directory.homeserver import (
    HomeserverDirectoryClient,
    HomeserverFailure,
    HomeserverSuccess,
    HomeserverUnsupported,
)
from mxdirectory.directory.interface import DirectoryProvider
from mxdirectory.dns.overwrite import ClientDnsOverwrite

DISPLAY_NAME = "display_name"
THREEPID = "threepid"


class DirectoryManager:
    """Aggregates homeserver and provider directory results into one response.

    Result order: homeserver entries, then for each enabled provider (in
    registration order) its display-name entries followed by its 3pid
    entries. Entries are never deduplicated or re-sorted.
    """

    def __init__(
        self,
        providers: Iterable[DirectoryProvider],
        dns: ClientDnsOverwrite,
        homeserver: HomeserverDirectoryClient | None = None,
    ):
        self._dns = dns
        self._homeserver = homeserver or HomeserverDirectoryClient()
        self._providers: tuple[DirectoryProvider, ...] = tuple(
            p for p in providers if p.is_enabled()
        )

        logger.info("Directory providers:")
        for p in self._providers:
            logger.info("\t- %s", p.get_provider_name())

    @property
    def providers(self) -> tuple[DirectoryProvider, ...]:
        return self._providers

    async def _query_homeserver(
        self, url: httpx.URL, query: str
    ) -> UserDirectorySearchResult:
        outcome = await self._homeserver.query(url, query)
        if isinstance(outcome, HomeserverUnsupported):
            logger.warning("Homeserver does not support Directory feature, skipping")
            return UserDirectorySearchResult()
        if isinstance(outcome, HomeserverFailure):
            logger.error(
                "Homeserver returned an error while performing directory search: %s %s",
                outcome.status,
                outcome.errcode,
            )
            raise MatrixError(outcome.status, outcome.errcode, outcome.error)
        assert isinstance(outcome, HomeserverSuccess)
        logger.source_matched(
            "homeserver", "directory", query, len(outcome.result.results), outcome.result.limited
        )
        return outcome.result

    async def _query_provider(
        self, provider: DirectoryProvider, mode: str, query: str
    ) -> UserDirectorySearchResult:
        name = provider.get_provider_name()
        try:
            if mode == DISPLAY_NAME:
                result = await provider.search_by_display_name(query)
            else:
                result = await provider.search_by_threepid(query)
        except Exception as e:
            logger.warning("Directory provider %s failed (%s): %s", name, mode, e)
            return UserDirectorySearchResult()
        logger.source_matched(name, mode, query, len(result.results), result.limited)
        return result

    async def search(
        self, target: httpx.URL | str, access_token: str, query: str
    ) -> UserDirectorySearchResult:
        """Search the homeserver at target, then every enabled provider.

        Raises MatrixError when the homeserver rejects the search (no
        provider is queried) and InternalServerError when it cannot be
        reached or replies with something unparseable.
        """
        logger.search_started(query, str(target))
        result = UserDirectorySearchResult()

        url = self._dns.transform(target).copy_set_param("access_token", access_token)
        logger.info("Querying HS at %s", url.copy_remove_param("access_token"))
        result.merge(await self._query_homeserver(url, query))

        calls = [
            self._query_provider(provider, mode, query)
            for provider in self._providers
            for mode in (DISPLAY_NAME, THREEPID)
        ]
        for provider_result in await asyncio.gather(*calls):
            result.merge(provider_result)

        logger.search_done(query, len(result.results), result.limited)
        return result

    async def close(self) -> None:
        await self._homeserver.close()
        for provider in self._providers:
            await provider.close()
