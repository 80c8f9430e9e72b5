"""Test doubles shared by the directory unit tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx

from mxdirectory.contracts.directory_v1 import UserDirectoryEntry, UserDirectorySearchResult
from mxdirectory.directory.homeserver import HomeserverDirectoryClient
from mxdirectory.directory.interface import DirectoryProvider

TARGET = "https://matrix.example.org/_matrix/client/r0/user_directory/search"


def entries(*user_ids: str) -> list[UserDirectoryEntry]:
    return [UserDirectoryEntry(user_id=u, display_name=u.strip("@").split(":")[0]) for u in user_ids]


def result(*user_ids: str, limited: bool = False) -> UserDirectorySearchResult:
    return UserDirectorySearchResult(results=entries(*user_ids), limited=limited)


def hs_payload(*user_ids: str, limited: bool = False) -> dict:
    return result(*user_ids, limited=limited).model_dump()


class FakeProvider(DirectoryProvider):
    def __init__(
        self,
        by_name: UserDirectorySearchResult | None = None,
        by_threepid: UserDirectorySearchResult | None = None,
        enabled: bool = True,
        error: Exception | None = None,
        name: str = "fake",
    ):
        self.by_name = by_name or UserDirectorySearchResult()
        self.by_threepid = by_threepid or UserDirectorySearchResult()
        self.enabled = enabled
        self.error = error
        self.name = name
        self.calls: list[tuple[str, str]] = []

    def is_enabled(self) -> bool:
        return self.enabled

    def get_provider_name(self) -> str:
        return self.name

    async def search_by_display_name(self, query: str) -> UserDirectorySearchResult:
        self.calls.append(("display_name", query))
        if self.error is not None:
            raise self.error
        return self.by_name

    async def search_by_threepid(self, query: str) -> UserDirectorySearchResult:
        self.calls.append(("threepid", query))
        if self.error is not None:
            raise self.error
        return self.by_threepid


def homeserver_client(
    handler: Callable[[httpx.Request], httpx.Response],
) -> HomeserverDirectoryClient:
    return HomeserverDirectoryClient(
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )


def responding(status: int, payload: dict | None = None, text: str | None = None):
    """Handler that records requests and answers with a fixed response."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if text is not None:
            return httpx.Response(status, text=text)
        return httpx.Response(status, json=payload)

    handler.seen = seen  # type: ignore[attr-defined]
    return handler
