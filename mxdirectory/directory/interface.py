"""Standard interface for directory providers queried next to the homeserver.

Providers absorb their own failures: nothing matched, or the backend was
unreachable, both come back as an empty, non-limited result.
"""

from abc import ABC, abstractmethod

from mxdirectory.contracts.directory_v1 import UserDirectorySearchResult


class DirectoryProvider(ABC):
    """Base class for all directory backends."""

    @abstractmethod
    def is_enabled(self) -> bool:
        """Checked once when the manager is built, not per request."""

    @abstractmethod
    async def search_by_display_name(self, query: str) -> UserDirectorySearchResult:
        """Match identities by display name."""

    @abstractmethod
    async def search_by_threepid(self, query: str) -> UserDirectorySearchResult:
        """Match identities by third-party identifier (email, phone number, ...)."""

    def get_provider_name(self) -> str:
        return type(self).__name__

    async def close(self) -> None:
        """Release backend resources (HTTP clients, connections)."""
