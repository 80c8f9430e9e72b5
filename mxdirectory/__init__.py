"""Federated Matrix user-directory search: homeserver plus pluggable providers."""

from mxdirectory.contracts.directory_v1 import UserDirectoryEntry, UserDirectorySearchResult
from mxdirectory.directory.interface import DirectoryProvider
from mxdirectory.directory.manager import DirectoryManager

__all__ = [
    "DirectoryManager",
    "DirectoryProvider",
    "UserDirectoryEntry",
    "UserDirectorySearchResult",
]
