"""Federated user directory: homeserver client, provider interface and manager."""

from mxdirectory.directory.homeserver import (
    HomeserverDirectoryClient,
    HomeserverFailure,
    HomeserverOutcome,
    HomeserverSuccess,
    HomeserverUnsupported,
)
from mxdirectory.directory.interface import DirectoryProvider
from mxdirectory.directory.manager import DirectoryManager

__all__ = [
    "DirectoryManager",
    "DirectoryProvider",
    "HomeserverDirectoryClient",
    "HomeserverFailure",
    "HomeserverOutcome",
    "HomeserverSuccess",
    "HomeserverUnsupported",
]
