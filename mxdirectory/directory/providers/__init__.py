from mxdirectory.directory.providers.memory import MemoryDirectoryProvider
from mxdirectory.directory.providers.rest import RestDirectoryProvider

__all__ = [
    "MemoryDirectoryProvider",
    "RestDirectoryProvider",
]
