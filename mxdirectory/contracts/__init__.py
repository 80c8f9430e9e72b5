"""User directory contract v1: shared wire types for search requests, results and errors."""

from mxdirectory.contracts.directory_v1 import (
    USER_DIRECTORY_SEARCH_PATH,
    MatrixErrorCode,
    MatrixErrorInfo,
    UserDirectoryEntry,
    UserDirectorySearchRequest,
    UserDirectorySearchResult,
)

__all__ = [
    "USER_DIRECTORY_SEARCH_PATH",
    "MatrixErrorCode",
    "MatrixErrorInfo",
    "UserDirectoryEntry",
    "UserDirectorySearchRequest",
    "UserDirectorySearchResult",
]
