"""User directory contract v1.

Wire types shared by the homeserver client, the orchestrator and the
directory providers:
  - Search request body (UserDirectorySearchRequest)
  - Result payload (UserDirectoryEntry, UserDirectorySearchResult)
  - Error envelope (MatrixErrorInfo, MatrixErrorCode)
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

USER_DIRECTORY_SEARCH_PATH = "/_matrix/client/r0/user_directory/search"


# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class MatrixErrorCode(StrEnum):
    """Well-known Matrix error codes. Servers may send others; those are kept verbatim."""

    UNRECOGNIZED = "M_UNRECOGNIZED"  # endpoint/feature not supported by the server
    UNKNOWN = "M_UNKNOWN"
    FORBIDDEN = "M_FORBIDDEN"
    UNKNOWN_TOKEN = "M_UNKNOWN_TOKEN"
    MISSING_TOKEN = "M_MISSING_TOKEN"
    LIMIT_EXCEEDED = "M_LIMIT_EXCEEDED"
    NOT_JSON = "M_NOT_JSON"
    BAD_JSON = "M_BAD_JSON"


class MatrixErrorInfo(BaseModel):
    """Generic error envelope returned with non-2xx statuses."""

    errcode: str = Field(description="Matrix error code, e.g. 'M_UNRECOGNIZED'")
    error: str = Field(default="", description="Human-readable message")


# ---------------------------------------------------------------------------
# Search request / result
# ---------------------------------------------------------------------------


class UserDirectorySearchRequest(BaseModel):
    search_term: str = Field(description="Query forwarded verbatim to every source")


class UserDirectoryEntry(BaseModel):
    """One matched identity. Extra fields sent by a source are preserved."""

    model_config = ConfigDict(extra="allow")

    user_id: str = Field(description="Matrix ID, e.g. '@alice:example.org'")
    display_name: str | None = Field(default=None)
    avatar_url: str | None = Field(default=None, description="mxc:// URI or null")


class UserDirectorySearchResult(BaseModel):
    """Ordered entries plus the truncation flag."""

    results: list[UserDirectoryEntry] = Field(default_factory=list)
    limited: bool = Field(default=False, description="True when more matches exist than returned")

    def merge(self, other: UserDirectorySearchResult) -> None:
        """Append other's entries in arrival order; limited only ever goes False -> True."""
        self.results.extend(other.results)
        if other.limited:
            self.limited = True
