"""Errors surfaced by directory search, shaped like Matrix error envelopes."""

from typing import Any

from mxdirectory.contracts.directory_v1 import MatrixErrorCode


class DirectoryError(Exception):
    """Base error: an HTTP status plus a Matrix errcode/error pair."""

    def __init__(self, status: int, errcode: str, error: str):
        super().__init__(f"{status} {errcode}: {error}")
        self.status = status
        self.errcode = errcode
        self.error = error

    def to_dict(self) -> dict[str, Any]:
        return {"errcode": self.errcode, "error": self.error}


class MatrixError(DirectoryError):
    """The homeserver rejected the request; status, errcode and message are verbatim."""


class InternalServerError(DirectoryError):
    """Local or transport-level failure (unreachable server, unparseable reply)."""

    def __init__(self, error: str):
        super().__init__(500, MatrixErrorCode.UNKNOWN.value, error)
