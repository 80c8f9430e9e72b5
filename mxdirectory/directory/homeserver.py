"""Homeserver query client: POST the search term, classify the reply."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from mxdirectory.contracts.directory_v1 import (
    MatrixErrorCode,
    MatrixErrorInfo,
    UserDirectorySearchRequest,
    UserDirectorySearchResult,
)
from mxdirectory.core.config import config
from mxdirectory.core.errors import InternalServerError
from mxdirectory.core.logger import logger

_Model = TypeVar("_Model", bound=BaseModel)


@dataclass
class HomeserverSuccess:
    result: UserDirectorySearchResult = field(default_factory=UserDirectorySearchResult)


@dataclass
class HomeserverUnsupported:
    """Directory search is optional on homeservers; this is not an error."""

    error: str = ""


@dataclass
class HomeserverFailure:
    status: int
    errcode: str
    error: str


HomeserverOutcome = HomeserverSuccess | HomeserverUnsupported | HomeserverFailure


class HomeserverDirectoryClient:
    """Issues user-directory searches against a (rewritten) homeserver URL."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
    ):
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else config.http_timeout,
            headers={"User-Agent": user_agent or config.user_agent},
        )

    @staticmethod
    def _parse(response: httpx.Response, model: type[_Model]) -> _Model:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise InternalServerError(f"Invalid JSON reply from the HS: {e}") from e

    async def query(self, url: httpx.URL | str, search_term: str) -> HomeserverOutcome:
        body = UserDirectorySearchRequest(search_term=search_term)
        try:
            response = await self.client.post(url, json=body.model_dump())
        except httpx.HTTPError as e:
            raise InternalServerError(f"Unable to query the HS: I/O error: {e}") from e

        if not response.is_success:
            info = self._parse(response, MatrixErrorInfo)
            if info.errcode == MatrixErrorCode.UNRECOGNIZED:
                return HomeserverUnsupported(error=info.error)
            return HomeserverFailure(
                status=response.status_code,
                errcode=info.errcode,
                error=info.error,
            )

        return HomeserverSuccess(result=self._parse(response, UserDirectorySearchResult))

    async def close(self) -> None:
        if self._owns_client:
            await self.client.aclose()
        logger.debug("Homeserver directory client closed")
