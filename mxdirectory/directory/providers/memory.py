"""In-memory directory provider backed by a static identity list (YAML)."""

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, ValidationError

from mxdirectory.contracts.directory_v1 import UserDirectoryEntry, UserDirectorySearchResult
from mxdirectory.core.config import config
from mxdirectory.core.logger import logger
from mxdirectory.directory.interface import DirectoryProvider


class ThreePid(BaseModel):
    medium: str = Field(description="'email', 'msisdn', ...")
    address: str


class MemoryIdentity(BaseModel):
    username: str
    display_name: str | None = None
    avatar_url: str | None = None
    threepids: list[ThreePid] = Field(default_factory=list)


def load_identities(path: Path) -> list[MemoryIdentity]:
    """Read an identities file: a list, or a mapping with an 'identities' list."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or []
    if isinstance(data, dict):
        data = data.get("identities") or []
    if not isinstance(data, list):
        raise ValueError(f"Memory directory file must hold a list of identities: {path}")
    return [MemoryIdentity.model_validate(item) for item in data]


class MemoryDirectoryProvider(DirectoryProvider):
    """Case-insensitive substring matching over configured identities."""

    def __init__(
        self,
        identities: list[MemoryIdentity | dict[str, Any]] | None = None,
        domain: str | None = None,
        limit: int | None = None,
        enabled: bool | None = None,
    ):
        self._domain = domain or config.memory_domain
        self._limit = limit if limit is not None else config.memory_limit
        self._enabled = config.memory_enabled if enabled is None else enabled
        if identities is None:
            identities = self._load_configured()
        self._identities = [
            i if isinstance(i, MemoryIdentity) else MemoryIdentity.model_validate(i)
            for i in identities
        ]

    def _load_configured(self) -> list[MemoryIdentity]:
        if not self._enabled or config.memory_file is None:
            return []
        try:
            return load_identities(config.memory_file)
        except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
            logger.error("Unable to load memory directory from %s", config.memory_file, exception=e)
            return []

    def is_enabled(self) -> bool:
        return self._enabled

    def _to_entry(self, identity: MemoryIdentity) -> UserDirectoryEntry:
        return UserDirectoryEntry(
            user_id=f"@{identity.username}:{self._domain}",
            display_name=identity.display_name,
            avatar_url=identity.avatar_url,
        )

    def _build(self, matches: list[MemoryIdentity]) -> UserDirectorySearchResult:
        return UserDirectorySearchResult(
            results=[self._to_entry(i) for i in matches[: self._limit]],
            limited=len(matches) > self._limit,
        )

    async def search_by_display_name(self, query: str) -> UserDirectorySearchResult:
        needle = query.strip().lower()
        if not needle:
            return UserDirectorySearchResult()
        matches = [
            i
            for i in self._identities
            if needle in (i.display_name or "").lower() or needle in i.username.lower()
        ]
        return self._build(matches)

    async def search_by_threepid(self, query: str) -> UserDirectorySearchResult:
        needle = query.strip().lower()
        if not needle:
            return UserDirectorySearchResult()
        matches = [
            i for i in self._identities if any(needle in t.address.lower() for t in i.threepids)
        ]
        return self._build(matches)
