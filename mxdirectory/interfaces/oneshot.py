"""One-shot interface: run a single directory search, print the JSON result, exit."""

from __future__ import annotations

import asyncio
import json

from mxdirectory.contracts.directory_v1 import USER_DIRECTORY_SEARCH_PATH
from mxdirectory.core.bootstrap import build_directory_manager
from mxdirectory.core.config import config
from mxdirectory.core.errors import DirectoryError


async def run_oneshot(query: str, homeserver_url: str | None = None, access_token: str | None = None) -> int:
    text = (query or "").strip()
    if not text:
        print("Error: query must not be empty")
        return 2

    token = (access_token if access_token is not None else config.access_token).strip()
    if not token:
        print("Error: DIRECTORY_ACCESS_TOKEN is required")
        return 2

    base = (homeserver_url or config.homeserver_url).rstrip("/")
    manager = build_directory_manager()
    try:
        result = await manager.search(base + USER_DIRECTORY_SEARCH_PATH, token, text)
    except DirectoryError as e:
        print(json.dumps({"status": e.status, **e.to_dict()}, indent=2))
        return 1
    finally:
        await manager.close()
    print(result.model_dump_json(indent=2))
    return 0


def main(query: str, homeserver_url: str | None = None) -> int:
    return asyncio.run(run_oneshot(query=query, homeserver_url=homeserver_url))
