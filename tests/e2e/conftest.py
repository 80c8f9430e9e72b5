from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from mxdirectory.core.bootstrap import build_directory_manager
from mxdirectory.core.config import config
from mxdirectory.directory.manager import DirectoryManager


@pytest_asyncio.fixture
async def manager() -> AsyncIterator[DirectoryManager]:
    """Real manager wired from .env, for e2e/integration suites only."""
    if not config.access_token:
        pytest.skip("DIRECTORY_ACCESS_TOKEN is not set")
    instance = build_directory_manager()
    try:
        yield instance
    finally:
        await instance.close()
