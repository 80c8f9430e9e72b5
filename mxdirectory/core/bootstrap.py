"""Provider registration and directory manager wiring at startup."""

from mxdirectory.core.config import config
from mxdirectory.core.logger import logger
from mxdirectory.directory.homeserver import HomeserverDirectoryClient
from mxdirectory.directory.interface import DirectoryProvider
from mxdirectory.directory.manager import DirectoryManager
from mxdirectory.directory.providers import MemoryDirectoryProvider, RestDirectoryProvider
from mxdirectory.dns.overwrite import ClientDnsOverwrite


def build_providers() -> list[DirectoryProvider]:
    """Every known provider, enabled or not; the manager filters them."""
    return [
        RestDirectoryProvider(),
        MemoryDirectoryProvider(),
    ]


def build_directory_manager(
    providers: list[DirectoryProvider] | None = None,
) -> DirectoryManager:
    """Composition root: one manager per process, built from config."""
    for problem in config.validate():
        logger.warning("Configuration: %s", problem)

    dns = ClientDnsOverwrite(config.dns_overwrite_homeserver_client)
    homeserver = HomeserverDirectoryClient(
        user_agent=config.user_agent,
        timeout=config.http_timeout,
    )
    return DirectoryManager(
        build_providers() if providers is None else providers,
        dns,
        homeserver=homeserver,
    )
