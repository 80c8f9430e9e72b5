"""Configuration from environment variables (.env)."""

import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

DEFAULT_REST_DIRECTORY_ENDPOINT = "/_mxisd/backend/api/v1/directory/user/search"


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _parse_overwrites(raw: str) -> dict[str, str]:
    """Parse 'host=url,host2=url2' into a mapping; malformed pairs are dropped."""
    out: dict[str, str] = {}
    for pair in raw.split(","):
        name, sep, value = pair.partition("=")
        if not sep or not name.strip() or not value.strip():
            continue
        out[name.strip().lower()] = value.strip()
    return out


@dataclass
class Config:
    project_root: Path
    logs_dir: Path
    homeserver_url: str
    user_agent: str
    http_timeout: float
    access_token: str
    dns_overwrite_homeserver_client: dict[str, str]  # hostname -> base URL actually dialed
    rest_enabled: bool
    rest_url: str
    rest_endpoint: str
    memory_enabled: bool
    memory_file: Path | None
    memory_domain: str
    memory_limit: int

    @classmethod
    def load(cls) -> "Config":
        project_root = Path(__file__).parent.parent.parent
        memory_file = os.getenv("DIRECTORY_MEMORY_FILE", "").strip()
        return cls(
            project_root=project_root,
            logs_dir=Path(os.getenv("LOGS_DIR", str(project_root / "logs"))),
            homeserver_url=os.getenv("HOMESERVER_URL", "http://localhost:8008"),
            user_agent=os.getenv("DIRECTORY_USER_AGENT", "mxdirectory"),
            http_timeout=float(os.getenv("DIRECTORY_HTTP_TIMEOUT", "30")),
            access_token=os.getenv("DIRECTORY_ACCESS_TOKEN", ""),
            dns_overwrite_homeserver_client=_parse_overwrites(
                os.getenv("DNS_OVERWRITE_HOMESERVER_CLIENT", "")
            ),
            rest_enabled=_env_bool("DIRECTORY_REST_ENABLED"),
            rest_url=os.getenv("DIRECTORY_REST_URL", ""),
            rest_endpoint=os.getenv("DIRECTORY_REST_ENDPOINT", DEFAULT_REST_DIRECTORY_ENDPOINT),
            memory_enabled=_env_bool("DIRECTORY_MEMORY_ENABLED"),
            memory_file=Path(memory_file) if memory_file else None,
            memory_domain=os.getenv("DIRECTORY_MEMORY_DOMAIN", "localhost"),
            memory_limit=int(os.getenv("DIRECTORY_MEMORY_LIMIT", "50")),
        )

    def validate(self) -> list[str]:
        errors = []
        if self.http_timeout <= 0:
            errors.append(f"DIRECTORY_HTTP_TIMEOUT must be positive, got {self.http_timeout}")
        if self.rest_enabled and not self.rest_url.strip():
            errors.append("DIRECTORY_REST_ENABLED is set but DIRECTORY_REST_URL is empty")
        if self.memory_enabled:
            if self.memory_file is not None and not self.memory_file.exists():
                errors.append(f"Memory directory file not found: {self.memory_file}")
            if self.memory_limit <= 0:
                errors.append(f"DIRECTORY_MEMORY_LIMIT must be positive, got {self.memory_limit}")
        return errors


config = Config.load()
