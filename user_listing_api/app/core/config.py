"""
Configuration management.

The ``Settings`` dataclass is built once at process start by
``Settings.from_env`` and handed to ``create_app``.  Nothing in the
application reads environment variables after that point, so tests can
construct a ``Settings`` instance directly.

Defaults for the database URL and the listening port are only applied
for local development (development environment outside a container).
Containerised and production deployments must provide them explicitly.
"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional


DOCKERENV_MARKER = "/.dockerenv"

LOCAL_DATABASE_URL = "sqlite:///users.db"
LOCAL_SERVER_PORT = 7999


class ConfigurationError(Exception):
    """Raised when the environment does not provide a usable configuration."""


def _truthy(value: Optional[str]) -> bool:
    return (value or "").lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    database_url: str
    server_port: int
    project_name: str = "User Listing API"
    api_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    server_host: str = "0.0.0.0"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    in_container: bool = False
    # Names of the settings that fell back to local development defaults.
    defaulted: List[str] = field(default_factory=list)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_local_development(self) -> bool:
        return self.is_development and not self.in_container

    @property
    def database_path(self) -> str:
        """Filesystem path of the SQLite database named by ``database_url``."""
        return parse_database_url(self.database_url)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Parameters
        ----------
        environ : Optional[Mapping[str, str]]
            Mapping to read from.  Defaults to ``os.environ``.

        Raises
        ------
        ConfigurationError
            If a required value is missing outside local development or
            a value cannot be parsed.
        """
        env = os.environ if environ is None else environ

        in_container = _truthy(env.get("DOCKER_ENV")) or os.path.exists(DOCKERENV_MARKER)
        environment = env.get("APP_ENV") or "development"
        local = environment == "development" and not in_container
        defaulted: List[str] = []

        database_url = env.get("DATABASE_URL")
        if not database_url:
            if not local:
                raise ConfigurationError("DATABASE_URL must be set outside local development")
            database_url = LOCAL_DATABASE_URL
            defaulted.append("DATABASE_URL")
        parse_database_url(database_url)

        raw_port = env.get("SERVER_PORT")
        if not raw_port:
            if not local:
                raise ConfigurationError("SERVER_PORT must be set outside local development")
            server_port = LOCAL_SERVER_PORT
            defaulted.append("SERVER_PORT")
        else:
            server_port = parse_port(raw_port)

        origins = [o.strip() for o in env.get("CORS_ORIGINS", "*").split(",") if o.strip()]

        return cls(
            database_url=database_url,
            server_port=server_port,
            project_name=env.get("PROJECT_NAME", "User Listing API"),
            api_version=env.get("API_VERSION", "1.0.0"),
            environment=environment,
            log_level=env.get("LOG_LEVEL", "INFO"),
            log_file=env.get("LOG_FILE") or None,
            server_host=env.get("SERVER_HOST", "0.0.0.0"),
            cors_origins=origins or ["*"],
            in_container=in_container,
            defaulted=defaulted,
        )


def parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ConfigurationError(f"SERVER_PORT must be an integer, got {value!r}") from None
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"SERVER_PORT out of range: {port}")
    return port


def parse_database_url(url: str) -> str:
    """Return the SQLite file path for ``url``.

    Accepts ``sqlite:///relative.db``, ``sqlite:////absolute/path.db`` or a
    bare filesystem path.  Any other scheme is rejected.
    """
    if url.startswith("sqlite:///"):
        path = url[len("sqlite:///"):]
    elif "://" in url:
        scheme = url.split("://", 1)[0]
        raise ConfigurationError(f"Unsupported database scheme: {scheme}")
    else:
        path = url
    if not path:
        raise ConfigurationError("DATABASE_URL does not name a database file")
    return path
