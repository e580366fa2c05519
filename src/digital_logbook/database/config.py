from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class DatabaseConfig:
    host: str
    port: str
    username: str
    password: str
    database: str

    def connect_kwargs(self) -> dict:
        return {
            "host": self.host,
            "port": int(self.port),
            "user": self.username,
            "password": self.password,
            "database": self.database,
        }


def _getenv(key: str, default: str) -> str:
    value = os.getenv(key)
    if not value:
        return default
    return value


def get_config() -> DatabaseConfig:
    """Database settings from the environment; absent or empty values use the defaults."""
    return DatabaseConfig(
        host=_getenv("DB_HOST", "localhost"),
        port=_getenv("DB_PORT", "3306"),
        username=_getenv("DB_USERNAME", "comp-lab1"),
        password=_getenv("DB_PASSWORD", "computer123"),
        database=_getenv("DB_DATABASE", "logbookdb"),
    )


def get_connection_string(config: DatabaseConfig) -> str:
    # Values are not escaped; they must already be driver-safe.
    return (
        f"{config.username}:{config.password}"
        f"@tcp({config.host}:{config.port})/{config.database}?parseTime=true"
    )
