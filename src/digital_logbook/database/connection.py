from __future__ import annotations

import logging

import mysql.connector
from mysql.connector.constants import ClientFlag

from ..core.exceptions import DatabaseUnavailable
from .config import DatabaseConfig, get_connection_string

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """DB connection factory.

    Note: We create short-lived connections per operation.
    """

    def __init__(self, config: DatabaseConfig):
        self._config = config

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    def connect(self):
        # FOUND_ROWS: rowcount counts matched rows, not changed rows.
        return mysql.connector.connect(client_flags=[ClientFlag.FOUND_ROWS], **self._config.connect_kwargs())

    def ping(self) -> None:
        conn = self.connect()
        try:
            conn.ping(reconnect=False)
        finally:
            conn.close()


def open_database(config: DatabaseConfig) -> DatabaseConnection:
    """Connect once to verify the server is reachable; no retry."""
    conn = DatabaseConnection(config)
    try:
        conn.ping()
    except (mysql.connector.Error, ValueError) as e:
        # ValueError: a malformed setting such as a non-numeric port.
        raise DatabaseUnavailable(
            f"failed to connect to MySQL database '{config.database}' at {config.host}:{config.port}: {e}"
        ) from e

    logger.info("Database connection established (%s)", _redacted_dsn(config))
    return conn


def _redacted_dsn(config: DatabaseConfig) -> str:
    return get_connection_string(config).replace(f":{config.password}@", ":***@", 1)
