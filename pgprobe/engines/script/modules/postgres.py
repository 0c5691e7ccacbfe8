"""
`postgres` module for a script namespace: the four client operations.

Exposed under snake_case names and the camelCase names scripts written for
other hosts expect (isServiceRunning, connectWithDatabase, executeQuery).
"""

import logging
from types import SimpleNamespace
from typing import Any

from pgprobe.client import PostgresClient

_log = logging.getLogger(__name__)


def make_postgres_module(*, client: PostgresClient | None = None) -> Any:
    """Build the `postgres` object. client defaults to a fresh PostgresClient."""
    pg = client or PostgresClient()

    def is_service_running(host: str, port: int) -> bool:
        return pg.is_service_running(host, port)

    def connect(host: str, port: int, username: str, password: str) -> bool:
        return pg.connect(host, port, username, password)

    def connect_with_database(
        host: str, port: int, username: str, password: str, database: str
    ) -> bool:
        return pg.connect_with_database(host, port, username, password, database)

    def execute_query(
        host: str, port: int, username: str, password: str, database: str, query: str
    ) -> str:
        _log.debug("script query on %s:%s/%s", host, port, database)
        return pg.execute_query(host, port, username, password, database, query)

    return SimpleNamespace(
        is_service_running=is_service_running,
        connect=connect,
        connect_with_database=connect_with_database,
        execute_query=execute_query,
        isServiceRunning=is_service_running,
        connectWithDatabase=connect_with_database,
        executeQuery=execute_query,
    )
