"""
PostgresClient: the stateless object bound into a scripting host.

Every call opens its own connection and closes it before returning. Errors
are raised; negative results are returned as False.
"""

from pgprobe.core.auth import authenticate
from pgprobe.core.config import settings
from pgprobe.core.probe import is_postgres
from pgprobe.core.query import execute_query


class PostgresClient:
    """Probe, authenticate against, and query PostgreSQL servers. Holds no state."""

    def is_service_running(self, host: str, port: int) -> bool:
        """True if host:port speaks PostgreSQL, False if it answers but does not."""
        return is_postgres(host, port)

    def connect(self, host: str, port: int, username: str, password: str) -> bool:
        """Check credentials against the default database."""
        return authenticate(host, port, username, password, settings.DEFAULT_DATABASE)

    def connect_with_database(
        self, host: str, port: int, username: str, password: str, database: str
    ) -> bool:
        """Check credentials against a named database."""
        return authenticate(host, port, username, password, database)

    def execute_query(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        database: str,
        query: str,
    ) -> str:
        """Run query and return its rows as a JSON array of objects."""
        return execute_query(host, port, username, password, database, query)
