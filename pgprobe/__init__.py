"""
pgprobe: probe, authenticate against, and query PostgreSQL servers.

Exports: PostgresClient and the error types.
"""

from pgprobe.client import PostgresClient
from pgprobe.core.errors import InvalidTargetError, PgProbeError, RowDecodeError

__all__ = [
    "PostgresClient",
    "PgProbeError",
    "InvalidTargetError",
    "RowDecodeError",
]
