"""
Connection helpers for external PostgreSQL servers.

Connections are opened per call and closed before the call returns.
"""

from .connection import build_conninfo, connect, connect_url, execute
from .health import health_check

__all__ = [
    "connect",
    "connect_url",
    "build_conninfo",
    "execute",
    "health_check",
]
