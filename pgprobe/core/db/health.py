"""
Connection check: SELECT 1 over an open connection.
"""

from typing import Any

from .connection import execute


def health_check(conn: Any) -> None:
    """Run SELECT 1 and fetch the row. Driver errors propagate to the caller."""
    cur = execute(conn, "select 1")
    try:
        cur.fetchone()
    finally:
        cur.close()
