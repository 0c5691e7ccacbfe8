"""
Credential check: connect, run SELECT 1, close.

A failure whose message matches a connectivity marker propagates; any other
driver failure (bad password, unknown role or database, ...) is reported as
a plain False.
"""

import logging

import psycopg

from pgprobe.core.classify import ErrorClass, classify_error
from pgprobe.core.config import settings
from pgprobe.core.db import connect, health_check
from pgprobe.models import Credentials, validate_target

_log = logging.getLogger(__name__)


def authenticate(
    host: str,
    port: int,
    username: str,
    password: str,
    database: str | None = None,
) -> bool:
    """True if the credentials are accepted, False if rejected. database defaults to DEFAULT_DATABASE."""
    target = validate_target(host, port)
    credentials = Credentials(
        username=username,
        password=password,
        database=settings.DEFAULT_DATABASE if database is None else database,
    )
    conn = None
    try:
        conn = connect(target, credentials)
        health_check(conn)
    except psycopg.Error as e:
        if classify_error(e) is ErrorClass.CONNECTIVITY:
            _log.warning("connectivity error for %s: %s", target.address, e)
            raise
        _log.info(
            "authentication failed for %s@%s/%s",
            credentials.username,
            target.address,
            credentials.database,
        )
        return False
    finally:
        if conn is not None:
            conn.close()
    return True
