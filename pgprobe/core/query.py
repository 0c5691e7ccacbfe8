"""
Run a caller-supplied statement and return its rows as a JSON array of objects.

The statement is executed verbatim over an unencrypted (sslmode=disable)
autocommit connection.
"""

import logging

from pgprobe.core.db import build_conninfo, connect_url, execute
from pgprobe.core.decode import cursor_to_records, serialize_records
from pgprobe.models import Credentials, validate_target

_log = logging.getLogger(__name__)


def execute_query(
    host: str,
    port: int,
    username: str,
    password: str,
    database: str,
    query: str,
) -> str:
    target = validate_target(host, port)
    credentials = Credentials(username=username, password=password, database=database)
    conninfo = build_conninfo(target, credentials, sslmode="disable")
    _log.debug("executing query on %s/%s", target.address, database)
    with connect_url(conninfo) as conn:
        cur = execute(conn, query)
        try:
            records = cursor_to_records(cur)
        finally:
            cur.close()
    return serialize_records(records)
