"""pgprobe CLI.

Commands:
    pgprobe probe HOST PORT                       - Is PostgreSQL running on HOST:PORT?
    pgprobe auth HOST PORT -u USER [-d DB]        - Are the credentials accepted?
    pgprobe query HOST PORT -u USER -d DB QUERY   - Run QUERY, print rows as JSON

Exit status: 0 positive result, 1 negative result, 2 error.
The password is read from --password or PGPASSWORD.
"""

import logging
import sys
from typing import NoReturn

import click
import psycopg

from pgprobe.client import PostgresClient
from pgprobe.core.config import settings
from pgprobe.core.probe import is_postgres

EXIT_OK = 0
EXIT_NEGATIVE = 1
EXIT_ERROR = 2

_client = PostgresClient()


def _fail(e: Exception) -> NoReturn:
    click.echo(f"error: {e}", err=True)
    sys.exit(EXIT_ERROR)


@click.group()
@click.option("--log-level", default=None, help="Logging level (default: PGPROBE_LOG_LEVEL or INFO).")
def main(log_level: str | None) -> None:
    """Probe, authenticate against, and query PostgreSQL servers."""
    logging.basicConfig(
        level=(log_level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("host")
@click.argument("port", type=int)
@click.option("--timeout", type=float, default=None, help="Seconds (default: PGPROBE_PROBE_TIMEOUT).")
def probe(host: str, port: int, timeout: float | None) -> None:
    """Check whether HOST:PORT runs PostgreSQL."""
    try:
        found = is_postgres(host, port, timeout=timeout)
    except (ValueError, OSError) as e:
        _fail(e)
    click.echo("postgres" if found else "not postgres")
    sys.exit(EXIT_OK if found else EXIT_NEGATIVE)


@main.command()
@click.argument("host")
@click.argument("port", type=int)
@click.option("-u", "--username", required=True)
@click.option("-p", "--password", envvar="PGPASSWORD", default="", show_default=False)
@click.option("-d", "--database", default=None, help="Database (default: PGPROBE_DEFAULT_DATABASE).")
def auth(host: str, port: int, username: str, password: str, database: str | None) -> None:
    """Check whether USERNAME/PASSWORD are accepted by HOST:PORT."""
    try:
        if database is None:
            ok = _client.connect(host, port, username, password)
        else:
            ok = _client.connect_with_database(host, port, username, password, database)
    except (ValueError, psycopg.Error) as e:
        _fail(e)
    click.echo("accepted" if ok else "rejected")
    sys.exit(EXIT_OK if ok else EXIT_NEGATIVE)


@main.command()
@click.argument("host")
@click.argument("port", type=int)
@click.argument("sql")
@click.option("-u", "--username", required=True)
@click.option("-p", "--password", envvar="PGPASSWORD", default="", show_default=False)
@click.option("-d", "--database", required=True)
def query(host: str, port: int, sql: str, username: str, password: str, database: str) -> None:
    """Run SQL on HOST:PORT and print the rows as a JSON array."""
    try:
        out = _client.execute_query(host, port, username, password, database, sql)
    except (ValueError, psycopg.Error) as e:
        _fail(e)
    click.echo(out)


if __name__ == "__main__":
    main()
