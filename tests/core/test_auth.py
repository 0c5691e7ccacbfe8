"""Tests for core.auth: credential check and error classification."""

import json
from unittest.mock import MagicMock, patch

import psycopg
import pytest

from pgprobe.core.auth import authenticate
from pgprobe.core.errors import InvalidTargetError
from pgprobe.core.query import execute_query


def _conn(execute_error: Exception | None = None) -> MagicMock:
    conn = MagicMock()
    if execute_error is not None:
        conn.cursor.return_value.execute.side_effect = execute_error
    return conn


class TestAuthenticateMocked:
    @patch("pgprobe.core.auth.connect")
    def test_accepted(self, mock_connect: MagicMock) -> None:
        conn = _conn()
        mock_connect.return_value = conn
        assert authenticate("db.local", 5432, "u", "p") is True
        conn.cursor.return_value.execute.assert_called_with("select 1")
        conn.close.assert_called_once()

    @patch("pgprobe.core.auth.connect")
    def test_default_database(self, mock_connect: MagicMock) -> None:
        mock_connect.return_value = _conn()
        authenticate("db.local", 5432, "u", "p")
        target, credentials = mock_connect.call_args.args
        assert target.address == "db.local:5432"
        assert credentials.database == "postgres"

    @patch("pgprobe.core.auth.connect")
    def test_explicit_database(self, mock_connect: MagicMock) -> None:
        mock_connect.return_value = _conn()
        authenticate("db.local", 5432, "u", "p", "sales")
        assert mock_connect.call_args.args[1].database == "sales"

    @patch("pgprobe.core.auth.connect")
    def test_wrong_password_is_false(self, mock_connect: MagicMock) -> None:
        mock_connect.side_effect = psycopg.OperationalError(
            'connection failed: FATAL:  password authentication failed for user "u"'
        )
        assert authenticate("db.local", 5432, "u", "bad") is False

    @pytest.mark.parametrize(
        "message",
        [
            "dial tcp 10.0.0.5:5432: connect: connection refused",
            'FATAL:  no pg_hba.conf entry for host "10.0.0.9", user "u", database "postgres"',
            "network unreachable",
            "connection reset by peer",
            "read: i/o timeout",
        ],
    )
    @patch("pgprobe.core.auth.connect")
    def test_connectivity_error_raises(self, mock_connect: MagicMock, message: str) -> None:
        mock_connect.side_effect = psycopg.OperationalError(message)
        with pytest.raises(psycopg.OperationalError, match=message[:10]):
            authenticate("db.local", 5432, "u", "p")

    @patch("pgprobe.core.auth.connect")
    def test_statement_failure_closes_connection(self, mock_connect: MagicMock) -> None:
        conn = _conn(psycopg.OperationalError("server closed the connection unexpectedly"))
        mock_connect.return_value = conn
        with pytest.raises(psycopg.OperationalError):
            authenticate("db.local", 5432, "u", "p")
        conn.close.assert_called_once()

    @patch("pgprobe.core.auth.connect")
    def test_rejected_statement_closes_connection(self, mock_connect: MagicMock) -> None:
        conn = _conn(psycopg.errors.InsufficientPrivilege("permission denied"))
        mock_connect.return_value = conn
        assert authenticate("db.local", 5432, "u", "p") is False
        conn.close.assert_called_once()

    @patch("pgprobe.core.auth.connect")
    def test_non_driver_errors_propagate(self, mock_connect: MagicMock) -> None:
        mock_connect.side_effect = RuntimeError("bug")
        with pytest.raises(RuntimeError):
            authenticate("db.local", 5432, "u", "p")

    @pytest.mark.parametrize("host,port", [("", 5432), ("db.local", 0), ("db.local", -5)])
    @patch("pgprobe.core.auth.connect")
    def test_invalid_target_no_io(self, mock_connect: MagicMock, host: str, port: int) -> None:
        with pytest.raises(InvalidTargetError, match="invalid host or port"):
            authenticate(host, port, "u", "p")
        mock_connect.assert_not_called()


def test_unreachable_host_raises(closed_port: int) -> None:
    """Real driver: refused connection is classified as connectivity, not rejection."""
    with pytest.raises(psycopg.OperationalError):
        authenticate("127.0.0.1", closed_port, "u", "p")


# --- live PostgreSQL (POSTGRES_* env) ---


def test_live_correct_credentials(pg_params: dict) -> None:
    p = pg_params
    assert authenticate(p["host"], p["port"], p["username"], p["password"], p["database"]) is True


def test_live_wrong_password(pg_params: dict) -> None:
    p = pg_params
    assert authenticate(p["host"], p["port"], p["username"], p["password"] + "-wrong") is False


def test_live_query_round_trip(pg_params: dict) -> None:
    p = pg_params
    sql = (
        "SELECT * FROM (VALUES (1::int4, 'alice'::text, true), (2, NULL, NULL)) "
        "AS t(id, name, active) ORDER BY id"
    )
    out = execute_query(p["host"], p["port"], p["username"], p["password"], p["database"], sql)
    assert json.loads(out) == [
        {"id": 1, "name": "alice", "active": True},
        {"id": 2, "name": "", "active": False},
    ]


def test_live_empty_result(pg_params: dict) -> None:
    p = pg_params
    out = execute_query(
        p["host"], p["port"], p["username"], p["password"], p["database"], "SELECT 1 AS n WHERE false"
    )
    assert out == "[]"
