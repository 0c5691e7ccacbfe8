import os
import socket

import pytest


@pytest.fixture
def closed_port() -> int:
    """A local port with nothing listening on it."""
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(("127.0.0.1", 0))
    port = s.getsockname()[1]
    s.close()
    return port


@pytest.fixture
def pg_params() -> dict:
    """Live PostgreSQL from POSTGRES_* env vars; skips when POSTGRES_SERVER is unset."""
    if not os.environ.get("POSTGRES_SERVER"):
        pytest.skip("POSTGRES_SERVER not set")
    return {
        "host": os.environ["POSTGRES_SERVER"],
        "port": int(os.environ.get("POSTGRES_PORT", "5432")),
        "database": os.environ.get("POSTGRES_DB", "postgres"),
        "username": os.environ.get("POSTGRES_USER", "postgres"),
        "password": os.environ.get("POSTGRES_PASSWORD", "postgres"),
    }
