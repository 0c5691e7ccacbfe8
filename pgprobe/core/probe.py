"""
PostgreSQL service detection over a raw TCP connection.

Sends a protocol 3.0 StartupMessage and inspects the first reply. A server
that answers with an authentication request, or with a well-formed
ErrorResponse, is PostgreSQL. Anything else is "not PostgreSQL", which is a
negative result and not an error. Dial failures and socket errors during
the handshake propagate.
"""

import logging
import socket
import struct
import time

from pgprobe.core.config import settings
from pgprobe.models import validate_target

_log = logging.getLogger(__name__)

PROTOCOL_VERSION = 196608  # 3.0

# AuthenticationOk, KerberosV5, CleartextPassword, MD5Password, SCMCredential,
# GSS, GSSContinue, SSPI, SASL, SASLContinue, SASLFinal
AUTH_CODES = frozenset({0, 2, 3, 5, 6, 7, 8, 9, 10, 11, 12})

_MAX_REPLY = 8192


def startup_message(user: str = "postgres", database: str = "postgres") -> bytes:
    """StartupMessage: int32 length, int32 protocol, key\\0value\\0 pairs, trailing \\0."""
    params = b"".join(
        k.encode() + b"\x00" + v.encode() + b"\x00"
        for k, v in (("user", user), ("database", database))
    ) + b"\x00"
    return struct.pack("!ii", 8 + len(params), PROTOCOL_VERSION) + params


class _Deadline:
    """Absolute deadline applied to every socket operation."""

    def __init__(self, timeout: float) -> None:
        self._end = time.monotonic() + timeout

    def arm(self, sock: socket.socket) -> None:
        remaining = self._end - time.monotonic()
        if remaining <= 0:
            raise TimeoutError("i/o timeout")
        sock.settimeout(remaining)


def _recv_at_most(sock: socket.socket, n: int, deadline: _Deadline) -> bytes:
    """Read until n bytes or EOF."""
    buf = bytearray()
    while len(buf) < n:
        deadline.arm(sock)
        chunk = sock.recv(n - len(buf))
        if not chunk:
            break
        buf.extend(chunk)
    return bytes(buf)


def _parse_error_fields(body: bytes) -> dict[str, str]:
    fields: dict[str, str] = {}
    for part in body.split(b"\x00"):
        if not part:
            break
        fields[chr(part[0])] = part[1:].decode("utf-8", errors="replace")
    return fields


def is_startup_reply(data: bytes) -> bool:
    """True if data is a complete PostgreSQL AuthenticationRequest or ErrorResponse."""
    if len(data) < 5:
        return False
    kind = data[:1]
    (length,) = struct.unpack("!i", data[1:5])
    if length < 4 or len(data) < 1 + length:
        return False
    body = data[5 : 1 + length]
    if kind == b"R":
        if len(body) < 4:
            return False
        (code,) = struct.unpack("!i", body[:4])
        return code in AUTH_CODES
    if kind == b"E":
        fields = _parse_error_fields(body)
        return bool(fields.get("S")) and len(fields.get("C", "")) == 5
    return False


def detect_postgres(sock: socket.socket, timeout: float) -> bool:
    """Run the startup handshake over an open socket. Socket errors propagate."""
    deadline = _Deadline(timeout)
    deadline.arm(sock)
    sock.sendall(startup_message())

    header = _recv_at_most(sock, 5, deadline)
    if len(header) < 5:
        return False
    (length,) = struct.unpack("!i", header[1:5])
    if header[:1] not in (b"R", b"E") or length < 4 or length > _MAX_REPLY:
        return False
    body = _recv_at_most(sock, length - 4, deadline)
    return is_startup_reply(header + body)


def is_postgres(host: str, port: int, *, timeout: float | None = None) -> bool:
    """
    Check whether host:port runs PostgreSQL.

    Returns False when something answers but it is not PostgreSQL. Raises
    InvalidTargetError for an empty host or non-positive port, and OSError
    when the connection cannot be opened or the handshake fails.
    """
    target = validate_target(host, port)
    timeout = settings.PROBE_TIMEOUT if timeout is None else timeout
    try:
        sock = socket.create_connection((target.host, target.port), timeout=timeout)
    except OSError as e:
        _log.debug("probe dial %s failed: %s", target.address, e)
        raise
    with sock:
        found = detect_postgres(sock, timeout)
    _log.debug("probe %s: postgres=%s", target.address, found)
    return found
