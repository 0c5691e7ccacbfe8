"""
Connection target and credentials.

Nothing here outlives a single client call.
"""

from pydantic import BaseModel, ConfigDict, Field

from pgprobe.core.config import settings
from pgprobe.core.errors import InvalidTargetError


class ConnectionTarget(BaseModel):
    """host:port of a server. Build through validate_target() to get fail-fast checks."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int

    @property
    def address(self) -> str:
        """host:port, with IPv6 literals bracketed."""
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(default="", repr=False)
    database: str = Field(default_factory=lambda: settings.DEFAULT_DATABASE)


def validate_target(host: str, port: int) -> ConnectionTarget:
    """Return a ConnectionTarget or raise InvalidTargetError (empty host, port <= 0)."""
    if not host or port is None or port <= 0:
        raise InvalidTargetError()
    return ConnectionTarget(host=host, port=port)
