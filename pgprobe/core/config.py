"""
Settings for pgprobe, read from environment (prefix PGPROBE_) and an optional .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PGPROBE_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Probe: dial timeout and socket deadline for the startup handshake
    PROBE_TIMEOUT: float = Field(default=10.0, gt=0)

    # Auth and query paths (libpq connect_timeout, whole seconds)
    EXTERNAL_DB_CONNECT_TIMEOUT: int = Field(default=10, ge=1)
    EXTERNAL_DB_STATEMENT_TIMEOUT: float | None = None

    DEFAULT_DATABASE: str = "postgres"

    # libpq wording of transport failures, checked alongside the fixed marker set
    AUTH_EXTRA_CONNECTIVITY_MARKERS: list[str] = Field(
        default_factory=lambda: [
            "Connection refused",
            "Network is unreachable",
            "No route to host",
            "timeout expired",
            "could not translate host name",
            "server closed the connection unexpectedly",
        ]
    )

    LOG_LEVEL: str = "INFO"


settings = Settings()  # type: ignore
