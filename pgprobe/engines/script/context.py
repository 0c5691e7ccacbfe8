"""
ScriptContext: the globals a scripting host merges into its script namespace.
"""

import logging
from typing import Any

from pgprobe.client import PostgresClient
from pgprobe.core.config import settings as default_settings

from .modules import make_env_module, make_log_module, make_postgres_module


class ScriptContext:
    """
    Holds postgres, env and log for one script run. No connection or other
    state is kept between calls; each postgres operation opens and closes its own.
    """

    def __init__(
        self,
        *,
        client: PostgresClient | None = None,
        settings: Any = None,
        logger: logging.Logger | None = None,
        env_whitelist: set[str] | frozenset[str] | None = None,
        log_extra: dict[str, Any] | None = None,
    ) -> None:
        self.postgres = make_postgres_module(client=client)
        self.env = make_env_module(
            settings=settings if settings is not None else default_settings,
            env_whitelist=env_whitelist,
        )
        self.log = make_log_module(logger_instance=logger, extra=log_extra)

    def to_dict(self) -> dict[str, Any]:
        """Namespace entries: postgres, env, log."""
        return {
            "postgres": self.postgres,
            "env": self.env,
            "log": self.log,
        }
