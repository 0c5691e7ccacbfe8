"""
`log` module for a script namespace: info, warn, error, debug.
"""

import logging
from types import SimpleNamespace
from typing import Any

logger = logging.getLogger("pgprobe.script")


def make_log_module(
    *,
    logger_instance: logging.Logger | None = None,
    extra: dict[str, Any] | None = None,
) -> Any:
    """Build the `log` object. Every record carries extra (e.g. script name) as context."""
    adapter = logging.LoggerAdapter(logger_instance or logger, extra or {})

    def _emit(level: int) -> Any:
        def emit(msg: str, *args: Any) -> None:
            adapter.log(level, msg, *args)

        return emit

    return SimpleNamespace(
        info=_emit(logging.INFO),
        warn=_emit(logging.WARNING),
        error=_emit(logging.ERROR),
        debug=_emit(logging.DEBUG),
    )
