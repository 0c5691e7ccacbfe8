"""
`env` module for a script namespace: get, get_int, get_float.

Only whitelisted, non-secret pgprobe settings are readable.
"""

from types import SimpleNamespace
from typing import Any

DEFAULT_ENV_WHITELIST = frozenset({
    "PROBE_TIMEOUT",
    "EXTERNAL_DB_CONNECT_TIMEOUT",
    "EXTERNAL_DB_STATEMENT_TIMEOUT",
    "DEFAULT_DATABASE",
})


def make_env_module(
    *,
    settings: Any,
    env_whitelist: frozenset[str] | set[str] | None = None,
) -> Any:
    """Build the `env` object over a settings object or dict."""
    wl = frozenset(env_whitelist) if env_whitelist is not None else DEFAULT_ENV_WHITELIST

    def _get_raw(key: str) -> Any:
        if key not in wl:
            return None
        if isinstance(settings, dict):
            return settings.get(key)
        return getattr(settings, key, None)

    def get(key: str, default: Any = None) -> Any:
        v = _get_raw(key)
        return default if v is None else v

    def get_int(key: str, default: int = 0) -> int:
        try:
            return int(get(key, default))
        except (TypeError, ValueError):
            return default

    def get_float(key: str, default: float = 0.0) -> float:
        try:
            return float(get(key, default))
        except (TypeError, ValueError):
            return default

    return SimpleNamespace(get=get, get_int=get_int, get_float=get_float)
