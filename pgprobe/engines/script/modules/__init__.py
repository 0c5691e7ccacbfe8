"""
Script namespace modules: postgres, env, log.
"""

from pgprobe.engines.script.modules.env import make_env_module
from pgprobe.engines.script.modules.log import make_log_module
from pgprobe.engines.script.modules.postgres import make_postgres_module

__all__ = [
    "make_postgres_module",
    "make_env_module",
    "make_log_module",
]
