"""
Script bindings: the namespace a scripting host exposes to scripts.

Exports: ScriptContext, make_postgres_module.
"""

from .context import ScriptContext
from .modules import make_postgres_module

__all__ = [
    "ScriptContext",
    "make_postgres_module",
]
