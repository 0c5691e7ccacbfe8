"""
Schema-less decoding of query results into JSON-ready records.

The decode strategy of every column is chosen once from the declared type
name in the cursor metadata and then applied to every row. Runtime value
types never change the strategy.

SQL NULL decodes to the zero value of the strategy ("" / False / 0), so
NULL and the zero value are indistinguishable in the output.
"""

import json
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any

from pgprobe.core.errors import RowDecodeError

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TRUE_TEXT = frozenset({"t", "true", "1"})
_FALSE_TEXT = frozenset({"f", "false", "0"})


class Strategy(str, Enum):
    """Closed set of per-column decode strategies."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"


# Declared type name (upper-case) -> strategy. Unlisted names fall back to STRING.
TYPE_STRATEGIES: dict[str, Strategy] = {
    "VARCHAR": Strategy.STRING,
    "TEXT": Strategy.STRING,
    "UUID": Strategy.STRING,
    "TIMESTAMP": Strategy.STRING,
    "BOOL": Strategy.BOOL,
    "INT4": Strategy.INT,
}


def _as_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def _as_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("ascii", errors="replace")
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_TEXT:
            return True
        if text in _FALSE_TEXT:
            return False
    raise TypeError(f"not a boolean: {value!r}")


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise TypeError("boolean is not an integer")
    if isinstance(value, int):
        out = value
    elif isinstance(value, (float, Decimal)):
        if value != int(value):
            raise ValueError(f"not an integer: {value!r}")
        out = int(value)
    elif isinstance(value, (str, bytes, bytearray)):
        out = int(value)
    else:
        raise TypeError(f"not an integer: {value!r}")
    if not _INT64_MIN <= out <= _INT64_MAX:
        raise ValueError(f"out of 64-bit range: {out}")
    return out


_ARRAY_SPECIAL = frozenset('{},"\\ \t\n\r')


def _array_element(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, list):
        return array_text(value)
    if isinstance(value, bool):
        return "t" if value else "f"
    text = _as_string(value)
    if text == "" or text.upper() == "NULL" or any(ch in _ARRAY_SPECIAL for ch in text):
        return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return text


def array_text(value: list) -> str:
    """PostgreSQL array text form, e.g. [1, None, "a b"] -> '{1,NULL,"a b"}'."""
    return "{" + ",".join(_array_element(v) for v in value) + "}"


_DECODERS: dict[Strategy, Callable[[Any], Any]] = {
    Strategy.STRING: _as_string,
    Strategy.BOOL: _as_bool,
    Strategy.INT: _as_int,
}


def strategy_for(type_name: str | None) -> Strategy:
    """Strategy for a declared database type name; STRING when unknown."""
    return TYPE_STRATEGIES.get((type_name or "").upper(), Strategy.STRING)


@dataclass(frozen=True)
class ColumnPlan:
    name: str
    type_name: str
    strategy: Strategy

    @property
    def is_array(self) -> bool:
        """Array columns are named with a leading underscore, e.g. _INT4."""
        return self.type_name.startswith("_")

    def decode(self, value: Any) -> Any:
        try:
            if self.is_array and isinstance(value, list):
                return array_text(value)
            return _DECODERS[self.strategy](value)
        except (TypeError, ValueError, OverflowError) as e:
            raise RowDecodeError(self.name, self.type_name, value) from e


def build_decode_plan(columns: Sequence[tuple[str, str]]) -> list[ColumnPlan]:
    """columns: (name, declared type name) pairs in result-set order."""
    return [
        ColumnPlan(name=name, type_name=(type_name or "").upper(), strategy=strategy_for(type_name))
        for name, type_name in columns
    ]


def decode_row(plan: Sequence[ColumnPlan], row: Sequence[Any]) -> dict[str, Any]:
    """Apply the plan to one row. Duplicate column names keep the last value."""
    return {col.name: col.decode(value) for col, value in zip(plan, row, strict=True)}


def decode_rows(plan: Sequence[ColumnPlan], rows: Iterable[Sequence[Any]]) -> list[dict[str, Any]]:
    return [decode_row(plan, row) for row in rows]


def column_types(cursor: Any) -> list[tuple[str, str]]:
    """
    (name, TYPE NAME) for each column of a psycopg cursor, e.g. ("id", "INT4").
    Array columns get the element name with a leading underscore ("_INT4").
    Types unknown to the cursor's adapters map get an empty name.
    """
    desc = cursor.description
    if not desc:
        return []
    types = cursor.adapters.types
    out: list[tuple[str, str]] = []
    for col in desc:
        info = types.get(col.type_code)
        if info is None:
            out.append((col.name, ""))
        elif col.type_code == info.array_oid:
            # registry resolves array oids to the element type
            out.append((col.name, "_" + info.name.upper()))
        else:
            out.append((col.name, info.name.upper()))
    return out


def cursor_to_records(cursor: Any) -> list[dict[str, Any]]:
    """Decode all remaining rows of a psycopg cursor. No result set -> []."""
    columns = column_types(cursor)
    if not columns:
        return []
    plan = build_decode_plan(columns)
    return decode_rows(plan, cursor.fetchall())


def serialize_records(records: list[dict[str, Any]]) -> str:
    """Compact JSON array of objects."""
    return json.dumps(records, separators=(",", ":"), ensure_ascii=False)
