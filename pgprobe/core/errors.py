"""
Exceptions raised by pgprobe.

Validation errors subclass ValueError so callers that already catch
ValueError for bad input keep working.
"""


class PgProbeError(Exception):
    """Base class for pgprobe errors."""


class InvalidTargetError(PgProbeError, ValueError):
    """Host is empty or port is not positive. Raised before any network I/O."""

    def __init__(self, message: str = "invalid host or port") -> None:
        super().__init__(message)


class RowDecodeError(PgProbeError, ValueError):
    """A column value could not be converted by the column's decode strategy."""

    def __init__(self, column: str, type_name: str, value: object) -> None:
        self.column = column
        self.type_name = type_name
        self.value = value
        super().__init__(
            f"cannot decode column {column!r} ({type_name or 'unknown'}) "
            f"from {type(value).__name__} value {value!r}"
        )
