"""
Connectivity vs. rejection classification for credential checks.

The only input is the free-text error message from the driver, so this is
brittle: the markers depend on the wording (and locale) of the driver and
server messages. Replace with typed error inspection if the driver ever
exposes one for these cases.
"""

from collections.abc import Iterable
from enum import Enum

from pgprobe.core.config import settings

# Fixed marker set. Matched case-sensitively; any hit means connectivity.
CONNECTIVITY_MARKERS: tuple[str, ...] = (
    "connect: connection refused",
    "no pg_hba.conf entry for host",
    "network unreachable",
    "reset",
    "i/o timeout",
)


class ErrorClass(str, Enum):
    """Outcome of classify_error."""

    CONNECTIVITY = "connectivity"
    OTHER = "other"


def connectivity_markers() -> tuple[str, ...]:
    """Fixed markers plus the driver-specific ones from settings."""
    return CONNECTIVITY_MARKERS + tuple(settings.AUTH_EXTRA_CONNECTIVITY_MARKERS)


def classify_error(
    exc: BaseException, markers: Iterable[str] | None = None
) -> ErrorClass:
    """
    CONNECTIVITY if str(exc) contains any marker (case-sensitive), else OTHER.

    markers defaults to connectivity_markers().
    """
    message = str(exc)
    for marker in markers if markers is not None else connectivity_markers():
        if marker and marker in message:
            return ErrorClass.CONNECTIVITY
    return ErrorClass.OTHER
