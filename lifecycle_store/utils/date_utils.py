"""Date and time utility functions."""

from datetime import datetime, UTC
from typing import Callable, Optional

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def format_timestamp(
    value: Optional[datetime],
    fmt: str = "%d/%m/%Y %H:%M:%S",
    local: bool = True,
) -> str:
    """Render a timestamp for display, converting aware values to local time."""
    if value is None:
        return "-"
    if local and value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(fmt)


def latest(*values: Optional[datetime]) -> Optional[datetime]:
    """Return the most recent of the given timestamps, ignoring missing ones."""
    present = [v for v in values if v is not None]
    return max(present) if present else None
