"""Timestamps as reported by NX-OS, stored as whole seconds since the epoch (UTC)."""

from __future__ import annotations

from datetime import datetime, timezone

__all__ = ["TimeStamp", "parse_timestamp", "from_time"]

_DISPLAY_FORMAT = "%m/%d/%Y %H:%M:%S"


class TimeStamp(int):
    """Seconds since the Unix epoch; zero means "not set"."""

    def to_datetime(self) -> datetime:
        """Return the timestamp as an aware UTC datetime."""
        return datetime.fromtimestamp(int(self), tz=timezone.utc)

    def __str__(self) -> str:
        if self == 0:
            return ""
        return self.to_datetime().strftime(_DISPLAY_FORMAT)

    def __repr__(self) -> str:
        return f"TimeStamp({int(self)})"


def parse_timestamp(text: str) -> TimeStamp:
    """Parse one of the date formats NX-OS prints.

    Texts of an unrecognised length give a zero timestamp; a recognised
    length that does not parse raises ValueError.
    """
    if text.startswith(" "):
        text = "0" + text[1:]
    length = len(text)
    if length in (23, 24):
        fmt = "%a %b %d %H:%M:%S %Y"
    elif length == 19:
        fmt = _DISPLAY_FORMAT
    elif length == 10:
        fmt = "%m/%d/%Y"
    else:
        return TimeStamp(0)
    value = datetime.strptime(text, fmt).replace(tzinfo=timezone.utc)
    return TimeStamp(int(value.timestamp()))


def from_time(value: datetime) -> TimeStamp:
    """Build a timestamp from a datetime; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return TimeStamp(int(value.timestamp()))