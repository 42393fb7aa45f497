from __future__ import annotations

from datetime import date, datetime, time
from typing import Union

from ..core.exceptions import ValidationError

ClockValue = Union[time, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock(value: str) -> time:
    """Parse a 24h "HH:MM" string into a time."""
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except (AttributeError, ValueError) as exc:
        raise ValidationError(f"Invalid clock time: {value!r}") from exc


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def minutes_of_day(value: ClockValue) -> int:
    """Wall-clock minutes since midnight; seconds are dropped."""
    return value.hour * 60 + value.minute


def format_clock(value: ClockValue) -> str:
    return value.strftime("%H:%M")


def coerce_timestamp(value: Union[datetime, str, int, float]) -> datetime:
    """Normalize a persisted timestamp into a local datetime.

    Accepts datetimes, ISO strings ("2024-11-22T08:55:00" or with a space
    separator) and epoch milliseconds as written by the browser client.
    """
    if isinstance(value, datetime):
        return value

    if isinstance(value, bool):
        raise ValidationError(f"Unsupported timestamp value: {value!r}")

    if isinstance(value, (int, float)):
        return _from_epoch_millis(value)

    if isinstance(value, str):
        candidate = value.strip()
        if candidate.isdigit():
            return _from_epoch_millis(int(candidate))
        try:
            return datetime.fromisoformat(candidate.replace(" ", "T", 1))
        except ValueError as exc:
            raise ValidationError(f"Unsupported timestamp value: {value!r}") from exc

    raise ValidationError(f"Unsupported timestamp value: {value!r}")


def _from_epoch_millis(value: Union[int, float]) -> datetime:
    try:
        return datetime.fromtimestamp(value / 1000)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValidationError(f"Timestamp out of range: {value!r}") from exc
