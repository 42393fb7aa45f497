from __future__ import annotations

from enum import Enum


class PeriodKind(str, Enum):
    """Kind of slot in the timetable."""

    TEACHING = "teaching"
    BREAK = "break"


class Punctuality(str, Enum):
    """Punctuality verdict for one check-in."""

    ON_TIME = "On Time"
    LATE = "Late"
    NOT_APPLICABLE = "N/A"


class LatenessBand(str, Enum):
    """Presentation buckets over delay minutes (dashboard only)."""

    ON_TIME = "on_time"
    MINOR_LATE = "minor_late"
    MAJOR_LATE = "major_late"


class SummaryWindow(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
