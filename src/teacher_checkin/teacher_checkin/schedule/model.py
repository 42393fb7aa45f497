from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import minutes_of_day, parse_clock
from ..common.validators import normalize_period_id, require_non_empty
from ..core.enums import PeriodKind
from ..core.exceptions import ValidationError

WeekdayPredicate = Callable[[int], bool]


@dataclass(frozen=True)
class Period:
    """One slot of the school day (teaching period or break)."""

    period_id: str
    name: str
    start: time
    end: time
    kind: PeriodKind = PeriodKind.TEACHING

    def __post_init__(self) -> None:
        object.__setattr__(self, "period_id", normalize_period_id(self.period_id))
        require_non_empty(self.name, "Period name")
        if self.start_minutes >= self.end_minutes:
            raise ValidationError(f"{self.name}: start must be before end")

    @classmethod
    def from_clock(cls, period_id, name: str, start: str, end: str, kind: PeriodKind = PeriodKind.TEACHING) -> "Period":
        return cls(period_id=period_id, name=name, start=parse_clock(start), end=parse_clock(end), kind=kind)

    @property
    def start_minutes(self) -> int:
        return minutes_of_day(self.start)

    @property
    def end_minutes(self) -> int:
        return minutes_of_day(self.end)

    @property
    def is_break(self) -> bool:
        return self.kind == PeriodKind.BREAK

    def contains(self, minute: int) -> bool:
        # Half-open: a check-in at `end` belongs to the next period.
        return self.start_minutes <= minute < self.end_minutes


@dataclass(frozen=True)
class ScheduleVariant:
    """Ordered period list selected by a day-of-week predicate."""

    name: str
    applies_to: WeekdayPredicate
    periods: tuple[Period, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "periods", tuple(self.periods))

        previous: Optional[Period] = None
        for p in self.periods:
            if previous is not None and p.start_minutes < previous.end_minutes:
                raise ValidationError(
                    f"Variant {self.name!r}: {p.name} overlaps or precedes {previous.name}"
                )
            previous = p

        ids = [p.period_id for p in self.periods]
        if len(ids) != len(set(ids)):
            raise ValidationError(f"Variant {self.name!r}: duplicate period ids")


@dataclass(frozen=True)
class ScheduleConfig:
    """Immutable schedule configuration; first matching variant wins."""

    variants: tuple[ScheduleVariant, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "variants", tuple(self.variants))
        if not self.variants:
            raise ValidationError("Schedule needs at least one variant")


def on_weekdays(*weekdays: int) -> WeekdayPredicate:
    """Predicate matching the given `date.weekday()` values (Monday=0)."""
    allowed = frozenset(weekdays)

    def predicate(weekday: int) -> bool:
        return weekday in allowed

    return predicate


def any_day(weekday: int) -> bool:
    return True


def build_periods(rows: Sequence[tuple]) -> tuple[Period, ...]:
    """Build periods from (id, name, "HH:MM", "HH:MM"[, kind]) rows."""
    return tuple(Period.from_clock(*row) for row in rows)
