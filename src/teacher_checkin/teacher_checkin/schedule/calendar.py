from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import minutes_of_day, now_local
from ..common.validators import normalize_period_id
from ..core.exceptions import ValidationError
from .model import Period, ScheduleConfig, ScheduleVariant

DayLike = Union[date, datetime]


class ScheduleCalendar:
    """Resolves the school's period list for a calendar date.

    Pure lookups over an injected, immutable `ScheduleConfig`; safe to share
    between threads and to call once per record on every dashboard render.
    """

    def __init__(self, config: ScheduleConfig):
        self._config = config

    @property
    def config(self) -> ScheduleConfig:
        return self._config

    def variant_for(self, day: DayLike) -> Optional[ScheduleVariant]:
        weekday = day.weekday()
        for variant in self._config.variants:
            if variant.applies_to(weekday):
                return variant
        return None

    def periods_for(self, day: DayLike) -> tuple[Period, ...]:
        """All periods (teaching and breaks) of `day`, in schedule order."""
        variant = self.variant_for(day)
        if variant is None:
            return ()
        return variant.periods

    def teaching_periods_for(self, day: DayLike) -> tuple[Period, ...]:
        return tuple(p for p in self.periods_for(day) if not p.is_break)

    def current_period(self, moment: Optional[datetime] = None) -> Optional[Period]:
        """Period running at `moment` (defaults to now).

        Returns None outside school hours or in a gap; a break period is
        returned as-is when `moment` falls inside it.
        """
        moment = moment or now_local()
        minute = minutes_of_day(moment)
        for p in self.periods_for(moment):
            if p.contains(minute):
                return p
        return None

    def find_period(self, day: DayLike, period_id) -> Optional[Period]:
        try:
            wanted = normalize_period_id(period_id)
        except ValidationError:
            return None
        for p in self.periods_for(day):
            if p.period_id == wanted:
                return p
        return None
