from __future__ import annotations

from ..core.constants import INTERVAL_PERIOD_ID
from ..core.enums import PeriodKind
from .model import ScheduleConfig, ScheduleVariant, any_day, build_periods, on_weekdays

FRIDAY = 4
SATURDAY = 5
SUNDAY = 6

REGULAR_PERIODS = build_periods(
    [
        (1, "Period 1", "07:55", "08:35"),
        (2, "Period 2", "08:35", "09:15"),
        (3, "Period 3", "09:15", "09:55"),
        (4, "Period 4", "09:55", "10:35"),
        (INTERVAL_PERIOD_ID, "Interval", "10:35", "10:55", PeriodKind.BREAK),
        (5, "Period 5", "10:55", "11:35"),
        (6, "Period 6", "11:35", "12:15"),
        (7, "Period 7", "12:15", "12:55"),
        (8, "Period 8", "12:55", "13:35"),
        (9, "Period 9", "13:35", "14:15"),
    ]
)

# Shortened Friday: no interval, school ends before noon.
FRIDAY_PERIODS = build_periods(
    [
        (1, "Period 1", "07:55", "08:30"),
        (2, "Period 2", "08:30", "09:05"),
        (3, "Period 3", "09:05", "09:40"),
        (4, "Period 4", "09:40", "10:15"),
        (5, "Period 5", "10:15", "10:50"),
    ]
)

FRIDAY_VARIANT = ScheduleVariant(name="friday", applies_to=on_weekdays(FRIDAY), periods=FRIDAY_PERIODS)
WEEKEND_VARIANT = ScheduleVariant(name="weekend", applies_to=on_weekdays(SATURDAY, SUNDAY), periods=())
REGULAR_VARIANT = ScheduleVariant(name="regular", applies_to=any_day, periods=REGULAR_PERIODS)


def build_default_schedule(*, weekend_off: bool = False) -> ScheduleConfig:
    variants = [FRIDAY_VARIANT]
    if weekend_off:
        variants.append(WEEKEND_VARIANT)
    variants.append(REGULAR_VARIANT)
    return ScheduleConfig(variants=tuple(variants))
