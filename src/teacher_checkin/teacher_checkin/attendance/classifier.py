from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import minutes_of_day
from ..core.constants import DEFAULT_LATE_GRACE_MINUTES
from ..schedule.model import Period
from .factory import PunctualityStrategyFactory
from .strategies.base import ClassificationResult


class AttendanceClassifier:
    """Grades a check-in instant against the start of its period.

    Stateless and total: results are recomputed from raw timestamps every time,
    so changing the grace period reclassifies history without a migration.
    """

    def __init__(
        self,
        *,
        grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
        strategy_factory: PunctualityStrategyFactory | None = None,
    ):
        self._grace_minutes = int(grace_minutes)
        self._factory = strategy_factory or PunctualityStrategyFactory()

    @property
    def grace_minutes(self) -> int:
        return self._grace_minutes

    def classify(self, period: Optional[Period], check_in: datetime) -> ClassificationResult:
        delay = 0
        if period is not None and not period.is_break:
            # Signed: negative means the teacher arrived early.
            delay = minutes_of_day(check_in) - period.start_minutes

        strategy = self._factory.for_delay(period=period, delay_minutes=delay, grace_minutes=self._grace_minutes)
        return strategy.decide(period=period, delay_minutes=delay)
