from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..schedule.model import Period
from .strategies.base import PunctualityStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.not_applicable_strategy import NotApplicableStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class PunctualityStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_delay(self, *, period: Optional[Period], delay_minutes: int, grace_minutes: int) -> PunctualityStrategy:
        if period is None or period.is_break:
            return NotApplicableStrategy()

        if delay_minutes <= grace_minutes:
            return OnTimeStrategy()
        return LateStrategy()
