from __future__ import annotations

from typing import Optional

from ...core.enums import Punctuality
from ...schedule.model import Period
from .base import ClassificationResult, PunctualityStrategy


class OnTimeStrategy(PunctualityStrategy):
    """Early arrival or within the grace period."""

    def decide(self, *, period: Optional[Period], delay_minutes: int) -> ClassificationResult:
        return ClassificationResult(outcome=Punctuality.ON_TIME, delay_minutes=delay_minutes)
