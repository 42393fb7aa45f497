from __future__ import annotations

from typing import Optional

from ...core.enums import Punctuality
from ...schedule.model import Period
from .base import ClassificationResult, PunctualityStrategy


class LateStrategy(PunctualityStrategy):
    """Late check-in."""

    def decide(self, *, period: Optional[Period], delay_minutes: int) -> ClassificationResult:
        return ClassificationResult(outcome=Punctuality.LATE, delay_minutes=delay_minutes)
