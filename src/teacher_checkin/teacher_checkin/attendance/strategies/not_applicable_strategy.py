from __future__ import annotations

from typing import Optional

from ...core.enums import Punctuality
from ...schedule.model import Period
from .base import ClassificationResult, PunctualityStrategy


class NotApplicableStrategy(PunctualityStrategy):
    """Breaks and gaps are never graded."""

    def decide(self, *, period: Optional[Period], delay_minutes: int) -> ClassificationResult:
        return ClassificationResult(outcome=Punctuality.NOT_APPLICABLE, delay_minutes=0)
