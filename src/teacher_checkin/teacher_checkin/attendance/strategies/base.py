from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import Punctuality
from ...schedule.model import Period


@dataclass(frozen=True)
class ClassificationResult:
    outcome: Punctuality
    delay_minutes: int = 0

    @property
    def is_graded(self) -> bool:
        return self.outcome != Punctuality.NOT_APPLICABLE


class PunctualityStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a punctuality verdict."""

    @abstractmethod
    def decide(self, *, period: Optional[Period], delay_minutes: int) -> ClassificationResult:
        raise NotImplementedError
