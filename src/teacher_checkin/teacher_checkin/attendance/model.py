from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .strategies.base import ClassificationResult


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one teacher check-in for a class and period."""

    record_id: int
    teacher_id: str
    teacher_name: str
    classroom_id: Optional[str]
    class_name: str
    subject: Optional[str]
    period_id: str
    timestamp: datetime

    @property
    def work_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class CheckInResult:
    record: AttendanceRecord
    classification: ClassificationResult
