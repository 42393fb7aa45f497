from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def create(
        self,
        *,
        teacher_id: str,
        teacher_name: str,
        classroom_id: Optional[str],
        class_name: str,
        subject: Optional[str],
        period_id: str,
        timestamp: datetime,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def find_for_teacher_period(self, *, teacher_id: str, work_date: date, period_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date, teacher_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        """Records with start <= work_date <= end, oldest first."""

        raise NotImplementedError

    def get_recent(self, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
