from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Optional, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Process-local store standing in for the remote document store.

    Note: Flask serves requests from several threads, so writes take a lock.
    """

    def __init__(self, records: Sequence[AttendanceRecord] = ()):
        self._lock = threading.Lock()
        self._records: dict[int, AttendanceRecord] = {r.record_id: r for r in records}
        self._id = max(self._records, default=0)

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
        with self._lock:
            self._id += 1
            rec = AttendanceRecord(
                record_id=self._id,
                teacher_id=teacher_id,
                teacher_name=teacher_name,
                classroom_id=classroom_id,
                class_name=class_name,
                subject=subject,
                period_id=period_id,
                timestamp=timestamp,
            )
            self._records[rec.record_id] = rec
            return rec

    def find_for_teacher_period(self, *, teacher_id: str, work_date: date, period_id: str) -> Optional[AttendanceRecord]:
        for r in self._snapshot():
            if r.teacher_id == teacher_id and r.work_date == work_date and r.period_id == period_id:
                return r
        return None

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return [r for r in self._snapshot() if r.work_date == work_date]

    def list_range(self, *, start: date, end: date, teacher_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        return [
            r
            for r in self._snapshot()
            if start <= r.work_date <= end and (teacher_id is None or r.teacher_id == teacher_id)
        ]

    def get_recent(self, limit: int) -> Sequence[AttendanceRecord]:
        items = sorted(self._snapshot(), key=lambda r: r.timestamp, reverse=True)
        return items[:limit]

    def _snapshot(self) -> list[AttendanceRecord]:
        with self._lock:
            items = list(self._records.values())
        items.sort(key=lambda r: r.timestamp)
        return items
