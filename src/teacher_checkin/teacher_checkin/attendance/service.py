from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import coerce_timestamp, now_local
from ..common.validators import normalize_period_id, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..logging_config import get_logger
from ..roster.repository import RosterRepository
from ..schedule.calendar import ScheduleCalendar
from .classifier import AttendanceClassifier
from .model import AttendanceRecord, CheckInResult
from .repository import AttendanceRepository

log = get_logger(__name__)


class CheckInService:
    """Use case: a teacher scans a classroom QR code and checks in."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        roster: RosterRepository,
        calendar: ScheduleCalendar,
        classifier: AttendanceClassifier,
    ):
        self._attendance = attendance
        self._roster = roster
        self._calendar = calendar
        self._classifier = classifier
        # Duplicate check and insert must happen as one step across request threads.
        self._write_lock = threading.Lock()

    def check_in(self, teacher_id: str, classroom_id: str, *, now: Optional[datetime] = None) -> CheckInResult:
        now = now or now_local()

        teacher = self._roster.get_teacher(str(teacher_id))
        if not teacher:
            raise NotFoundError(f"Teacher {teacher_id} does not exist")

        classroom = self._roster.get_classroom(str(classroom_id))
        if not classroom:
            raise NotFoundError(f"Classroom {classroom_id} does not exist")

        period = self._calendar.current_period(now)
        if period is None:
            raise ValidationError("No period is running right now")

        with self._write_lock:
            existing = self._attendance.find_for_teacher_period(
                teacher_id=teacher.teacher_id, work_date=now.date(), period_id=period.period_id
            )
            if existing:
                raise ValidationError(f"Already checked in for {period.name} today")

            record = self._attendance.create(
                teacher_id=teacher.teacher_id,
                teacher_name=teacher.name,
                classroom_id=classroom.classroom_id,
                class_name=classroom.name,
                subject=teacher.subject or classroom.subject,
                period_id=period.period_id,
                timestamp=now,
            )
        result = self._classifier.classify(period, now)

        log.info(
            "teacher_checked_in",
            teacher_id=teacher.teacher_id,
            classroom=classroom.name,
            period=period.period_id,
            outcome=result.outcome.value,
            delay_minutes=result.delay_minutes,
        )
        return CheckInResult(record=record, classification=result)

    def import_records(self, payloads: Iterable[Mapping[str, Any]]) -> dict:
        """Import check-ins exported by the browser client.

        Every payload is validated before anything is stored. Stored ids are
        assigned here; a record repeating a teacher/date/period already on file
        is skipped.
        """
        records = [ingest_record(p, record_id=0) for p in payloads]

        imported = skipped = 0
        with self._write_lock:
            for r in records:
                existing = self._attendance.find_for_teacher_period(
                    teacher_id=r.teacher_id, work_date=r.work_date, period_id=r.period_id
                )
                if existing:
                    skipped += 1
                    continue

                teacher = self._roster.get_teacher(r.teacher_id)
                self._attendance.create(
                    teacher_id=r.teacher_id,
                    teacher_name=r.teacher_name or (teacher.name if teacher else ""),
                    classroom_id=r.classroom_id,
                    class_name=r.class_name,
                    subject=r.subject,
                    period_id=r.period_id,
                    timestamp=r.timestamp,
                )
                imported += 1

        log.info("checkins_imported", imported=imported, skipped=skipped)
        return {"imported": imported, "skipped": skipped}


def ingest_record(payload: Mapping[str, Any], *, record_id: Optional[int] = None) -> AttendanceRecord:
    """Normalize an externally persisted check-in into an AttendanceRecord.

    Accepts the loose shapes written by the browser client: `period` as a
    number or string, `timestamp` as epoch milliseconds, ISO string or datetime.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Each record must be a JSON object")

    try:
        raw_period = payload["period"]
        raw_timestamp = payload["timestamp"]
        teacher_id = payload["teacherId"] if "teacherId" in payload else payload["teacher_id"]
    except KeyError as exc:
        raise ValidationError(f"Missing field: {exc.args[0]}") from exc

    rid = record_id if record_id is not None else payload.get("id", payload.get("record_id"))
    try:
        rid = int(rid)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid record id: {rid!r}") from exc

    return AttendanceRecord(
        record_id=rid,
        teacher_id=require_non_empty(str(teacher_id), "Teacher id"),
        teacher_name=str(payload.get("teacherName", payload.get("teacher_name", "")) or ""),
        classroom_id=payload.get("classroomId", payload.get("classroom_id")),
        class_name=str(payload.get("className", payload.get("class_name", "")) or ""),
        subject=payload.get("subject"),
        period_id=normalize_period_id(raw_period),
        timestamp=coerce_timestamp(raw_timestamp),
    )
