from __future__ import annotations

import threading
import time
from datetime import datetime

import pytest

from teacher_checkin.attendance.memory_repository import InMemoryAttendanceRepository
from teacher_checkin.attendance.service import CheckInService, ingest_record
from teacher_checkin.core.enums import Punctuality
from teacher_checkin.core.exceptions import NotFoundError, ValidationError


def test_checkin_on_time_records_period(container, fixed_now):
    result = container.checkin_service.check_in("T001", "C001", now=fixed_now)

    assert result.record.period_id == "1"
    assert result.record.teacher_name == "John Smith"
    assert result.record.class_name == "Grade 6A"
    assert result.record.subject == "Mathematics"
    assert result.classification.outcome == Punctuality.ON_TIME
    assert result.classification.delay_minutes == 5

    stored = container.attendance_repo.list_for_date(fixed_now.date())
    assert [r.record_id for r in stored] == [result.record.record_id]


def test_checkin_late(container):
    now = datetime(2024, 11, 18, 8, 10)
    result = container.checkin_service.check_in("T002", "C002", now=now)

    assert result.classification.outcome == Punctuality.LATE
    assert result.classification.delay_minutes == 15


def test_checkin_during_interval_is_not_graded(container):
    now = datetime(2024, 11, 18, 10, 40)
    result = container.checkin_service.check_in("T001", "C001", now=now)

    assert result.record.period_id == "Interval"
    assert result.classification.outcome == Punctuality.NOT_APPLICABLE


def test_checkin_outside_school_hours_rejected(container):
    with pytest.raises(ValidationError):
        container.checkin_service.check_in("T001", "C001", now=datetime(2024, 11, 22, 12, 0))


def test_duplicate_checkin_same_period_rejected(container, fixed_now):
    container.checkin_service.check_in("T001", "C001", now=fixed_now)

    with pytest.raises(ValidationError):
        container.checkin_service.check_in("T001", "C003", now=fixed_now.replace(minute=20))


def test_checkin_next_period_allowed(container, fixed_now):
    container.checkin_service.check_in("T001", "C001", now=fixed_now)
    result = container.checkin_service.check_in("T001", "C001", now=fixed_now.replace(minute=35))

    assert result.record.period_id == "2"
    assert result.classification.delay_minutes == 0


def test_unknown_teacher_or_classroom(container, fixed_now):
    with pytest.raises(NotFoundError):
        container.checkin_service.check_in("T999", "C001", now=fixed_now)
    with pytest.raises(NotFoundError):
        container.checkin_service.check_in("T001", "C999", now=fixed_now)


def test_ingest_record_normalizes_loose_shapes():
    record = ingest_record(
        {
            "id": "17",
            "teacherId": "T001",
            "teacherName": "John Smith",
            "className": "Grade 9A",
            "subject": "Mathematics",
            "period": 3,
            "timestamp": "2024-11-22T08:55:00",
        }
    )

    assert record.record_id == 17
    assert record.period_id == "3"
    assert record.timestamp == datetime(2024, 11, 22, 8, 55)
    assert record.work_date.isoformat() == "2024-11-22"


def test_ingest_record_epoch_milliseconds():
    moment = datetime(2024, 11, 22, 8, 55)
    millis = int(moment.timestamp() * 1000)

    record = ingest_record({"teacher_id": "T001", "period": "Interval", "timestamp": millis}, record_id=1)

    assert record.timestamp == moment
    assert record.period_id == "Interval"


def test_ingest_record_missing_fields():
    with pytest.raises(ValidationError):
        ingest_record({"teacherId": "T001", "timestamp": "2024-11-22T08:55:00"}, record_id=1)
    with pytest.raises(ValidationError):
        ingest_record({"teacherId": "T001", "period": 1, "timestamp": "yesterday"}, record_id=1)
    with pytest.raises(ValidationError):
        ingest_record({"teacherId": "T001", "period": 1, "timestamp": "2024-11-22T08:55:00"})


class SlowLookupRepository(InMemoryAttendanceRepository):
    """Widens the gap between the duplicate lookup and the insert."""

    def find_for_teacher_period(self, **kwargs):
        found = super().find_for_teacher_period(**kwargs)
        time.sleep(0.05)
        return found


def test_concurrent_duplicate_checkins_store_one_record(container, fixed_now):
    repo = SlowLookupRepository()
    service = CheckInService(repo, container.roster_repo, container.calendar, container.classifier)

    errors = []

    def scan():
        try:
            service.check_in("T001", "C001", now=fixed_now)
        except ValidationError as e:
            errors.append(e)

    threads = [threading.Thread(target=scan) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(repo.list_for_date(fixed_now.date())) == 1
    assert len(errors) == 1


def test_import_records_renumbers_and_skips_duplicates(container, fixed_now):
    container.checkin_service.check_in("T001", "C001", now=fixed_now)

    summary = container.checkin_service.import_records(
        [
            {"id": 1, "teacherId": "T001", "className": "Grade 6A", "period": 1, "timestamp": "2024-11-18T07:58:00"},
            {"id": 1, "teacherId": "T002", "className": "Grade 10A", "period": "2", "timestamp": "2024-11-18T08:50:00"},
            {"teacherId": "T003", "teacherName": "Emily Davis", "className": "Grade 6B", "period": 1, "timestamp": "2024-11-15T08:00:00"},
        ]
    )

    assert summary == {"imported": 2, "skipped": 1}

    monday = container.attendance_repo.list_for_date(fixed_now.date())
    assert sorted(r.record_id for r in monday) == [1, 2]
    imported = next(r for r in monday if r.teacher_id == "T002")
    assert imported.teacher_name == "Sarah Johnson"
    assert imported.period_id == "2"

    rows = container.report_service.teacher_daily_rows("T002", fixed_now.date())
    assert rows[1]["delay_minutes"] == 15
    assert rows[1]["band"] == "minor_late"


def test_import_records_is_all_or_nothing(container):
    with pytest.raises(ValidationError):
        container.checkin_service.import_records(
            [
                {"teacherId": "T001", "period": 1, "timestamp": "2024-11-18T08:00:00"},
                {"teacherId": "T002", "period": 1, "timestamp": "not a time"},
            ]
        )
    assert container.attendance_repo.get_recent(10) == []


def test_ingest_record_rejects_non_object():
    with pytest.raises(ValidationError):
        ingest_record(["T001", 1], record_id=1)
