from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..attendance.classifier import AttendanceClassifier
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..attendance.strategies.base import ClassificationResult
from ..common.datetime_utils import format_clock
from ..core.constants import (
    DEFAULT_LATE_GRACE_MINUTES,
    DEFAULT_MINOR_LATE_MAX_MINUTES,
    DEFAULT_RECENT_LIMIT,
    DEFAULT_TREND_DAYS,
    WEEKLY_SUMMARY_DAYS,
)
from ..core.enums import LatenessBand, Punctuality, SummaryWindow
from ..core.exceptions import NotFoundError
from ..roster.repository import RosterRepository
from ..schedule.calendar import ScheduleCalendar


def lateness_band(
    delay_minutes: int,
    *,
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    minor_max_minutes: int = DEFAULT_MINOR_LATE_MAX_MINUTES,
) -> LatenessBand:
    """Dashboard bucket for a delay: on time, minor late (6-15), major late (16+)."""
    if delay_minutes <= grace_minutes:
        return LatenessBand.ON_TIME
    if delay_minutes <= minor_max_minutes:
        return LatenessBand.MINOR_LATE
    return LatenessBand.MAJOR_LATE


def _natural_key(value: str):
    return [int(part) if part.isdigit() else part.lower() for part in re.split(r"(\d+)", value)]


@dataclass(frozen=True)
class OverviewData:
    on_time: int
    late: int
    absent: int
    trend: list[tuple[date, int]]
    recent: list[dict]


@dataclass(frozen=True)
class MatrixData:
    columns: list[dict]
    rows: list[dict]


class AttendanceReportService:
    """Read-models for the admin dashboard.

    Every verdict is recomputed from raw timestamps through the classifier;
    stored statuses are never trusted.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        roster: RosterRepository,
        calendar: ScheduleCalendar,
        classifier: AttendanceClassifier,
        *,
        minor_late_max_minutes: int = DEFAULT_MINOR_LATE_MAX_MINUTES,
    ):
        self._attendance = attendance
        self._roster = roster
        self._calendar = calendar
        self._classifier = classifier
        self._minor_max = int(minor_late_max_minutes)

    def grade(self, record: AttendanceRecord) -> ClassificationResult:
        period = self._calendar.find_period(record.work_date, record.period_id)
        return self._classifier.classify(period, record.timestamp)

    def band(self, delay_minutes: int) -> LatenessBand:
        return lateness_band(
            delay_minutes,
            grace_minutes=self._classifier.grace_minutes,
            minor_max_minutes=self._minor_max,
        )

    def daily_overview(
        self,
        day: date,
        *,
        trend_days: int = DEFAULT_TREND_DAYS,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
    ) -> OverviewData:
        records = self._attendance.list_for_date(day)

        on_time = late = 0
        for r in records:
            outcome = self.grade(r).outcome
            if outcome == Punctuality.ON_TIME:
                on_time += 1
            elif outcome == Punctuality.LATE:
                late += 1

        checked_in = {r.teacher_id for r in records}
        teachers = self._roster.list_teachers()
        absent = sum(1 for t in teachers if t.teacher_id not in checked_in)

        first_day = day - timedelta(days=trend_days - 1)
        counts: dict[date, int] = {first_day + timedelta(days=i): 0 for i in range(trend_days)}
        for r in self._attendance.list_range(start=first_day, end=day):
            counts[r.work_date] += 1

        recent = [self._activity_row(r) for r in self._attendance.get_recent(recent_limit)]

        return OverviewData(
            on_time=on_time,
            late=late,
            absent=absent,
            trend=sorted(counts.items()),
            recent=recent,
        )

    def teacher_daily_rows(self, teacher_id: str, day: date) -> list[dict]:
        teacher = self._require_teacher(teacher_id)
        records = self._attendance.list_range(start=day, end=day, teacher_id=teacher.teacher_id)
        by_period = {}
        for r in records:
            by_period.setdefault(r.period_id, r)

        rows = []
        for p in self._calendar.teaching_periods_for(day):
            record = by_period.get(p.period_id)
            if not record:
                rows.append({"period_id": p.period_id, "period": p.name, "check_in": "-", "delay_minutes": None, "band": None})
                continue

            result = self._classifier.classify(p, record.timestamp)
            rows.append(
                {
                    "period_id": p.period_id,
                    "period": p.name,
                    "check_in": format_clock(record.timestamp),
                    "delay_minutes": result.delay_minutes,
                    "band": self.band(result.delay_minutes).value,
                }
            )
        return rows

    def teacher_summary(self, teacher_id: str, *, window: SummaryWindow, today: date) -> dict:
        teacher = self._require_teacher(teacher_id)
        window = SummaryWindow(window)
        if window == SummaryWindow.WEEKLY:
            start = today - timedelta(days=WEEKLY_SUMMARY_DAYS - 1)
        else:
            start = today.replace(day=1)

        summary = {band.value: 0 for band in LatenessBand}
        for r in self._attendance.list_range(start=start, end=today, teacher_id=teacher.teacher_id):
            result = self.grade(r)
            if not result.is_graded:
                continue
            summary[self.band(result.delay_minutes).value] += 1

        summary.update({"teacher_id": teacher.teacher_id, "window": window.value, "start": start.isoformat()})
        return summary

    def class_period_matrix(self, day: date, *, grade: Optional[int] = None) -> MatrixData:
        periods = self._calendar.teaching_periods_for(day)
        columns = [{"period_id": p.period_id, "label": f"P{p.period_id}", "name": p.name} for p in periods]

        classrooms = [c for c in self._roster.list_classrooms() if grade is None or c.grade == int(grade)]
        classrooms.sort(key=lambda c: _natural_key(c.name))

        by_cell: dict[tuple[str, str], AttendanceRecord] = {}
        for r in self._attendance.list_for_date(day):
            by_cell.setdefault((r.class_name, r.period_id), r)

        rows = []
        for c in classrooms:
            cells = []
            for p in periods:
                record = by_cell.get((c.name, p.period_id))
                if not record:
                    cells.append(None)
                    continue
                cells.append(
                    {
                        "teacher_name": record.teacher_name,
                        "time": format_clock(record.timestamp),
                        "outcome": self._classifier.classify(p, record.timestamp).outcome.value,
                    }
                )
            rows.append({"classroom_id": c.classroom_id, "class_name": c.name, "cells": cells})

        return MatrixData(columns=columns, rows=rows)

    def _activity_row(self, r: AttendanceRecord) -> dict:
        return {
            "record_id": r.record_id,
            "teacher_name": r.teacher_name,
            "class_name": r.class_name,
            "subject": r.subject or "",
            "time": format_clock(r.timestamp),
            "date": r.work_date.isoformat(),
            "status": self.grade(r).outcome.value,
        }

    def _require_teacher(self, teacher_id: str):
        teacher = self._roster.get_teacher(str(teacher_id))
        if not teacher:
            raise NotFoundError(f"Teacher {teacher_id} does not exist")
        return teacher
