from __future__ import annotations

from dataclasses import dataclass

from .attendance.classifier import AttendanceClassifier
from .attendance.factory import PunctualityStrategyFactory
from .attendance.memory_repository import InMemoryAttendanceRepository
from .attendance.service import CheckInService
from .core.constants import DEFAULT_LATE_GRACE_MINUTES, DEFAULT_MINOR_LATE_MAX_MINUTES
from .reports.service import AttendanceReportService
from .roster.memory_repository import InMemoryRosterRepository
from .roster.seed import seed_demo_roster
from .roster.service import RosterService
from .schedule.calendar import ScheduleCalendar
from .schedule.defaults import build_default_schedule
from .schedule.model import ScheduleConfig


@dataclass(frozen=True)
class Container:
    attendance_repo: InMemoryAttendanceRepository
    roster_repo: InMemoryRosterRepository

    calendar: ScheduleCalendar
    classifier: AttendanceClassifier

    checkin_service: CheckInService
    report_service: AttendanceReportService
    roster_service: RosterService


def build_container(
    *,
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    minor_late_max_minutes: int = DEFAULT_MINOR_LATE_MAX_MINUTES,
    weekend_off: bool = False,
    seed_demo_data: bool = False,
    schedule: ScheduleConfig | None = None,
) -> Container:
    attendance_repo = InMemoryAttendanceRepository()
    roster_repo = InMemoryRosterRepository()
    if seed_demo_data:
        seed_demo_roster(roster_repo)

    calendar = ScheduleCalendar(schedule or build_default_schedule(weekend_off=weekend_off))
    classifier = AttendanceClassifier(grace_minutes=grace_minutes, strategy_factory=PunctualityStrategyFactory())

    checkin_service = CheckInService(attendance_repo, roster_repo, calendar, classifier)
    report_service = AttendanceReportService(
        attendance_repo,
        roster_repo,
        calendar,
        classifier,
        minor_late_max_minutes=minor_late_max_minutes,
    )
    roster_service = RosterService(roster_repo)

    return Container(
        attendance_repo=attendance_repo,
        roster_repo=roster_repo,
        calendar=calendar,
        classifier=classifier,
        checkin_service=checkin_service,
        report_service=report_service,
        roster_service=roster_service,
    )
