from __future__ import annotations

from datetime import datetime, time, timedelta

import pytest

from teacher_checkin.attendance.classifier import AttendanceClassifier
from teacher_checkin.attendance.strategies.base import ClassificationResult
from teacher_checkin.core.enums import PeriodKind, Punctuality
from teacher_checkin.schedule.model import Period

PERIOD_1 = Period.from_clock(1, "Period 1", "07:55", "08:35")
INTERVAL = Period.from_clock("Interval", "Interval", "10:35", "10:55", PeriodKind.BREAK)


def _at(hour: int, minute: int, second: int = 0) -> datetime:
    return datetime(2024, 11, 18, hour, minute, second)


@pytest.fixture
def classifier() -> AttendanceClassifier:
    return AttendanceClassifier()


@pytest.mark.parametrize(
    "moment, delay, outcome",
    [
        (_at(8, 0), 5, Punctuality.ON_TIME),
        (_at(8, 10), 15, Punctuality.LATE),
        (_at(7, 50), -5, Punctuality.ON_TIME),
        (_at(8, 1), 6, Punctuality.LATE),
        (_at(7, 55), 0, Punctuality.ON_TIME),
        (_at(9, 0), 65, Punctuality.LATE),
    ],
)
def test_classify_regular_period_1(classifier, moment, delay, outcome):
    result = classifier.classify(PERIOD_1, moment)
    assert result == ClassificationResult(outcome=outcome, delay_minutes=delay)


def test_seconds_are_truncated(classifier):
    assert classifier.classify(PERIOD_1, _at(8, 0, 59)).delay_minutes == 5
    assert classifier.classify(PERIOD_1, _at(8, 0, 59)).outcome == Punctuality.ON_TIME


def test_break_and_missing_period_are_not_graded(classifier):
    for period in (None, INTERVAL):
        result = classifier.classify(period, _at(10, 45))
        assert result.outcome == Punctuality.NOT_APPLICABLE
        assert result.delay_minutes == 0
        assert not result.is_graded


def test_delay_is_exact_signed_difference(classifier):
    start = _at(0, 0)
    for minute in range(0, 24 * 60, 7):
        moment = start + timedelta(minutes=minute)
        expected = moment.hour * 60 + moment.minute - (7 * 60 + 55)
        assert classifier.classify(PERIOD_1, moment).delay_minutes == expected


def test_delay_strictly_increases_through_the_day(classifier):
    start = _at(0, 0)
    delays = [classifier.classify(PERIOD_1, start + timedelta(minutes=m)).delay_minutes for m in range(24 * 60)]
    assert all(a < b for a, b in zip(delays, delays[1:]))


def test_classify_is_idempotent(classifier):
    first = classifier.classify(PERIOD_1, _at(8, 7))
    second = classifier.classify(PERIOD_1, _at(8, 7))
    assert first == second
    assert first.outcome is second.outcome


def test_absurd_instants_still_yield_a_delay(classifier):
    result = classifier.classify(PERIOD_1, datetime(2099, 1, 1, 23, 59))
    assert result.outcome == Punctuality.LATE
    assert result.delay_minutes == 23 * 60 + 59 - (7 * 60 + 55)


def test_custom_grace_period_reclassifies():
    strict = AttendanceClassifier(grace_minutes=0)
    assert strict.classify(PERIOD_1, _at(7, 55)).outcome == Punctuality.ON_TIME
    assert strict.classify(PERIOD_1, _at(7, 56)).outcome == Punctuality.LATE


def test_accepts_plain_time_periods_built_directly(classifier):
    p = Period(period_id="5", name="Period 5", start=time(10, 55), end=time(11, 35))
    assert classifier.classify(p, _at(11, 0)).delay_minutes == 5
