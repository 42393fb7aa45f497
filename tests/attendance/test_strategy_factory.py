from teacher_checkin.attendance.factory import PunctualityStrategyFactory
from teacher_checkin.attendance.strategies.late_strategy import LateStrategy
from teacher_checkin.attendance.strategies.not_applicable_strategy import NotApplicableStrategy
from teacher_checkin.attendance.strategies.on_time_strategy import OnTimeStrategy
from teacher_checkin.core.enums import PeriodKind
from teacher_checkin.schedule.model import Period

PERIOD = Period.from_clock(1, "Period 1", "07:55", "08:35")


def test_factory_on_time_within_grace():
    factory = PunctualityStrategyFactory()
    strategy = factory.for_delay(period=PERIOD, delay_minutes=5, grace_minutes=5)

    assert isinstance(strategy, OnTimeStrategy)


def test_factory_late_after_grace():
    factory = PunctualityStrategyFactory()
    strategy = factory.for_delay(period=PERIOD, delay_minutes=6, grace_minutes=5)

    assert isinstance(strategy, LateStrategy)


def test_factory_not_applicable_for_break_or_gap():
    interval = Period.from_clock("Interval", "Interval", "10:35", "10:55", PeriodKind.BREAK)
    factory = PunctualityStrategyFactory()

    assert isinstance(factory.for_delay(period=interval, delay_minutes=30, grace_minutes=5), NotApplicableStrategy)
    assert isinstance(factory.for_delay(period=None, delay_minutes=0, grace_minutes=5), NotApplicableStrategy)


def test_not_applicable_strategy_zeroes_delay():
    result = NotApplicableStrategy().decide(period=None, delay_minutes=42)
    assert result.delay_minutes == 0
