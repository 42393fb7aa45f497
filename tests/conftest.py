from __future__ import annotations

from datetime import datetime

import pytest

from teacher_checkin.container import build_container
from teacher_checkin.roster.seed import seed_demo_roster

MONDAY = datetime(2024, 11, 18)
FRIDAY = datetime(2024, 11, 22)
SATURDAY = datetime(2024, 11, 23)


@pytest.fixture
def fixed_now() -> datetime:
    # Monday 08:00, five minutes into Period 1
    return MONDAY.replace(hour=8, minute=0)


@pytest.fixture
def container():
    c = build_container()
    seed_demo_roster(c.roster_repo)
    return c
