"""Shared test fixtures: sample plans, event histories, and a test clock."""

from __future__ import annotations

from typing import Callable, Iterator

import pytest

from helpers import PLAN_NAME, completed, press_set, squat_set
from strength_engine.event_log import EventLog
from strength_engine.models.events import SetCompleted
from strength_engine.models.plan import Plan


@pytest.fixture
def sample_plan() -> Plan:
    """One microcycle: two squat sets and one press set on Monday."""
    return {
        PLAN_NAME: {
            0: {
                "monday": {
                    "Squat": [squat_set(), squat_set()],
                    "Press": [press_set()],
                },
            },
        },
    }


@pytest.fixture
def squat_history() -> list[SetCompleted]:
    """Microcycle 0: squat 100x10 and 100x9, press 60x8."""
    return [
        completed(100, 10, timestamp=1000),
        completed(100, 9, timestamp=1001, set_index=1),
        completed(60, 8, timestamp=1002, exercise="Press"),
    ]


@pytest.fixture
def tick_clock() -> Callable[[], int]:
    """Deterministic millisecond clock advancing by 1 per call."""
    ticks: Iterator[int] = iter(range(1_000, 10_000_000))
    return lambda: next(ticks)


@pytest.fixture
def event_log(tick_clock: Callable[[], int]) -> EventLog:
    return EventLog(clock=tick_clock)
