"""Tests for PrescriptionEngine — end-to-end weight and rep suggestions."""

from __future__ import annotations

import pytest

from helpers import completed, make_location, rating, soreness
from strength_engine.engine import (
    PrescriptionEngine,
    prescribe,
    prescribe_reps,
    prescribe_weight,
    prescription_context,
)
from strength_engine.models.enums import JointPain, Soreness
from strength_engine.models.events import SetCompleted
from strength_engine.models.prescription import Prescription

QUADS = ("quads",)


@pytest.fixture
def last_week() -> list[SetCompleted]:
    """Microcycle 0: squat 100 x 10."""
    return [completed(100, 10, timestamp=1000)]


class TestNoHistory:
    def test_returns_empty_prescription(self) -> None:
        result = prescribe([], make_location())
        assert result == Prescription(weight=None, reps=None)
        assert not result.has_history

    def test_same_microcycle_is_not_history(self, last_week: list) -> None:
        assert prescribe(last_week, make_location(microcycle=0)) == Prescription()

    def test_context_is_none(self) -> None:
        assert PrescriptionEngine().context([], make_location()) is None
        assert prescription_context([], make_location()) is None


class TestBaseProgression:
    def test_adds_increment_and_keeps_reps(self, last_week: list) -> None:
        result = prescribe(last_week, make_location())
        assert result.weight == pytest.approx(102.5)
        assert result.reps == 10

    def test_heavier_override_reduces_reps(self, last_week: list) -> None:
        reps = prescribe_reps(last_week, make_location(), actual_weight=110)
        assert reps is not None
        assert reps < 10
        assert reps == 7

    def test_lighter_override_keeps_at_least_last_reps(self, last_week: list) -> None:
        reps = prescribe_reps(last_week, make_location(), actual_weight=95)
        assert reps is not None
        assert reps >= 10

    def test_override_at_prescribed_weight_keeps_reps(self, last_week: list) -> None:
        assert prescribe_reps(last_week, make_location(), actual_weight=102.5) == 10

    def test_override_does_not_change_weight(self, last_week: list) -> None:
        result = prescribe(last_week, make_location(), actual_weight=110)
        assert result.weight == pytest.approx(102.5)

    def test_uses_latest_earlier_microcycle(self) -> None:
        events = [
            completed(100, 10, timestamp=1, microcycle=0),
            completed(102.5, 11, timestamp=2, microcycle=1),
        ]
        result = prescribe(events, make_location(microcycle=2))
        assert result.weight == pytest.approx(105)
        assert result.reps == 11

    def test_custom_base_increment(self, last_week: list) -> None:
        result = PrescriptionEngine(base_increment=5.0).prescribe(last_week, make_location())
        assert result.weight == pytest.approx(105)

    def test_bodyweight_history_keeps_reps(self) -> None:
        events = [completed(0, 15, timestamp=1)]
        assert prescribe_reps(events, make_location(), actual_weight=10) == 15


class TestFeedbackWeighted:
    def test_still_sore_halves_increment(self, last_week: list) -> None:
        events = last_week + [soreness(Soreness.STILL_SORE, 1001)]
        weight = prescribe_weight(events, make_location(), muscle_groups=QUADS)
        assert weight == pytest.approx(101.25)

    def test_severe_joint_pain_holds_weight(self, last_week: list) -> None:
        events = last_week + [
            soreness(Soreness.NEVER_SORE, 1001),
            rating(1002, joint_pain=JointPain.SEVERE),
        ]
        weight = prescribe_weight(events, make_location(), muscle_groups=QUADS)
        assert weight == pytest.approx(100)

    def test_feedback_ignored_without_muscle_groups(self, last_week: list) -> None:
        events = last_week + [soreness(Soreness.STILL_SORE, 1001)]
        assert prescribe_weight(events, make_location()) == pytest.approx(102.5)

    def test_context_carries_explanation(self, last_week: list) -> None:
        events = last_week + [soreness(Soreness.STILL_SORE, 1001)]
        ctx = PrescriptionEngine().context(events, make_location(), muscle_groups=QUADS)
        assert ctx is not None
        assert ctx.adjustment is not None
        assert "quads" in ctx.adjustment.explanation
        assert ctx.one_rep_max == pytest.approx(133.333, rel=1e-4)
