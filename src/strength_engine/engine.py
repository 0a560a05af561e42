"""PrescriptionEngine — suggests weight and reps for a set slot.

Principles:
    - No planning ahead: prescriptions are computed on the fly from events.
    - Weight first: each microcycle adds a feedback-weighted increment to
      the last performed weight.
    - Reps follow the %1RM curve when the lifter picks a different weight,
      and dropping the weight never suggests fewer reps than last time.
    - No history, no suggestion: a starting weight is never invented.

Example:
    Last session 100 x 10 -> prescribed 102.5 x 10. Picking 110 predicts
    7 reps from the curve; picking 95 keeps at least 10.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from strength_engine.math.one_rep_max import estimate_one_rep_max, reps_at_weight
from strength_engine.models.enums import BASE_WEIGHT_INCREMENT
from strength_engine.models.events import Event
from strength_engine.models.location import Location
from strength_engine.models.prescription import Prescription, PrescriptionContext
from strength_engine.progression.history import last_performance
from strength_engine.progression.increment import compute_weight_increment


class PrescriptionEngine:
    """Computes prescriptions from the event log.

    Usage:
        engine = PrescriptionEngine()
        prescription = engine.prescribe(log.all_events(), location)
        adjusted = engine.prescribe(events, location, actual_weight=110,
                                    muscle_groups=("quads",))
    """

    def __init__(self, base_increment: float = BASE_WEIGHT_INCREMENT) -> None:
        self.base_increment = base_increment

    def context(
        self,
        events: Iterable[Event],
        location: Location,
        actual_weight: float | None = None,
        muscle_groups: Sequence[str] | None = None,
    ) -> PrescriptionContext | None:
        """Gather the inputs of a prescription. None when the slot has no history."""
        events = list(events)
        last = last_performance(events, location)
        if last is None:
            return None

        adjustment = compute_weight_increment(
            events, location, muscle_groups, base_increment=self.base_increment
        )
        one_rm = (
            estimate_one_rep_max(last.performed_weight, last.performed_reps)
            if last.performed_weight > 0
            else 0.0
        )
        return PrescriptionContext(
            last_weight=last.performed_weight,
            last_reps=last.performed_reps,
            increment=adjustment.increment,
            one_rep_max=one_rm,
            prescribed_weight=last.performed_weight + adjustment.increment,
            actual_weight=actual_weight,
            adjustment=adjustment,
        )

    def prescribe(
        self,
        events: Iterable[Event],
        location: Location,
        actual_weight: float | None = None,
        muscle_groups: Sequence[str] | None = None,
    ) -> Prescription:
        """Suggest weight and reps for ``location``.

        Args:
            events: The event log.
            location: Slot being prescribed.
            actual_weight: Weight the lifter chose instead, if any.
            muscle_groups: Muscle groups of the exercise, for feedback.

        Returns:
            Prescription with both fields None when there is no history.
        """
        ctx = self.context(events, location, actual_weight, muscle_groups)
        if ctx is None:
            return Prescription()
        return Prescription(weight=ctx.prescribed_weight, reps=self.reps_for(ctx))

    @staticmethod
    def reps_for(ctx: PrescriptionContext) -> int:
        """Rep target for a context.

        Without an override the lifter repeats last time's reps at the new
        weight. A lighter-or-equal override never drops below last reps; a
        heavier one follows the curve down to 1.
        """
        if ctx.actual_weight is None:
            return ctx.last_reps
        if ctx.one_rep_max <= 0:
            # Unloaded history (e.g. bodyweight at 0): the curve says nothing
            return ctx.last_reps
        predicted = reps_at_weight(ctx.one_rep_max, ctx.actual_weight)
        if ctx.actual_weight <= ctx.prescribed_weight:
            return max(ctx.last_reps, predicted)
        return predicted


_default_engine = PrescriptionEngine()


def prescription_context(
    events: Iterable[Event],
    location: Location,
    actual_weight: float | None = None,
    muscle_groups: Sequence[str] | None = None,
) -> PrescriptionContext | None:
    """Module-level shortcut for :meth:`PrescriptionEngine.context`."""
    return _default_engine.context(events, location, actual_weight, muscle_groups)


def prescribe(
    events: Iterable[Event],
    location: Location,
    actual_weight: float | None = None,
    muscle_groups: Sequence[str] | None = None,
) -> Prescription:
    """Module-level shortcut for :meth:`PrescriptionEngine.prescribe`."""
    return _default_engine.prescribe(events, location, actual_weight, muscle_groups)


def prescribe_weight(
    events: Iterable[Event],
    location: Location,
    muscle_groups: Sequence[str] | None = None,
) -> float | None:
    """Last performed weight plus the feedback-weighted increment, or None."""
    return prescribe(events, location, None, muscle_groups).weight


def prescribe_reps(
    events: Iterable[Event],
    location: Location,
    actual_weight: float | None = None,
    muscle_groups: Sequence[str] | None = None,
) -> int | None:
    """Rep target for the slot, adjusted for ``actual_weight``, or None."""
    return prescribe(events, location, actual_weight, muscle_groups).reps
