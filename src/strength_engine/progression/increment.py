"""Feedback-weighted weight increment.

The base increment is scaled by how the slot's primary muscle group
recovered (soreness) and how the previous session felt (workload), both
taken from the immediately preceding microcycle. Reported joint pain
replaces that product outright.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from strength_engine.models.enums import (
    BASE_WEIGHT_INCREMENT,
    JOINT_PAIN_OVERRIDES,
    SORENESS_MODIFIERS,
    WORKLOAD_MODIFIERS,
)
from strength_engine.models.events import Event, SessionRated, SorenessReported
from strength_engine.models.location import Location
from strength_engine.models.prescription import IncrementAdjustment
from strength_engine.progression.history import latest_feedback


def compute_weight_increment(
    events: Iterable[Event],
    location: Location,
    muscle_groups: Sequence[str] | None = None,
    base_increment: float = BASE_WEIGHT_INCREMENT,
) -> IncrementAdjustment:
    """Derive the weight increment for a slot from last microcycle's feedback.

    Args:
        events: The event log.
        location: Slot being prescribed.
        muscle_groups: Muscle groups the exercise trains; only the first
            (primary) one is consulted. None or empty means no adjustment.
        base_increment: Weight added when feedback is neutral or missing.

    Returns:
        IncrementAdjustment whose ``increment`` is the weight to add.
    """
    if not muscle_groups or location.microcycle <= 0:
        return IncrementAdjustment(
            base_increment=base_increment,
            explanation="No feedback to apply: base increment.",
        )

    events = list(events)
    primary = muscle_groups[0]
    soreness_event = latest_feedback(events, SorenessReported, location, primary)
    session_event = latest_feedback(events, SessionRated, location, primary)

    soreness = soreness_event.soreness if soreness_event else None
    workload = session_event.sets_workload if session_event else None
    joint_pain = session_event.joint_pain if session_event else None

    override = JOINT_PAIN_OVERRIDES.get(joint_pain)
    if override is not None:
        return IncrementAdjustment(
            base_increment=base_increment,
            multiplier=override,
            soreness=soreness,
            sets_workload=workload,
            joint_pain=joint_pain,
            explanation=(
                f"Joint pain '{joint_pain.value}' on {primary}: increment scaled "
                f"to {override:.0%}, other feedback ignored."
            ),
        )

    soreness_mod = SORENESS_MODIFIERS.get(soreness, 1.0)
    workload_mod = WORKLOAD_MODIFIERS.get(workload, 1.0)
    return IncrementAdjustment(
        base_increment=base_increment,
        multiplier=soreness_mod * workload_mod,
        soreness=soreness,
        sets_workload=workload,
        joint_pain=joint_pain,
        explanation=(
            f"{primary}: soreness x{soreness_mod:g}, workload x{workload_mod:g}."
        ),
    )
