"""History queries over the event log for a single set slot."""

from __future__ import annotations

from typing import Iterable, TypeVar

from strength_engine.models.events import (
    Event,
    SessionRated,
    SetCompleted,
    SorenessReported,
)
from strength_engine.models.location import Location

FeedbackEvent = TypeVar("FeedbackEvent", SorenessReported, SessionRated)


def same_slot(event: SetCompleted, location: Location) -> bool:
    """Same mesocycle, workout day, exercise and set index (any microcycle)."""
    loc = event.location
    return (
        loc.mesocycle == location.mesocycle
        and loc.workout == location.workout
        and loc.exercise == location.exercise
        and loc.set_index == location.set_index
    )


def all_performances(events: Iterable[Event], location: Location) -> list[SetCompleted]:
    """Every performed set for this slot across all microcycles, oldest first."""
    return sorted(
        (e for e in events if isinstance(e, SetCompleted) and same_slot(e, location)),
        key=lambda e: e.timestamp,
    )


def last_performance(events: Iterable[Event], location: Location) -> SetCompleted | None:
    """Most recent performed set for this slot in an earlier microcycle.

    Performances in the queried microcycle or later never count. Returns
    None when the slot has no earlier history.
    """
    earlier = [
        e for e in all_performances(events, location)
        if e.location.microcycle < location.microcycle
    ]
    return earlier[-1] if earlier else None


def latest_feedback(
    events: Iterable[Event],
    event_cls: type[FeedbackEvent],
    location: Location,
    muscle_group: str,
) -> FeedbackEvent | None:
    """Latest feedback of ``event_cls`` for a muscle group from the previous microcycle."""
    previous = location.microcycle - 1
    matching = [
        e for e in events
        if isinstance(e, event_cls)
        and e.workout.mesocycle == location.mesocycle
        and e.workout.microcycle == previous
        and e.muscle_group == muscle_group
    ]
    if not matching:
        return None
    return sorted(matching, key=lambda e: e.timestamp)[-1]
