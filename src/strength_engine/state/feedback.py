"""Which muscle groups still need soreness or session feedback.

A muscle group needs a soreness report once any of its sets in the workout
was performed, and a session rating once every one of its sets is done
(performed, skipped or rejected) with at least one performed. Feedback
already logged for the same workout and muscle group is never asked for
again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Collection, Iterable, Sequence

from strength_engine.models.enums import EventType, FeedbackKind
from strength_engine.models.events import (
    Event,
    SessionRated,
    SetCompleted,
    SorenessReported,
    workout_of,
)
from strength_engine.models.location import WorkoutLocation
from strength_engine.models.plan import ProgressView, SetEntry, WorkoutSets


@dataclass(frozen=True)
class FeedbackRequest:
    """The single feedback prompt the UI should show next."""

    kind: FeedbackKind
    muscle_group: str
    workout: WorkoutLocation


def last_active_workout(events: Iterable[Event]) -> WorkoutLocation | None:
    """Workout of the most recently performed set (skips and rejects ignored)."""
    latest: SetCompleted | None = None
    for event in events:
        if isinstance(event, SetCompleted) and (
            latest is None or event.timestamp >= latest.timestamp
        ):
            latest = event
    return latest.location.workout_location if latest else None


def workout_sets(progress: ProgressView, loc: WorkoutLocation) -> WorkoutSets:
    """Exercises of one workout in the progress view, empty if absent."""
    return progress.get(loc.mesocycle, {}).get(loc.microcycle, {}).get(loc.workout, {})


def muscle_group_sets(
    progress: ProgressView, loc: WorkoutLocation, muscle_group: str
) -> list[SetEntry]:
    """All sets of the workout, across exercises, that train ``muscle_group``."""
    return [
        entry
        for sets in workout_sets(progress, loc).values()
        for entry in sets
        if muscle_group in entry.muscle_groups
    ]


def workout_muscle_groups(progress: ProgressView, loc: WorkoutLocation) -> list[str]:
    """Distinct muscle groups trained in a workout, in plan order."""
    seen: dict[str, None] = {}
    for sets in workout_sets(progress, loc).values():
        for entry in sets:
            for group in entry.muscle_groups:
                seen.setdefault(group, None)
    return list(seen)


def feedback_reported(
    events: Iterable[Event],
    event_type: EventType,
    loc: WorkoutLocation,
    muscle_group: str,
) -> bool:
    """Has feedback of ``event_type`` been logged for this workout and muscle group?"""
    return any(
        isinstance(e, (SorenessReported, SessionRated))
        and e.type == event_type
        and e.muscle_group == muscle_group
        and workout_of(e) == loc
        for e in events
    )


def muscle_group_started(progress: ProgressView, loc: WorkoutLocation, muscle_group: str) -> bool:
    return any(s.is_completed for s in muscle_group_sets(progress, loc, muscle_group))


def muscle_group_finished(progress: ProgressView, loc: WorkoutLocation, muscle_group: str) -> bool:
    sets = muscle_group_sets(progress, loc, muscle_group)
    return any(s.is_completed for s in sets) and all(s.is_done for s in sets)


def pending_feedback(
    events: Sequence[Event],
    progress: ProgressView,
    loc: WorkoutLocation,
    muscle_groups: Iterable[str],
    event_type: EventType,
    needs_feedback: Callable[[ProgressView, WorkoutLocation, str], bool],
) -> list[str]:
    """Muscle groups, in the given order, that qualify and have no feedback yet."""
    return [
        group
        for group in muscle_groups
        if needs_feedback(progress, loc, group)
        and not feedback_reported(events, event_type, loc, group)
    ]


def pending_soreness_feedback(
    events: Sequence[Event],
    progress: ProgressView,
    loc: WorkoutLocation,
    muscle_groups: Iterable[str],
) -> list[str]:
    """Muscle groups started in this workout with no soreness report."""
    return pending_feedback(
        events, progress, loc, muscle_groups,
        EventType.SORENESS_REPORTED, muscle_group_started,
    )


def pending_session_rating(
    events: Sequence[Event],
    progress: ProgressView,
    loc: WorkoutLocation,
    muscle_groups: Iterable[str],
) -> list[str]:
    """Muscle groups finished in this workout with no session rating."""
    return pending_feedback(
        events, progress, loc, muscle_groups,
        EventType.SESSION_RATED, muscle_group_finished,
    )


def next_feedback_request(
    events: Sequence[Event],
    progress: ProgressView,
    loc: WorkoutLocation | None,
    muscle_groups: Sequence[str] | None = None,
    dismissed: Collection[tuple[FeedbackKind, str]] = (),
) -> FeedbackRequest | None:
    """Pick the one feedback prompt to surface, if any.

    Soreness requests come before session ratings; within each kind the
    first muscle group in order wins. Prompts the user dismissed this
    session are passed over.

    Args:
        events: The event log.
        progress: Progress view built from the same events.
        loc: Workout to ask about, usually :func:`last_active_workout`.
        muscle_groups: Groups to consider; defaults to the workout's own.
        dismissed: ``(kind, muscle_group)`` pairs not to ask about again.
    """
    if loc is None:
        return None
    if muscle_groups is None:
        muscle_groups = workout_muscle_groups(progress, loc)

    candidates = (
        (FeedbackKind.SORENESS, pending_soreness_feedback(events, progress, loc, muscle_groups)),
        (FeedbackKind.SESSION, pending_session_rating(events, progress, loc, muscle_groups)),
    )
    for kind, groups in candidates:
        for group in groups:
            if (kind, group) not in dismissed:
                return FeedbackRequest(kind=kind, muscle_group=group, workout=loc)
    return None
