"""Reconstruct workout progress from the event log.

:func:`view_progress` merges a flat list of events (what was done) with a
plan (what should be done) into one tree showing both. Each level of the
tree has its own merge function, so the fold follows the tree's types:

    mesocycle -> microcycle -> workout -> exercise -> [SetEntry, ...]

The plan's key order is canonical at every level; keys only the overlay
has are appended after it.
"""

from __future__ import annotations

import dataclasses
from typing import Callable, Iterable, TypeVar

from strength_engine.models.events import Event, SetCompleted, SetEvent, is_set_event
from strength_engine.models.location import Location
from strength_engine.models.plan import (
    Mesocycle,
    Microcycle,
    Plan,
    ProgressView,
    SetEntry,
    WorkoutSets,
)

K = TypeVar("K")
V = TypeVar("V")

_EMPTY_SET = SetEntry()


def view_progress(events: Iterable[Event], plan: Plan) -> ProgressView:
    """Overlay performed, skipped and rejected sets onto the plan.

    Args:
        events: The event log, any order.
        plan: Plan tree; never mutated.

    Returns:
        A new tree with the plan's shape. Set lists grow past the plan when
        an event addresses a set index the plan does not have.
    """
    latest = dedupe_by_latest(e for e in events if is_set_event(e))
    overlay = events_to_overlay(latest)
    return _merge_ordered(plan, overlay, _merge_mesocycle)


def dedupe_by_latest(events: Iterable[SetEvent]) -> list[SetEvent]:
    """Keep only the newest event per set Location.

    Later corrections supersede earlier entries. Equal timestamps go to the
    event that comes later in the input.
    """
    winners: dict[Location, SetEvent] = {}
    for event in events:
        current = winners.get(event.location)
        if current is None or event.timestamp >= current.timestamp:
            winners[event.location] = event
    return list(winners.values())


def events_to_overlay(events: Iterable[SetEvent]) -> ProgressView:
    """Nest set events into the plan's shape, padding set lists with empty slots."""
    overlay: ProgressView = {}
    for event in events:
        loc = event.location
        sets = (
            overlay.setdefault(loc.mesocycle, {})
            .setdefault(loc.microcycle, {})
            .setdefault(loc.workout, {})
            .setdefault(loc.exercise, [])
        )
        if len(sets) <= loc.set_index:
            sets.extend([_EMPTY_SET] * (loc.set_index + 1 - len(sets)))
        sets[loc.set_index] = _entry_from_event(event)
    return overlay


# ---------------------------------------------------------------------------
# Structural merge, one function per tree level
# ---------------------------------------------------------------------------


def _merge_mesocycle(planned: Mesocycle, performed: Mesocycle) -> Mesocycle:
    return _merge_ordered(planned, performed, _merge_microcycle)


def _merge_microcycle(planned: Microcycle, performed: Microcycle) -> Microcycle:
    return _merge_ordered(planned, performed, _merge_workout)


def _merge_workout(planned: WorkoutSets, performed: WorkoutSets) -> WorkoutSets:
    return _merge_ordered(planned, performed, merge_sets)


def merge_sets(planned: list[SetEntry], performed: list[SetEntry]) -> list[SetEntry]:
    """Combine two set lists element-wise; performed fields win."""
    merged: list[SetEntry] = []
    for index in range(max(len(planned), len(performed))):
        plan_entry = planned[index] if index < len(planned) else None
        done_entry = performed[index] if index < len(performed) else None
        if plan_entry is None:
            merged.append(done_entry or _EMPTY_SET)
        elif done_entry is None:
            merged.append(plan_entry)
        else:
            merged.append(overlay_entry(plan_entry, done_entry))
    return merged


def overlay_entry(planned: SetEntry, performed: SetEntry) -> SetEntry:
    """Fields set on ``performed`` replace the planned ones; the rest is kept."""
    changes = {}
    for f in dataclasses.fields(SetEntry):
        value = getattr(performed, f.name)
        if value != getattr(_EMPTY_SET, f.name):
            changes[f.name] = value
    return dataclasses.replace(planned, **changes) if changes else planned


def _merge_ordered(
    planned: dict[K, V],
    performed: dict[K, V],
    merge_child: Callable[[V, V], V],
) -> dict[K, V]:
    merged: dict[K, V] = {}
    for key, plan_value in planned.items():
        if key in performed:
            merged[key] = merge_child(plan_value, performed[key])
        else:
            merged[key] = plan_value
    for key, performed_value in performed.items():
        if key not in merged:
            merged[key] = performed_value
    return merged


def _entry_from_event(event: SetEvent) -> SetEntry:
    if isinstance(event, SetCompleted):
        return SetEntry(
            type=event.type,
            performed_weight=event.performed_weight,
            performed_reps=event.performed_reps,
            prescribed_weight=event.prescribed_weight,
            prescribed_reps=event.prescribed_reps,
            event_id=event.id or None,
        )
    return SetEntry(type=event.type, event_id=event.id or None)
