"""Append-only event log — the single source of truth for training history.

Everything else (progress view, feedback prompts, prescriptions) is derived
from :meth:`EventLog.all_events` on every query.
"""

from __future__ import annotations

import dataclasses
import logging
import time
import uuid
from typing import Callable, Iterable

from strength_engine.exceptions import MigrationError
from strength_engine.models.enums import JointPain, Soreness, Workload
from strength_engine.models.events import (
    Event,
    ExerciseSwapped,
    SessionRated,
    SetCompleted,
    SetRejected,
    SetSkipped,
    SorenessReported,
)
from strength_engine.models.location import Location, WorkoutLocation
from strength_engine.serialization import from_json_string, to_json_string

logger = logging.getLogger(__name__)

Listener = Callable[["EventLog"], None]


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class EventLog:
    """Ordered, append-only store of immutable training events.

    Usage:
        log = EventLog()
        log.load(saved_text)
        log.log_set(location, weight=100, reps=10)
        saved_text = log.serialize()

    Listeners registered with :meth:`subscribe` run after every mutation,
    which is where a persistence collaborator snapshots the log.
    """

    def __init__(
        self,
        events: Iterable[Event] = (),
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._events: list[Event] = list(events)
        self._clock = clock
        self._listeners: list[Listener] = []
        self.version = 0

    def __len__(self) -> int:
        return len(self._events)

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def append(self, event: Event) -> Event:
        """Stamp an event with a fresh id and timestamp and store it."""
        stored = dataclasses.replace(event, id=uuid.uuid4().hex, timestamp=self._clock())
        self._events.append(stored)
        self._changed()
        return stored

    def all_events(self) -> list[Event]:
        """All events by ascending timestamp; ties keep append order."""
        return sorted(self._events, key=lambda e: e.timestamp)

    def clear(self) -> None:
        """Drop the whole history."""
        self._events = []
        self._changed()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def serialize(self) -> str:
        return to_json_string(self._events)

    def load(self, text: str | None) -> None:
        """Replace the log with a saved snapshot in any supported format.

        Never raises: unreadable data is logged and the log is left as it
        was.
        """
        if not text or not text.strip():
            return
        try:
            events = from_json_string(text)
        except MigrationError as exc:
            logger.warning("Event log migration failed, keeping current log: %s", exc)
            return
        self._events = events
        self._changed()

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(log)`` after each mutation. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        self.version += 1
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Event-creating operations
    # ------------------------------------------------------------------

    def log_set(
        self,
        location: Location,
        weight: float,
        reps: int,
        prescribed_weight: float | None = None,
        prescribed_reps: int | None = None,
    ) -> SetCompleted:
        """Record a performed set."""
        return self.append(
            SetCompleted(
                location=location,
                performed_weight=weight,
                performed_reps=reps,
                prescribed_weight=prescribed_weight,
                prescribed_reps=prescribed_reps,
            )
        )

    def skip_set(self, location: Location) -> SetSkipped:
        return self.append(SetSkipped(location=location))

    def reject_set(self, location: Location) -> SetRejected:
        """Record that the user declined a set because volume was enough."""
        return self.append(SetRejected(location=location))

    def swap_exercise(
        self,
        workout: WorkoutLocation,
        original_exercise: str,
        replacement_exercise: str,
        muscle_groups: Iterable[str] = (),
    ) -> ExerciseSwapped:
        return self.append(
            ExerciseSwapped(
                workout=workout,
                original_exercise=original_exercise,
                replacement_exercise=replacement_exercise,
                muscle_groups=tuple(muscle_groups),
            )
        )

    def report_soreness(
        self, workout: WorkoutLocation, muscle_group: str, soreness: Soreness | str
    ) -> SorenessReported:
        return self.append(
            SorenessReported(
                workout=workout,
                muscle_group=muscle_group,
                soreness=Soreness(soreness),
            )
        )

    def rate_session(
        self,
        workout: WorkoutLocation,
        muscle_group: str,
        pump: int,
        joint_pain: JointPain | str,
        sets_workload: Workload | str,
    ) -> SessionRated:
        return self.append(
            SessionRated(
                workout=workout,
                muscle_group=muscle_group,
                pump=pump,
                joint_pain=JointPain(joint_pain),
                sets_workload=Workload(sets_workload),
            )
        )
