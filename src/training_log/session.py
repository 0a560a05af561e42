"""Hosting session: one event log, its saved snapshot, and the active plan.

Loads the saved log at startup and snapshots it after every mutation. All
derived views are recomputed from the log on each call.
"""

from __future__ import annotations

import logging
from typing import Sequence

from strength_engine.engine import PrescriptionEngine
from strength_engine.event_log import EventLog
from strength_engine.models.enums import FeedbackKind
from strength_engine.models.location import Location, WorkoutLocation
from strength_engine.models.plan import Plan, ProgressView, WorkoutSets
from strength_engine.models.prescription import Prescription
from strength_engine.state.feedback import (
    FeedbackRequest,
    last_active_workout,
    next_feedback_request,
    workout_sets,
)
from strength_engine.state.progress import view_progress
from strength_engine.state.swaps import apply_swaps, get_swaps
from strength_engine.templates import DEFAULT_TEMPLATE, PlanTemplate, expand_template

from training_log.exceptions import LogStoreError
from training_log.store import LogFileStore

logger = logging.getLogger(__name__)


class TrainingSession:
    """Facade the UI talks to."""

    def __init__(
        self,
        store: LogFileStore,
        template: PlanTemplate = DEFAULT_TEMPLATE,
        log: EventLog | None = None,
        engine: PrescriptionEngine | None = None,
    ) -> None:
        self.store = store
        self.template = template
        self.log = log or EventLog()
        self.engine = engine or PrescriptionEngine()
        self._dismissed: set[tuple[FeedbackKind, str]] = set()

        self._restore()
        self._unsubscribe = self.log.subscribe(self._save)

    def close(self) -> None:
        """Stop snapshotting the log."""
        self._unsubscribe()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _restore(self) -> None:
        try:
            text = self.store.read()
        except LogStoreError as exc:
            logger.error("Could not read saved log, starting empty: %s", exc)
            return
        self.log.load(text)
        logger.info("Loaded %d events from %s", len(self.log), self.store.path)

    def _save(self, log: EventLog) -> None:
        try:
            self.store.write(log.serialize())
        except LogStoreError as exc:
            logger.error("Failed to save event log: %s", exc)

    def clear(self) -> None:
        """Drop all history; the empty log is saved like any other change."""
        self.log.clear()
        self._dismissed.clear()

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def plan(self) -> Plan:
        return expand_template(self.template)

    def progress(self) -> ProgressView:
        return view_progress(self.log.all_events(), self.plan)

    def active_workout(self) -> WorkoutLocation | None:
        return last_active_workout(self.log.all_events())

    def workout_view(self, loc: WorkoutLocation) -> WorkoutSets:
        """Exercises of a workout with progress and swaps applied."""
        events = self.log.all_events()
        sets = workout_sets(view_progress(events, self.plan), loc)
        return apply_swaps(sets, get_swaps(events, loc))

    def prescribe(
        self,
        location: Location,
        actual_weight: float | None = None,
        muscle_groups: Sequence[str] | None = None,
    ) -> Prescription:
        """Prescription for a slot; muscle groups default to the slot's planned ones."""
        if muscle_groups is None:
            muscle_groups = self._slot_muscle_groups(location)
        return self.engine.prescribe(
            self.log.all_events(), location, actual_weight, muscle_groups
        )

    def next_feedback(self) -> FeedbackRequest | None:
        """The one feedback prompt to show for the last active workout."""
        events = self.log.all_events()
        return next_feedback_request(
            events,
            view_progress(events, self.plan),
            last_active_workout(events),
            dismissed=self._dismissed,
        )

    def dismiss(self, request: FeedbackRequest) -> None:
        """Stop asking for this prompt until the session ends."""
        self._dismissed.add((request.kind, request.muscle_group))

    def _slot_muscle_groups(self, location: Location) -> tuple[str, ...] | None:
        sets = self.workout_view(location.workout_location).get(location.exercise, [])
        if not sets:
            return None
        # Extra sets past the plan borrow the exercise's first set
        entry = sets[location.set_index] if location.set_index < len(sets) else sets[0]
        return entry.muscle_groups or None
