"""Plan and progress-view tree types.

Both trees share one shape::

    mesocycle -> microcycle -> workout -> exercise -> [SetEntry, ...]

A plan holds only planned fields; the progress view overlays performance
data onto the same entries.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from strength_engine.models.enums import NOT_PERFORMED_EVENT_TYPES, EventType


@dataclass(frozen=True)
class SetEntry:
    """One set slot, planned and (optionally) performed."""

    # Planned
    exercise_name: str | None = None
    muscle_groups: tuple[str, ...] = field(default_factory=tuple)

    # Overlaid from the winning set event
    type: EventType | None = None
    performed_weight: float | None = None
    performed_reps: int | None = None
    prescribed_weight: float | None = None
    prescribed_reps: int | None = None
    event_id: str | None = None

    # Provenance when the exercise was swapped out
    original_exercise: str | None = None

    @property
    def is_completed(self) -> bool:
        """Actually performed (not skipped or rejected)."""
        return self.performed_weight is not None

    @property
    def is_done(self) -> bool:
        """Performed, skipped or rejected."""
        return self.is_completed or self.type in NOT_PERFORMED_EVENT_TYPES


WorkoutSets = dict[str, list[SetEntry]]  # exercise -> sets
Microcycle = dict[str, WorkoutSets]  # workout -> exercises
Mesocycle = dict[int, Microcycle]  # microcycle index -> workouts
Plan = dict[str, Mesocycle]  # mesocycle name -> microcycles

# The progress view has the plan's shape
ProgressView = Plan
