"""Exercise swaps recorded for a single workout."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Iterable

from strength_engine.models.events import Event, ExerciseSwapped
from strength_engine.models.location import WorkoutLocation
from strength_engine.models.plan import WorkoutSets
from strength_engine.state.progress import merge_sets


@dataclass(frozen=True)
class Swap:
    """Replacement for one planned exercise."""

    name: str
    muscle_groups: tuple[str, ...]


def get_swaps(events: Iterable[Event], loc: WorkoutLocation) -> dict[str, Swap]:
    """Map original exercise name to its replacement for one workout.

    When the same exercise was swapped more than once, the latest swap wins.
    """
    swapped = sorted(
        (e for e in events if isinstance(e, ExerciseSwapped) and e.workout == loc),
        key=lambda e: e.timestamp,
    )
    swaps: dict[str, Swap] = {}
    for event in swapped:
        swaps[event.original_exercise] = Swap(
            name=event.replacement_exercise,
            muscle_groups=event.muscle_groups,
        )
    return swaps


def apply_swaps(workout_exercises: WorkoutSets, swaps: dict[str, Swap]) -> WorkoutSets:
    """Rename swapped exercises and tag their sets with provenance.

    Swapped sets take the swap's muscle groups and remember the original
    exercise name. Sets already logged under the replacement name are merged
    into the renamed list by set index. Other exercises pass through; order
    is preserved.
    """
    replacements = {
        swap.name for original, swap in swaps.items() if original in workout_exercises
    }
    result: WorkoutSets = {}
    for exercise, sets in workout_exercises.items():
        swap = swaps.get(exercise)
        if swap is None:
            if exercise not in replacements:
                result[exercise] = sets
            continue
        logged = workout_exercises.get(swap.name)
        if logged and swap.name not in swaps:
            sets = merge_sets(sets, logged)
        result[swap.name] = [
            dataclasses.replace(
                entry,
                muscle_groups=swap.muscle_groups,
                original_exercise=exercise,
            )
            for entry in sets
        ]
    return result
