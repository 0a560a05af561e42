"""Addresses for planned sets and workouts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WorkoutLocation:
    """One workout day within a microcycle of a mesocycle."""

    mesocycle: str
    microcycle: int  # 0-indexed week within the mesocycle
    workout: str  # Day keyword, e.g. "monday"


@dataclass(frozen=True)
class Location:
    """One specific planned set.

    Corrections are new events at the same Location; the latest one wins.
    """

    mesocycle: str
    microcycle: int
    workout: str
    exercise: str
    set_index: int  # 0-indexed

    @property
    def workout_location(self) -> WorkoutLocation:
        return WorkoutLocation(
            mesocycle=self.mesocycle,
            microcycle=self.microcycle,
            workout=self.workout,
        )
