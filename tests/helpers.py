"""Builders for locations, plan entries and events shared by the tests."""

from __future__ import annotations

from strength_engine.models.enums import JointPain, Soreness, Workload
from strength_engine.models.events import (
    SessionRated,
    SetCompleted,
    SorenessReported,
)
from strength_engine.models.location import Location, WorkoutLocation
from strength_engine.models.plan import SetEntry

PLAN_NAME = "My Plan"


def squat_set() -> SetEntry:
    return SetEntry(exercise_name="Squat", muscle_groups=("quads",))


def press_set() -> SetEntry:
    return SetEntry(exercise_name="Press", muscle_groups=("shoulders",))


def make_location(
    exercise: str = "Squat",
    set_index: int = 0,
    microcycle: int = 1,
    workout: str = "monday",
    mesocycle: str = PLAN_NAME,
) -> Location:
    return Location(
        mesocycle=mesocycle,
        microcycle=microcycle,
        workout=workout,
        exercise=exercise,
        set_index=set_index,
    )


def make_workout(microcycle: int = 0, workout: str = "monday") -> WorkoutLocation:
    return WorkoutLocation(mesocycle=PLAN_NAME, microcycle=microcycle, workout=workout)


def completed(
    weight: float,
    reps: int,
    timestamp: int,
    exercise: str = "Squat",
    set_index: int = 0,
    microcycle: int = 0,
    workout: str = "monday",
) -> SetCompleted:
    return SetCompleted(
        location=make_location(exercise, set_index, microcycle, workout),
        performed_weight=weight,
        performed_reps=reps,
        id=f"evt-{timestamp}",
        timestamp=timestamp,
    )


def soreness(
    value: Soreness, timestamp: int, muscle_group: str = "quads", microcycle: int = 0
) -> SorenessReported:
    return SorenessReported(
        workout=make_workout(microcycle),
        muscle_group=muscle_group,
        soreness=value,
        timestamp=timestamp,
    )


def rating(
    timestamp: int,
    joint_pain: JointPain = JointPain.NONE,
    workload: Workload = Workload.JUST_RIGHT,
    muscle_group: str = "quads",
    microcycle: int = 0,
    pump: int = 2,
) -> SessionRated:
    return SessionRated(
        workout=make_workout(microcycle),
        muscle_group=muscle_group,
        pump=pump,
        joint_pain=joint_pain,
        sets_workload=workload,
        timestamp=timestamp,
    )
