"""Immutable training facts stored in the event log.

Each variant carries only its own fields. ``id`` and ``timestamp`` stay empty
until :meth:`EventLog.append` assigns them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from strength_engine.exceptions import MalformedEventError
from strength_engine.models.enums import (
    PUMP_LABELS,
    EventType,
    JointPain,
    Soreness,
    Workload,
)
from strength_engine.models.location import Location, WorkoutLocation


@dataclass(frozen=True)
class SetCompleted:
    """User performed a set."""

    type: ClassVar[EventType] = EventType.SET_COMPLETED

    location: Location
    performed_weight: float
    performed_reps: int
    prescribed_weight: float | None = None
    prescribed_reps: int | None = None
    id: str = ""
    timestamp: int = 0  # ms since epoch


@dataclass(frozen=True)
class SetSkipped:
    """User skipped a planned set."""

    type: ClassVar[EventType] = EventType.SET_SKIPPED

    location: Location
    id: str = ""
    timestamp: int = 0


@dataclass(frozen=True)
class SetRejected:
    """User declined a prescribed set because volume was already enough."""

    type: ClassVar[EventType] = EventType.SET_REJECTED

    location: Location
    id: str = ""
    timestamp: int = 0


@dataclass(frozen=True)
class ExerciseSwapped:
    """User replaced a planned exercise for one workout."""

    type: ClassVar[EventType] = EventType.EXERCISE_SWAPPED

    workout: WorkoutLocation
    original_exercise: str
    replacement_exercise: str
    muscle_groups: tuple[str, ...] = field(default_factory=tuple)
    id: str = ""
    timestamp: int = 0


@dataclass(frozen=True)
class SorenessReported:
    """How sore a muscle group got since it was last trained."""

    type: ClassVar[EventType] = EventType.SORENESS_REPORTED

    workout: WorkoutLocation
    muscle_group: str
    soreness: Soreness
    id: str = ""
    timestamp: int = 0


@dataclass(frozen=True)
class SessionRated:
    """Pump, joint pain and workload rating for a muscle group's session."""

    type: ClassVar[EventType] = EventType.SESSION_RATED

    workout: WorkoutLocation
    muscle_group: str
    pump: int  # 0-4, see PUMP_LABELS
    joint_pain: JointPain
    sets_workload: Workload
    id: str = ""
    timestamp: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.pump < len(PUMP_LABELS):
            raise ValueError(f"Pump rating must be 0-{len(PUMP_LABELS) - 1}, got {self.pump}")


SetEvent = Union[SetCompleted, SetSkipped, SetRejected]
Event = Union[
    SetCompleted,
    SetSkipped,
    SetRejected,
    ExerciseSwapped,
    SorenessReported,
    SessionRated,
]

_EVENT_CLASSES: dict[EventType, type] = {
    cls.type: cls
    for cls in (
        SetCompleted,
        SetSkipped,
        SetRejected,
        ExerciseSwapped,
        SorenessReported,
        SessionRated,
    )
}


def is_set_event(event: Event) -> bool:
    """True for events that address a single set slot."""
    return isinstance(event, (SetCompleted, SetSkipped, SetRejected))


def workout_of(event: Event) -> WorkoutLocation:
    """The workout an event belongs to, whatever its variant."""
    if isinstance(event, (SetCompleted, SetSkipped, SetRejected)):
        return event.location.workout_location
    return event.workout


# ---------------------------------------------------------------------------
# Flat mapping form (wire format)
# ---------------------------------------------------------------------------


def event_to_dict(event: Event) -> dict[str, Any]:
    """Flatten an event into a kebab-case mapping. Unset optionals are omitted."""
    data: dict[str, Any] = {"type": event.type.value}
    if event.id:
        data["id"] = event.id
    data["timestamp"] = event.timestamp

    if isinstance(event, (SetCompleted, SetSkipped, SetRejected)):
        loc = event.location
        data.update({
            "mesocycle": loc.mesocycle,
            "microcycle": loc.microcycle,
            "workout": loc.workout,
            "exercise": loc.exercise,
            "set-index": loc.set_index,
        })
    else:
        data.update({
            "mesocycle": event.workout.mesocycle,
            "microcycle": event.workout.microcycle,
            "workout": event.workout.workout,
        })

    if isinstance(event, SetCompleted):
        data["performed-weight"] = event.performed_weight
        data["performed-reps"] = event.performed_reps
        if event.prescribed_weight is not None:
            data["prescribed-weight"] = event.prescribed_weight
        if event.prescribed_reps is not None:
            data["prescribed-reps"] = event.prescribed_reps
    elif isinstance(event, ExerciseSwapped):
        data["original-exercise"] = event.original_exercise
        data["replacement-exercise"] = event.replacement_exercise
        data["muscle-groups"] = list(event.muscle_groups)
    elif isinstance(event, SorenessReported):
        data["muscle-group"] = event.muscle_group
        data["soreness"] = event.soreness.value
    elif isinstance(event, SessionRated):
        data["muscle-group"] = event.muscle_group
        data["pump"] = event.pump
        data["joint-pain"] = event.joint_pain.value
        data["sets-workload"] = event.sets_workload.value
    return data


def event_from_dict(data: dict[str, Any]) -> Event:
    """Build a typed event from its flat mapping.

    Raises:
        MalformedEventError: Unknown ``type``, a missing required field, or
            a value that cannot be coerced.
    """
    try:
        event_type = EventType(data["type"])
    except (KeyError, ValueError) as exc:
        raise MalformedEventError(f"Unknown or missing event type in {data!r}") from exc

    try:
        return _build_event(event_type, data)
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedEventError(
            f"Invalid {event_type.value} event {data!r}: {exc}"
        ) from exc


def _build_event(event_type: EventType, data: dict[str, Any]) -> Event:
    cls = _EVENT_CLASSES[event_type]
    meta = {"id": str(data.get("id") or ""), "timestamp": int(data.get("timestamp") or 0)}
    workout = WorkoutLocation(
        mesocycle=_text(data["mesocycle"]),
        microcycle=int(data["microcycle"]),
        workout=_text(data["workout"]),
    )

    if event_type in (EventType.SET_COMPLETED, EventType.SET_SKIPPED, EventType.SET_REJECTED):
        location = Location(
            mesocycle=workout.mesocycle,
            microcycle=workout.microcycle,
            workout=workout.workout,
            exercise=_text(data["exercise"]),
            set_index=int(data["set-index"]),
        )
        if event_type != EventType.SET_COMPLETED:
            return cls(location=location, **meta)
        return SetCompleted(
            location=location,
            performed_weight=float(data["performed-weight"]),
            performed_reps=int(data["performed-reps"]),
            prescribed_weight=_optional_float(data.get("prescribed-weight")),
            prescribed_reps=_optional_int(data.get("prescribed-reps")),
            **meta,
        )

    if event_type == EventType.EXERCISE_SWAPPED:
        return ExerciseSwapped(
            workout=workout,
            original_exercise=_text(data["original-exercise"]),
            replacement_exercise=_text(data["replacement-exercise"]),
            muscle_groups=_text_tuple(data.get("muscle-groups") or ()),
            **meta,
        )
    if event_type == EventType.SORENESS_REPORTED:
        return SorenessReported(
            workout=workout,
            muscle_group=_text(data["muscle-group"]),
            soreness=Soreness(data["soreness"]),
            **meta,
        )
    return SessionRated(
        workout=workout,
        muscle_group=_text(data["muscle-group"]),
        pump=int(data["pump"]),
        joint_pain=JointPain(data["joint-pain"]),
        sets_workload=Workload(data["sets-workload"]),
        **meta,
    )


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _text(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def _text_tuple(values: Any) -> tuple[str, ...]:
    if not isinstance(values, (list, tuple)):
        raise TypeError(f"expected a list of strings, got {values!r}")
    return tuple(_text(v) for v in values)
