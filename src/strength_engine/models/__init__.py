"""Data models for the strength engine."""

from strength_engine.models.enums import (
    EventType,
    FeedbackKind,
    JointPain,
    Soreness,
    Workload,
)
from strength_engine.models.events import (
    Event,
    ExerciseSwapped,
    SessionRated,
    SetCompleted,
    SetEvent,
    SetRejected,
    SetSkipped,
    SorenessReported,
    event_from_dict,
    event_to_dict,
)
from strength_engine.models.location import Location, WorkoutLocation
from strength_engine.models.plan import Plan, ProgressView, SetEntry
from strength_engine.models.prescription import (
    IncrementAdjustment,
    Prescription,
    PrescriptionContext,
)

__all__ = [
    "Event",
    "EventType",
    "ExerciseSwapped",
    "FeedbackKind",
    "IncrementAdjustment",
    "JointPain",
    "Location",
    "Plan",
    "Prescription",
    "PrescriptionContext",
    "ProgressView",
    "SessionRated",
    "SetCompleted",
    "SetEntry",
    "SetEvent",
    "SetRejected",
    "SetSkipped",
    "Soreness",
    "SorenessReported",
    "Workload",
    "WorkoutLocation",
    "event_from_dict",
    "event_to_dict",
]
