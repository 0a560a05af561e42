"""Enumerations and progression constants for the strength engine.

String-valued enums carry their wire names so events serialize without a
lookup table.
"""

from enum import Enum


class EventType(str, Enum):
    """Every fact the event log can hold."""

    SET_COMPLETED = "set-completed"
    SET_SKIPPED = "set-skipped"
    SET_REJECTED = "set-rejected"  # User declined a prescribed set (volume cap)
    EXERCISE_SWAPPED = "exercise-swapped"
    SORENESS_REPORTED = "soreness-reported"
    SESSION_RATED = "session-rated"


class Soreness(str, Enum):
    """How a muscle group recovered since its previous session."""

    NEVER_SORE = "never-sore"
    HEALED_EARLY = "healed-early"
    HEALED_JUST_IN_TIME = "healed-just-in-time"
    STILL_SORE = "still-sore"


class Workload(str, Enum):
    """How the number of sets felt for a muscle group."""

    EASY = "easy"
    JUST_RIGHT = "just-right"
    PUSHED_LIMITS = "pushed-limits"
    TOO_MUCH = "too-much"


class JointPain(str, Enum):
    """Joint discomfort reported after a session."""

    NONE = "none"
    SOME = "some"
    SEVERE = "severe"


class FeedbackKind(str, Enum):
    """Feedback prompts the UI can surface, in priority order."""

    SORENESS = "soreness"
    SESSION = "session"


# Set events are the only ones that address a single set slot
SET_EVENT_TYPES = frozenset({
    EventType.SET_COMPLETED,
    EventType.SET_SKIPPED,
    EventType.SET_REJECTED,
})

# A skipped or rejected set counts as done without being performed
NOT_PERFORMED_EVENT_TYPES = frozenset({
    EventType.SET_SKIPPED,
    EventType.SET_REJECTED,
})

# ---------------------------------------------------------------------------
# Weight progression
# ---------------------------------------------------------------------------
# Weight units added to the last performance each microcycle
BASE_WEIGHT_INCREMENT = 2.5

# Increment multipliers from the previous microcycle's soreness report
SORENESS_MODIFIERS: dict[Soreness, float] = {
    Soreness.NEVER_SORE: 1.5,            # Recovered fast, push harder
    Soreness.HEALED_EARLY: 1.25,         # Recovered well, slight increase
    Soreness.HEALED_JUST_IN_TIME: 1.0,   # Recovery matched the schedule
    Soreness.STILL_SORE: 0.5,            # Still recovering, back off
}

# Increment multipliers from the previous microcycle's session rating
WORKLOAD_MODIFIERS: dict[Workload, float] = {
    Workload.EASY: 1.25,
    Workload.JUST_RIGHT: 1.0,
    Workload.PUSHED_LIMITS: 1.0,
    Workload.TOO_MUCH: 0.75,             # Overreached, reduce
}

# Joint pain replaces the combined multiplier outright; None = no override
JOINT_PAIN_OVERRIDES: dict[JointPain, float | None] = {
    JointPain.NONE: None,
    JointPain.SOME: 0.75,
    JointPain.SEVERE: 0.0,               # No added weight while in pain
}

# ---------------------------------------------------------------------------
# Rep / %1RM curve
# ---------------------------------------------------------------------------
# Anchor points (reps, fraction of one-rep max), strictly decreasing in %1RM.
# Values follow the commonly published strength-training rep tables
# (Brzycki 1993 up to ~10 reps, flattening towards 50% at 30 reps).
PERCENT_1RM_ANCHORS: tuple[tuple[int, float], ...] = (
    (1, 1.00),
    (2, 0.97),
    (3, 0.94),
    (4, 0.92),
    (5, 0.89),
    (6, 0.86),
    (7, 0.83),
    (8, 0.81),
    (9, 0.78),
    (10, 0.75),
    (12, 0.70),
    (15, 0.65),
    (20, 0.60),
    (25, 0.55),
    (30, 0.50),
)

MIN_CURVE_REPS = 1
MAX_CURVE_REPS = 30
MIN_CURVE_PERCENT = 0.50
MAX_CURVE_PERCENT = 1.00

# Pump rating scale shown to the user (0-4)
PUMP_LABELS = ("None", "Mild", "Moderate", "Great", "Best ever")
