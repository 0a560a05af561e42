"""Rep / %1RM curve: estimate a one-rep max and predict reps at a weight.

The curve is the anchor table in ``enums.PERCENT_1RM_ANCHORS``, linearly
interpolated between neighbouring anchors in both directions. Rep queries
are clamped to [1, 30] and %1RM queries to [0.5, 1.0].

Reference:
    Brzycki (1993). Strength testing: predicting a one-rep max from
    reps-to-fatigue. JOPERD 64(1):88-90.
"""

from __future__ import annotations

import math

import numpy as np

from strength_engine.models.enums import (
    MAX_CURVE_PERCENT,
    MAX_CURVE_REPS,
    MIN_CURVE_PERCENT,
    MIN_CURVE_REPS,
    PERCENT_1RM_ANCHORS,
)

_ANCHOR_REPS = np.array([reps for reps, _ in PERCENT_1RM_ANCHORS], dtype=np.float64)
_ANCHOR_PCT = np.array([pct for _, pct in PERCENT_1RM_ANCHORS], dtype=np.float64)

# np.interp needs ascending x: reverse the table for the %1RM -> reps lookup
_ASCENDING_PCT = _ANCHOR_PCT[::-1]
_REPS_BY_ASCENDING_PCT = _ANCHOR_REPS[::-1]


def percent_of_one_rep_max(reps: float) -> float:
    """Fraction of 1RM that can be lifted for ``reps`` repetitions.

    Args:
        reps: Repetition count; clamped to [1, 30].

    Returns:
        Fraction in [0.5, 1.0]. 1 rep -> 1.0, 10 reps -> 0.75, 30 reps -> 0.5.
    """
    clamped = min(max(float(reps), MIN_CURVE_REPS), MAX_CURVE_REPS)
    return float(np.interp(clamped, _ANCHOR_REPS, _ANCHOR_PCT))


def reps_at_percent(percent: float) -> float:
    """Repetitions achievable at ``percent`` of 1RM (inverse of the curve).

    Args:
        percent: Fraction of 1RM; clamped to [0.5, 1.0].

    Returns:
        Unrounded rep count in [1, 30].
    """
    clamped = min(max(float(percent), MIN_CURVE_PERCENT), MAX_CURVE_PERCENT)
    return float(np.interp(clamped, _ASCENDING_PCT, _REPS_BY_ASCENDING_PCT))


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """Estimate 1RM from a submaximal set: weight / %1RM(reps)."""
    return weight / percent_of_one_rep_max(reps)


def reps_at_weight(one_rep_max: float, weight: float) -> int:
    """Predicted reps at ``weight`` for a lifter with ``one_rep_max``.

    Rounded half-up to a whole rep, never below 1.

    Raises:
        ValueError: ``one_rep_max`` is not positive.
    """
    if one_rep_max <= 0:
        raise ValueError(f"One-rep max must be positive, got {one_rep_max}")
    reps = reps_at_percent(weight / one_rep_max)
    return max(1, math.floor(reps + 0.5))
