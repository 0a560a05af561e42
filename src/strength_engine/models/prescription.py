"""Prescription outputs — what the engine suggests for a set slot."""

from __future__ import annotations

from dataclasses import dataclass

from strength_engine.models.enums import JointPain, Soreness, Workload


@dataclass(frozen=True)
class IncrementAdjustment:
    """How the weight increment for a slot was derived from feedback."""

    base_increment: float
    multiplier: float = 1.0
    soreness: Soreness | None = None
    sets_workload: Workload | None = None
    joint_pain: JointPain | None = None
    explanation: str = ""

    @property
    def increment(self) -> float:
        return self.base_increment * self.multiplier


@dataclass(frozen=True)
class PrescriptionContext:
    """Everything a prescription is computed from. Never persisted."""

    last_weight: float
    last_reps: int
    increment: float
    one_rep_max: float
    prescribed_weight: float
    actual_weight: float | None = None
    adjustment: IncrementAdjustment | None = None


@dataclass(frozen=True)
class Prescription:
    """Suggested weight and reps. Both are None when the slot has no history."""

    weight: float | None = None
    reps: int | None = None

    @property
    def has_history(self) -> bool:
        return self.weight is not None
