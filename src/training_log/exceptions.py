"""Custom exception hierarchy for the training log persistence layer."""

from __future__ import annotations

from pathlib import Path


class TrainingLogError(Exception):
    """Base exception for all training_log errors."""


class LogStoreError(TrainingLogError):
    """Reading or writing the saved event log failed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class PlanFileError(TrainingLogError):
    """The plan template file could not be read or parsed."""
