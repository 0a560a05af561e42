"""Exception hierarchy for the strength engine."""

from __future__ import annotations


class StrengthEngineError(Exception):
    """Base exception for all strength_engine errors."""


class MalformedEventError(StrengthEngineError):
    """A persisted record could not be turned into a typed event."""


class MigrationError(StrengthEngineError):
    """Persisted data is not in any format the event log can read."""


class PlanTemplateError(StrengthEngineError):
    """A plan template mapping is missing fields or has invalid values."""
