"""Serialization module — event log snapshots and legacy-format migration."""

from strength_engine.serialization.json_log import from_json_string, to_json_string

__all__ = ["from_json_string", "to_json_string"]
