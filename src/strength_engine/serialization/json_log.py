"""JSON snapshot format for the event log.

The current format is a JSON array of flat event mappings (see
:func:`event_to_dict`). Older snapshots are recognised by shape and routed
through :mod:`strength_engine.serialization.legacy`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from strength_engine.exceptions import MalformedEventError, MigrationError
from strength_engine.models.events import Event, event_from_dict, event_to_dict
from strength_engine.serialization.legacy import (
    decode_columnar_snapshot,
    decode_tuple_snapshot,
    is_columnar_snapshot,
    is_tuple_snapshot,
)

logger = logging.getLogger(__name__)


def to_json_string(events: Iterable[Event]) -> str:
    """Serialize events to the current snapshot format."""
    return json.dumps([event_to_dict(e) for e in events])


def from_json_string(text: str) -> list[Event]:
    """Parse a snapshot in any supported format into typed events.

    Records that fail to convert are skipped with a warning so one bad row
    does not discard the rest of the history.

    Raises:
        MigrationError: The text is not JSON or has an unrecognised shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MigrationError(f"Snapshot is not valid JSON: {exc}") from exc

    records, source = _records_from(data)
    events = _coerce_records(records)
    if source != "current":
        logger.info("Migrated %d events from %s format", len(events), source)
    return events


def _records_from(data: Any) -> tuple[list[Any], str]:
    if isinstance(data, list):
        return data, "current"
    if is_columnar_snapshot(data):
        return decode_columnar_snapshot(data), "columnar"
    if is_tuple_snapshot(data):
        return decode_tuple_snapshot(data), "tuple"
    raise MigrationError(f"Unknown snapshot shape: {type(data).__name__}")


def _coerce_records(records: list[Any]) -> list[Event]:
    events: list[Event] = []
    for record in records:
        if not isinstance(record, dict):
            logger.warning("Skipping non-mapping record %r", record)
            continue
        try:
            events.append(event_from_dict(record))
        except MalformedEventError as exc:
            logger.warning("Skipping malformed event: %s", exc)
    return events
