"""Decoders for the two historical event-store snapshot formats.

Both formats store one row per (entity, attribute, value) fact. Decoding
groups rows by entity id, resolves attribute names and keyword values, and
keeps only entities that carry a ``type``. The result is the flat mapping
form accepted by :func:`event_from_dict`.

Columnar format (newest legacy)::

    {"attrs": [":event/exercise", ":event/id", ...],
     "keywords": [":set-completed", ":monday", ...],
     "eavt": [[eid, attr_idx, value, tx], ...]}

where a keyword-typed value is the reference ``[0, keyword_idx]``.

Tuple format (oldest)::

    {"datoms": [[eid, ":event/type", ":set-completed", tx], ...]}

All functions are pure (no I/O).
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Iterable

from strength_engine.exceptions import MigrationError

# Attribute names are namespaced as ":event/<field>"
_ATTR_NAMESPACE_PREFIX = ":event/"
_KEYWORD_SIGIL = ":"
# Marker in the first slot of a keyword reference pair
_KEYWORD_REF_TAG = 0


def is_columnar_snapshot(data: Any) -> bool:
    return isinstance(data, dict) and "eavt" in data and "attrs" in data


def is_tuple_snapshot(data: Any) -> bool:
    return isinstance(data, dict) and bool(data.get("datoms"))


def decode_columnar_snapshot(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Decode the attribute-indexed snapshot into flat event mappings.

    Raises:
        MigrationError: The attribute table or row array is not a list.
    """
    attrs = data.get("attrs")
    keywords = data.get("keywords") or []
    rows = data.get("eavt")
    if not isinstance(attrs, list) or not isinstance(rows, list):
        raise MigrationError("Columnar snapshot needs 'attrs' and 'eavt' arrays")

    def decode_attr(index: Any) -> str | None:
        if not isinstance(index, int) or not 0 <= index < len(attrs):
            return None
        name = attrs[index]
        if not isinstance(name, str) or not name.startswith(_ATTR_NAMESPACE_PREFIX):
            return None
        return name[len(_ATTR_NAMESPACE_PREFIX):]

    def decode_value(value: Any) -> Any:
        if (
            isinstance(value, list)
            and len(value) == 2
            and value[0] == _KEYWORD_REF_TAG
            and isinstance(value[1], int)
        ):
            if not 0 <= value[1] < len(keywords):
                return None
            return _strip_sigil(keywords[value[1]])
        return value

    return _entities_to_events(rows, decode_attr, decode_value)


def decode_tuple_snapshot(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Decode the tuple snapshot (symbolic attributes) into flat event mappings.

    Raises:
        MigrationError: ``datoms`` is not a list.
    """
    rows = data.get("datoms")
    if not isinstance(rows, list):
        raise MigrationError("Tuple snapshot needs a 'datoms' array")

    def decode_attr(attr: Any) -> str | None:
        if not isinstance(attr, str):
            return None
        # ":event/type" and "event/type" both name the field "type"
        return attr.rsplit("/", 1)[-1].lstrip(_KEYWORD_SIGIL) or None

    def decode_value(value: Any) -> Any:
        if isinstance(value, str):
            return _strip_sigil(value)
        return value

    return _entities_to_events(rows, decode_attr, decode_value)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _entities_to_events(
    rows: Iterable[Any],
    decode_attr: Callable[[Any], str | None],
    decode_value: Callable[[Any], Any],
) -> list[dict[str, Any]]:
    """Group fact rows by entity, decode them, keep entities with a type."""
    entities: dict[Any, dict[str, Any]] = defaultdict(dict)
    for row in rows:
        if not isinstance(row, (list, tuple)) or len(row) < 3:
            raise MigrationError(f"Malformed fact row: {row!r}")
        entity_id, attr, value = row[0], row[1], row[2]
        if isinstance(entity_id, bool) or not isinstance(entity_id, (int, str)):
            raise MigrationError(f"Malformed entity id in fact row: {row!r}")
        field_name = decode_attr(attr)
        if field_name is None:
            continue
        entities[entity_id][field_name] = decode_value(value)

    return [fields for fields in entities.values() if fields.get("type")]


def _strip_sigil(keyword: Any) -> Any:
    if isinstance(keyword, str) and keyword.startswith(_KEYWORD_SIGIL):
        return keyword[len(_KEYWORD_SIGIL):]
    return keyword
