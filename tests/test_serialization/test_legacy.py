"""Tests for legacy snapshot migration (columnar and tuple formats)."""

from __future__ import annotations

import json

import pytest

from strength_engine.event_log import EventLog
from strength_engine.exceptions import MigrationError
from strength_engine.models.enums import EventType, Soreness
from strength_engine.models.events import SetCompleted, SorenessReported
from strength_engine.serialization.legacy import (
    decode_columnar_snapshot,
    decode_tuple_snapshot,
)

# Subset of a real columnar export: two completed sets and a soreness report
COLUMNAR_SNAPSHOT = {
    "count": 28,
    "max-eid": 3,
    "attrs": [
        ":event/exercise", ":event/id", ":event/joint-pain", ":event/mesocycle",
        ":event/microcycle", ":event/muscle-group", ":event/performed-reps",
        ":event/performed-weight", ":event/prescribed-reps", ":event/prescribed-weight",
        ":event/pump", ":event/set-index", ":event/sets-workload", ":event/soreness",
        ":event/timestamp", ":event/type", ":event/workout",
    ],
    "keywords": [
        ":set-completed", ":monday", ":back", ":never-sore", ":soreness-reported",
        ":none", ":just-right", ":session-rated", ":chest",
    ],
    "eavt": [
        [1, 0, "Dumbbell Row", 1],
        [1, 1, "uuid-1", 1],
        [1, 3, "My Plan", 1],
        [1, 4, 0, 1],
        [1, 6, 15, 1],
        [1, 7, 40, 1],
        [1, 11, 0, 1],
        [1, 14, 1770392738401, 1],
        [1, 15, [0, 0], 1],
        [1, 16, [0, 1], 1],
        [2, 0, "Dumbbell Row", 2],
        [2, 1, "uuid-2", 2],
        [2, 3, "My Plan", 2],
        [2, 4, 0, 2],
        [2, 6, 12, 2],
        [2, 7, 40, 2],
        [2, 11, 1, 2],
        [2, 14, 1770392749618, 2],
        [2, 15, [0, 0], 2],
        [2, 16, [0, 1], 2],
        [3, 1, "uuid-3", 3],
        [3, 3, "My Plan", 3],
        [3, 4, 0, 3],
        [3, 5, [0, 2], 3],
        [3, 13, [0, 3], 3],
        [3, 14, 1770392741173, 3],
        [3, 15, [0, 4], 3],
        [3, 16, [0, 1], 3],
    ],
    "aevt": [],
    "avet": [],
}

TUPLE_SNAPSHOT = {
    "schema": {},
    "datoms": [
        [1, ":event/type", ":set-completed", 10],
        [1, ":event/mesocycle", "Old Plan", 10],
        [1, ":event/microcycle", 2, 10],
        [1, ":event/workout", ":thursday", 10],
        [1, ":event/exercise", "Barbell Squat", 10],
        [1, ":event/set-index", 1, 10],
        [1, ":event/performed-weight", 80, 10],
        [1, ":event/performed-reps", 8, 10],
        [1, ":event/timestamp", 1700000000000, 10],
        [2, "event/id", "orphan", 11],
        [3, "event/type", ":set-skipped", 12],
        [3, "event/mesocycle", "Old Plan", 12],
        [3, "event/microcycle", 2, 12],
        [3, "event/workout", ":thursday", 12],
        [3, "event/exercise", "Barbell Squat", 12],
        [3, "event/set-index", 0, 12],
        [3, "event/timestamp", 1700000000500, 12],
    ],
}


class TestColumnarDecoder:
    def test_decodes_entities_with_type(self) -> None:
        records = decode_columnar_snapshot(COLUMNAR_SNAPSHOT)
        assert len(records) == 3

    def test_resolves_attributes_and_keywords(self) -> None:
        first = decode_columnar_snapshot(COLUMNAR_SNAPSHOT)[0]
        assert first["type"] == "set-completed"
        assert first["workout"] == "monday"
        assert first["exercise"] == "Dumbbell Row"
        assert first["performed-weight"] == 40
        assert first["set-index"] == 0

    def test_missing_arrays_raise(self) -> None:
        with pytest.raises(MigrationError):
            decode_columnar_snapshot({"attrs": None, "eavt": []})

    def test_malformed_row_raises(self) -> None:
        with pytest.raises(MigrationError):
            decode_columnar_snapshot({"attrs": [], "keywords": [], "eavt": [[1]]})


class TestTupleDecoder:
    def test_drops_entities_without_type(self) -> None:
        records = decode_tuple_snapshot(TUPLE_SNAPSHOT)
        assert [r["type"] for r in records] == ["set-completed", "set-skipped"]

    def test_strips_namespace_and_sigil(self) -> None:
        record = decode_tuple_snapshot(TUPLE_SNAPSHOT)[0]
        assert record["workout"] == "thursday"
        assert record["performed-reps"] == 8


class TestEventLogMigration:
    def test_loads_columnar_snapshot(self) -> None:
        log = EventLog()
        log.load(json.dumps(COLUMNAR_SNAPSHOT))
        events = log.all_events()
        assert len(events) == 3

        first = events[0]
        assert isinstance(first, SetCompleted)
        assert first.location.mesocycle == "My Plan"
        assert first.location.microcycle == 0
        assert first.location.workout == "monday"
        assert first.location.exercise == "Dumbbell Row"
        assert first.performed_weight == 40
        assert first.performed_reps == 15
        assert first.id == "uuid-1"

        sore = [e for e in events if isinstance(e, SorenessReported)]
        assert len(sore) == 1
        assert sore[0].muscle_group == "back"
        assert sore[0].soreness == Soreness.NEVER_SORE

    def test_columnar_preserves_event_types(self) -> None:
        log = EventLog()
        log.load(json.dumps(COLUMNAR_SNAPSHOT))
        types = [e.type for e in log.all_events()]
        assert types.count(EventType.SET_COMPLETED) == 2
        assert types.count(EventType.SORENESS_REPORTED) == 1

    def test_loads_tuple_snapshot(self) -> None:
        log = EventLog()
        log.load(json.dumps(TUPLE_SNAPSHOT))
        events = log.all_events()
        assert [e.type for e in events] == [EventType.SET_COMPLETED, EventType.SET_SKIPPED]
        assert events[0].location.set_index == 1

    def test_migrated_log_saves_in_current_format(self) -> None:
        log = EventLog()
        log.load(json.dumps(COLUMNAR_SNAPSHOT))
        assert isinstance(json.loads(log.serialize()), list)


class TestMalformedEntityIds:
    def test_tuple_object_entity_id_raises(self) -> None:
        with pytest.raises(MigrationError):
            decode_tuple_snapshot({"datoms": [[{"x": 1}, ":event/type", ":set-completed", 1]]})

    def test_columnar_array_entity_id_raises(self) -> None:
        snapshot = {
            "attrs": [":event/type"],
            "keywords": [":set-completed"],
            "eavt": [[[1], 0, [0, 0], 1]],
        }
        with pytest.raises(MigrationError):
            decode_columnar_snapshot(snapshot)

    def test_event_log_keeps_current_events(self) -> None:
        log = EventLog()
        log.load(json.dumps(TUPLE_SNAPSHOT))
        log.load(json.dumps({"datoms": [[{"x": 1}, ":event/type", ":set-completed", 1]]}))
        assert len(log) == 2
