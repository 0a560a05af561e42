"""Tests for the file-backed snapshot store and plan file loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from strength_engine.templates import DEFAULT_TEMPLATE, template_to_dict
from training_log.exceptions import LogStoreError, PlanFileError
from training_log.store import LogFileStore, load_plan_template


class TestLogFileStore:
    def test_read_missing_file_returns_none(self, tmp_path: Path) -> None:
        assert LogFileStore(tmp_path / "events.json").read() is None

    def test_write_then_read(self, tmp_path: Path) -> None:
        store = LogFileStore(tmp_path / "events.json")
        store.write("[]")
        assert store.read() == "[]"

    def test_write_creates_parent_directories(self, tmp_path: Path) -> None:
        store = LogFileStore(tmp_path / "nested" / "dir" / "events.json")
        store.write("[1]")
        assert store.path.read_text(encoding="utf-8") == "[1]"

    def test_write_replaces_previous_snapshot(self, tmp_path: Path) -> None:
        store = LogFileStore(tmp_path / "events.json")
        store.write("first")
        store.write("second")
        assert store.read() == "second"
        assert [p.name for p in tmp_path.iterdir()] == ["events.json"]

    def test_clear_removes_file(self, tmp_path: Path) -> None:
        store = LogFileStore(tmp_path / "events.json")
        store.write("[]")
        store.clear()
        assert store.read() is None
        store.clear()

    def test_unreadable_path_raises(self, tmp_path: Path) -> None:
        store = LogFileStore(tmp_path)
        with pytest.raises(LogStoreError) as exc_info:
            store.read()
        assert exc_info.value.path == tmp_path


class TestLoadPlanTemplate:
    def test_loads_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "plan.json"
        path.write_text(json.dumps(template_to_dict(DEFAULT_TEMPLATE)), encoding="utf-8")
        assert load_plan_template(path) == DEFAULT_TEMPLATE

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(PlanFileError):
            load_plan_template(tmp_path / "nope.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "plan.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PlanFileError):
            load_plan_template(path)

    def test_invalid_template_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "plan.json"
        path.write_text(json.dumps({"name": "X"}), encoding="utf-8")
        with pytest.raises(PlanFileError):
            load_plan_template(path)
