"""File-backed snapshot store for the serialized event log.

The store only moves opaque text; the event log owns the format.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from tempfile import NamedTemporaryFile

from strength_engine.exceptions import PlanTemplateError
from strength_engine.templates import PlanTemplate, template_from_dict

from training_log.exceptions import LogStoreError, PlanFileError

logger = logging.getLogger(__name__)


class LogFileStore:
    """Keeps the latest event-log snapshot in a single file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def read(self) -> str | None:
        """Return the saved snapshot, or None when nothing was saved yet."""
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise LogStoreError(f"Could not read {self.path}: {exc}", self.path) from exc

    def write(self, text: str) -> None:
        """Replace the snapshot atomically (temp file + rename)."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                "w", dir=self.path.parent, delete=False, encoding="utf-8"
            ) as tmp:
                tmp.write(text)
                temp_path = Path(tmp.name)
            temp_path.replace(self.path)
        except OSError as exc:
            raise LogStoreError(f"Could not write {self.path}: {exc}", self.path) from exc
        logger.debug("Saved event log to %s", self.path)

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise LogStoreError(f"Could not remove {self.path}: {exc}", self.path) from exc
        logger.info("Cleared saved event log at %s", self.path)


def load_plan_template(path: Path | str) -> PlanTemplate:
    """Read a plan template JSON file.

    Raises:
        PlanFileError: The file is missing, not JSON, or not a valid template.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return template_from_dict(data)
    except (OSError, json.JSONDecodeError, PlanTemplateError) as exc:
        raise PlanFileError(f"Could not load plan template {path}: {exc}") from exc
