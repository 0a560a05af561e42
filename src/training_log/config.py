"""Environment-variable-based configuration for the training log."""

from __future__ import annotations

import os
from pathlib import Path

LOG_PATH: Path = Path(
    os.environ.get("STRENGTH_LOG_PATH", "~/.strength-log/events.json")
).expanduser()
# Empty means the built-in default template
PLAN_PATH: str = os.environ.get("STRENGTH_PLAN_PATH", "")
LOG_LEVEL: str = os.environ.get("STRENGTH_LOG_LEVEL", "INFO")
