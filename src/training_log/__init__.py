"""Training log session — persistence and wiring around the strength engine."""

from training_log.exceptions import LogStoreError, PlanFileError, TrainingLogError
from training_log.session import TrainingSession
from training_log.store import LogFileStore, load_plan_template

__all__ = [
    "LogFileStore",
    "LogStoreError",
    "PlanFileError",
    "TrainingLogError",
    "TrainingSession",
    "load_plan_template",
]
