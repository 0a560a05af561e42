"""Command-line summary of the training log.

Usage:
    strength-log --status       # last active workout with prescriptions
    strength-log --templates    # list built-in plan templates
"""

from __future__ import annotations

import argparse
import logging

from strength_engine.models.location import Location
from strength_engine.templates import AVAILABLE_TEMPLATES, DEFAULT_TEMPLATE

from training_log.config import LOG_LEVEL, LOG_PATH, PLAN_PATH
from training_log.exceptions import PlanFileError
from training_log.session import TrainingSession
from training_log.store import LogFileStore, load_plan_template

logger = logging.getLogger(__name__)


def _format_weight(weight: float | None) -> str:
    return "--" if weight is None else f"{weight:g}"


def print_status(session: TrainingSession) -> None:
    """Print the last active workout, set by set, and any pending feedback."""
    loc = session.active_workout()
    if loc is None:
        print("No sets logged yet.")
        return

    print(f"{loc.mesocycle} / week {loc.microcycle + 1} / {loc.workout}")
    for exercise, sets in session.workout_view(loc).items():
        label = exercise
        if sets and sets[0].original_exercise:
            label = f"{exercise} (for {sets[0].original_exercise})"
        print(f"  {label}")
        for index, entry in enumerate(sets):
            if entry.is_completed:
                status = f"{_format_weight(entry.performed_weight)} x {entry.performed_reps}"
            elif entry.is_done and entry.type is not None:
                status = entry.type.value
            else:
                slot = Location(loc.mesocycle, loc.microcycle, loc.workout, exercise, index)
                suggestion = session.prescribe(slot, muscle_groups=entry.muscle_groups or None)
                status = (
                    f"suggested {_format_weight(suggestion.weight)} x {suggestion.reps}"
                    if suggestion.has_history
                    else "no history"
                )
            print(f"    set {index + 1}: {status}")

    request = session.next_feedback()
    if request is not None:
        print(f"Pending {request.kind.value} feedback for {request.muscle_group}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Strength training log")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--status", action="store_true", help="Show the last active workout")
    group.add_argument("--templates", action="store_true", help="List built-in plan templates")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.templates:
        for template in AVAILABLE_TEMPLATES:
            print(f"{template.name} ({template.n_microcycles} weeks, {len(template.workouts)} workouts)")
        return

    template = DEFAULT_TEMPLATE
    if PLAN_PATH:
        try:
            template = load_plan_template(PLAN_PATH)
        except PlanFileError as exc:
            logger.error("%s; using the default template", exc)

    session = TrainingSession(LogFileStore(LOG_PATH), template=template)
    print_status(session)


if __name__ == "__main__":
    main()
