"""Plan templates and their expansion into the full plan tree.

A template lists, per workout day, each exercise with its set count and
muscle groups. :func:`expand_template` turns it into::

    {plan name: {microcycle: {workout: {exercise: [SetEntry, ...]}}}}

with the same workouts repeated in every microcycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from strength_engine.exceptions import PlanTemplateError
from strength_engine.models.plan import Mesocycle, Plan, SetEntry, WorkoutSets


@dataclass(frozen=True)
class ExerciseTemplate:
    """Set count and trained muscle groups for one exercise."""

    n_sets: int
    muscle_groups: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PlanTemplate:
    """A mesocycle template: workout day -> exercise name -> ExerciseTemplate."""

    name: str
    n_microcycles: int
    workouts: dict[str, dict[str, ExerciseTemplate]] = field(default_factory=dict)


def expand_exercises(exercises: dict[str, ExerciseTemplate]) -> WorkoutSets:
    """Expand each exercise into ``n_sets`` planned set entries."""
    return {
        name: [
            SetEntry(exercise_name=name, muscle_groups=spec.muscle_groups)
            for _ in range(spec.n_sets)
        ]
        for name, spec in exercises.items()
    }


def expand_template(template: PlanTemplate) -> Plan:
    """Build the plan tree for every microcycle of the template."""
    mesocycle: Mesocycle = {
        micro: {day: expand_exercises(exs) for day, exs in template.workouts.items()}
        for micro in range(template.n_microcycles)
    }
    return {template.name: mesocycle}


# ---------------------------------------------------------------------------
# Mapping form, for template files
# ---------------------------------------------------------------------------


def template_to_dict(template: PlanTemplate) -> dict[str, Any]:
    return {
        "name": template.name,
        "n-microcycles": template.n_microcycles,
        "workouts": {
            day: {
                "exercises": {
                    name: {"n-sets": spec.n_sets, "muscle-groups": list(spec.muscle_groups)}
                    for name, spec in exercises.items()
                }
            }
            for day, exercises in template.workouts.items()
        },
    }


def template_from_dict(data: dict[str, Any]) -> PlanTemplate:
    """Parse a template mapping as written by :func:`template_to_dict`.

    Raises:
        PlanTemplateError: Missing keys or non-positive counts.
    """
    try:
        workouts = {
            str(day): {
                str(name): ExerciseTemplate(
                    n_sets=int(spec["n-sets"]),
                    muscle_groups=tuple(spec.get("muscle-groups") or ()),
                )
                for name, spec in workout["exercises"].items()
            }
            for day, workout in data["workouts"].items()
        }
        template = PlanTemplate(
            name=str(data["name"]),
            n_microcycles=int(data["n-microcycles"]),
            workouts=workouts,
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise PlanTemplateError(f"Invalid plan template: {exc}") from exc

    if template.n_microcycles < 1:
        raise PlanTemplateError(f"Template needs at least one microcycle, got {template.n_microcycles}")
    for exercises in template.workouts.values():
        for name, spec in exercises.items():
            if spec.n_sets < 1:
                raise PlanTemplateError(f"{name} needs at least one set, got {spec.n_sets}")
    return template


# ---------------------------------------------------------------------------
# Built-in templates
# ---------------------------------------------------------------------------

DEFAULT_TEMPLATE = PlanTemplate(
    name="Twice a week upper body focus",
    n_microcycles=4,
    workouts={
        "monday": {
            "Dumbbell Press (Incline)": ExerciseTemplate(2, ("chest",)),
            "Cable Triceps Pushdown (Bar)": ExerciseTemplate(3, ("triceps",)),
            "Seated Cable Row": ExerciseTemplate(3, ("back",)),
            "Lying Biceps Dumbbell Curl": ExerciseTemplate(2, ("biceps",)),
            "Barbell Upright Row": ExerciseTemplate(3, ("shoulders",)),
            "Barbell Squat (High Bar)": ExerciseTemplate(2, ("quads",)),
            "Bodyweight Squat": ExerciseTemplate(1, ("quads",)),
            "Back Raise": ExerciseTemplate(1, ("hamstrings",)),
        },
        "thursday": {
            "Pulldown (Narrow Grip)": ExerciseTemplate(2, ("back",)),
            "Cable Flexion Row": ExerciseTemplate(2, ("back",)),
            "Barbell Curl (Narrow Grip)": ExerciseTemplate(3, ("biceps",)),
            "Cable Overhead Triceps Extension": ExerciseTemplate(3, ("triceps",)),
            "Pushup (Deficit)": ExerciseTemplate(2, ("chest",)),
            "Dumbbell Shoulder Press": ExerciseTemplate(4, ("shoulders",)),
            "Back Raise": ExerciseTemplate(1, ("hamstrings",)),
            "Barbell Squat (High Bar)": ExerciseTemplate(2, ("quads",)),
            "Bodyweight Squat": ExerciseTemplate(1, ("quads",)),
        },
    },
)

FULL_BODY_TEMPLATE = PlanTemplate(
    name="2x Minimal Full Body",
    n_microcycles=4,
    workouts={
        "monday": {
            "Dumbbell Row": ExerciseTemplate(2, ("back",)),
            "Dumbbell Press (Incline)": ExerciseTemplate(2, ("chest", "shoulders")),
            "Lying Dumbbell Curl": ExerciseTemplate(3, ("biceps",)),
            "Back Raise": ExerciseTemplate(1, ("hamstrings",)),
            "Reverse Lunge Dumbbell": ExerciseTemplate(2, ("glutes", "quads")),
            "Sissy squat": ExerciseTemplate(2, ("quads",)),
        },
        "thursday": {
            "Back Raise": ExerciseTemplate(1, ("hamstrings",)),
            "Barbell Squat": ExerciseTemplate(2, ("glutes", "quads")),
            "Bench press (Narrow Grip)": ExerciseTemplate(2, ("chest", "triceps")),
            "Pullup (Underhand Grip)": ExerciseTemplate(2, ("back", "biceps")),
        },
    },
)

AVAILABLE_TEMPLATES: tuple[PlanTemplate, ...] = (DEFAULT_TEMPLATE, FULL_BODY_TEMPLATE)
