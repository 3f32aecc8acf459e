"""
Sample exercise library used to seed an empty store.

Sample IDs are derived from the exercise name so every process seeds the same
documents and a forced re-seed overwrites instead of duplicating.
"""

import uuid
from typing import List

from domain.models import (
    DifficultyLevel,
    Equipment,
    Exercise,
    ExerciseCategory,
    MuscleGroup,
)

SAMPLE_EXERCISE_NAMESPACE = uuid.UUID("5d1b9e8c-3f4a-4c2e-9b7d-2a6f0e1c8b35")


def sample_exercise_id(name: str) -> uuid.UUID:
    return uuid.uuid5(SAMPLE_EXERCISE_NAMESPACE, name)


SAMPLE_EXERCISES: List[Exercise] = [
    Exercise(
        id=sample_exercise_id("Barbell Bench Press"),
        name="Barbell Bench Press",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.CHEST, MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS],
        description="A compound exercise that targets the chest, shoulders, and triceps.",
        instructions=[
            "Lie on a flat bench with your feet flat on the floor.",
            "Grip the barbell slightly wider than shoulder-width apart.",
            "Lower the barbell to your chest, keeping your elbows at a 45-degree angle.",
            "Press the barbell back up to the starting position.",
        ],
        difficulty_level=DifficultyLevel.INTERMEDIATE,
        equipment=[Equipment.BARBELL],
        image_names=["bench_press_1", "bench_press_2"],
    ),
    Exercise(
        id=sample_exercise_id("Pull-up"),
        name="Pull-up",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.BACK, MuscleGroup.BICEPS, MuscleGroup.FOREARMS],
        description="A bodyweight exercise that targets the back and arms.",
        instructions=[
            "Hang from a pull-up bar with hands slightly wider than shoulder-width apart.",
            "Pull your body up until your chin is over the bar.",
            "Lower yourself back down with control.",
        ],
        difficulty_level=DifficultyLevel.INTERMEDIATE,
        equipment=[Equipment.BODY_WEIGHT],
        image_names=["pullup_1"],
    ),
    Exercise(
        id=sample_exercise_id("Running"),
        name="Running",
        category=ExerciseCategory.CARDIO,
        muscle_groups=[
            MuscleGroup.QUADS,
            MuscleGroup.HAMSTRINGS,
            MuscleGroup.CALVES,
            MuscleGroup.GLUTES,
        ],
        description="A cardiovascular exercise that improves endurance and burns calories.",
        instructions=[
            "Start with a warm-up walk or light jog.",
            "Maintain good posture with a slight forward lean.",
            "Land midfoot and roll through to push off with your toes.",
            "Cool down with a walk at the end.",
        ],
        difficulty_level=DifficultyLevel.BEGINNER,
        equipment=[Equipment.NONE, Equipment.TREADMILL],
        image_names=["running_1"],
    ),
]


def sample_exercises() -> List[Exercise]:
    """Return a fresh copy of the sample library."""
    return list(SAMPLE_EXERCISES)
