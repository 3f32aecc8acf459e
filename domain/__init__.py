"""
Domain layer for the PushPullRun data layer.

This package contains pure domain models that are independent of
infrastructure concerns (Supabase, HTTP, storage paths).
"""

from domain.models import (
    DifficultyLevel,
    Equipment,
    Exercise,
    ExerciseCategory,
    ExerciseSet,
    MuscleGroup,
    UserProfile,
    Workout,
    WorkoutExercise,
    WorkoutType,
)

__all__ = [
    "UserProfile",
    "Exercise",
    "Workout",
    "WorkoutExercise",
    "ExerciseSet",
    "ExerciseCategory",
    "MuscleGroup",
    "DifficultyLevel",
    "Equipment",
    "WorkoutType",
]
