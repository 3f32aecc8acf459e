"""
Domain models for the PushPullRun data layer.

These models are pure data with no knowledge of Supabase or HTTP:
- UserProfile: A user's profile, one per authenticated identity
- Exercise: A global exercise library entry
- Workout: A logged workout owned by one user
- WorkoutExercise: A snapshot of an exercise plus its sets within a workout
- ExerciseSet: One set (reps/weight or duration/distance)

Every model serializes to a document dict with `to_document()` and back
with `from_document()`.

Usage:
    >>> from domain.models import Workout, WorkoutType
    >>> from datetime import datetime, timezone

    >>> workout = Workout(
    ...     name="Morning Run",
    ...     date=datetime(2025, 3, 5, 7, 0, tzinfo=timezone.utc),
    ...     duration=1800,
    ...     workout_type=WorkoutType.CARDIO,
    ... )
    >>> doc = workout.to_document()
    >>> Workout.from_document(doc) == workout
    True
"""

from domain.models.document import DocumentModel
from domain.models.enums import (
    DifficultyLevel,
    Equipment,
    ExerciseCategory,
    MuscleGroup,
    WorkoutType,
)
from domain.models.exercise import Exercise
from domain.models.user_profile import UserProfile
from domain.models.workout import ExerciseSet, Workout, WorkoutExercise

__all__ = [
    # Records
    "DocumentModel",
    "UserProfile",
    "Exercise",
    "Workout",
    "WorkoutExercise",
    "ExerciseSet",
    # Enums
    "ExerciseCategory",
    "MuscleGroup",
    "DifficultyLevel",
    "Equipment",
    "WorkoutType",
]
