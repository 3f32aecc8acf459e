"""
Workout aggregate root and its embedded records.

A Workout is stored at users/{userId}/workouts/{workoutId}. Ownership is
expressed by that path only; the document itself carries no owner field.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from domain.models.document import DocumentModel, ensure_utc
from domain.models.enums import WorkoutType
from domain.models.exercise import Exercise


class ExerciseSet(DocumentModel):
    """
    A single set of an exercise within a logged workout.

    Strength sets normally populate reps and weight, cardio sets duration and
    distance. The model accepts any combination; callers decide which fields
    are relevant for the exercise category.
    """

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    reps: Optional[int] = Field(default=None, ge=0)
    weight: Optional[float] = Field(default=None, ge=0, description="Weight in kg")
    duration: Optional[float] = Field(
        default=None, ge=0, description="Duration in seconds"
    )
    distance: Optional[float] = Field(
        default=None, ge=0, description="Distance in meters"
    )
    completed: bool = False


class WorkoutExercise(DocumentModel):
    """
    An exercise as performed in one workout.

    `exercise` is a snapshot copy taken when the workout was created. It is
    not a reference to the global library entry.
    """

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    exercise: Exercise
    sets: List[ExerciseSet] = Field(default_factory=list)
    notes: Optional[str] = None

    @classmethod
    def from_exercise(
        cls,
        exercise: Exercise,
        number_of_sets: int = 3,
        notes: Optional[str] = None,
    ) -> "WorkoutExercise":
        """
        Snapshot a library exercise with `number_of_sets` empty sets.

        Raises:
            ValueError: If number_of_sets is negative.
        """
        if number_of_sets < 0:
            raise ValueError("number_of_sets must be >= 0")
        snapshot = Exercise.model_validate(exercise.model_dump())
        return cls(
            exercise=snapshot,
            sets=[ExerciseSet() for _ in range(number_of_sets)],
            notes=notes,
        )

    @property
    def completed_sets(self) -> int:
        return sum(1 for s in self.sets if s.completed)


class Workout(DocumentModel):
    """
    A workout logged by a user.

    Examples:
        >>> from domain.models import Exercise, ExerciseCategory, DifficultyLevel
        >>> squat = Exercise(
        ...     name="Squat",
        ...     category=ExerciseCategory.STRENGTH,
        ...     difficulty_level=DifficultyLevel.INTERMEDIATE,
        ... )
        >>> workout = Workout(
        ...     name="Leg Day",
        ...     date=datetime(2025, 3, 5, 18, 0),
        ...     duration=45 * 60,
        ...     workout_type=WorkoutType.STRENGTH,
        ...     exercises=[WorkoutExercise.from_exercise(squat, number_of_sets=5)],
        ... )
        >>> workout.total_sets
        5
    """

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str = Field(..., min_length=1)
    date: datetime
    duration: float = Field(default=0, ge=0, description="Duration in seconds")
    exercises: List[WorkoutExercise] = Field(default_factory=list)
    notes: Optional[str] = None
    workout_type: WorkoutType = WorkoutType.STRENGTH

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @property
    def total_sets(self) -> int:
        return sum(len(we.sets) for we in self.exercises)

    @property
    def completed_sets(self) -> int:
        return sum(we.completed_sets for we in self.exercises)

    @property
    def exercise_names(self) -> List[str]:
        """Names of the snapshotted exercises, in workout order."""
        return [we.exercise.name for we in self.exercises]
