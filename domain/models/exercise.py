"""
Exercise library entry.
"""

import uuid
from typing import List

from pydantic import Field

from domain.models.document import DocumentModel
from domain.models.enums import DifficultyLevel, Equipment, ExerciseCategory, MuscleGroup


class Exercise(DocumentModel):
    """
    A global exercise definition shared by all users.

    Exercises are snapshotted into workouts when a workout is logged
    (see WorkoutExercise), so corrective edits here never rewrite history.

    Examples:
        >>> exercise = Exercise(
        ...     name="Pull-up",
        ...     category=ExerciseCategory.STRENGTH,
        ...     muscle_groups=[MuscleGroup.BACK, MuscleGroup.BICEPS],
        ...     description="A bodyweight pulling exercise.",
        ...     difficulty_level=DifficultyLevel.INTERMEDIATE,
        ...     equipment=[Equipment.BODY_WEIGHT],
        ... )
        >>> exercise.to_document()["category"]
        'Strength'
    """

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str = Field(..., min_length=1, description="Display name")
    category: ExerciseCategory
    muscle_groups: List[MuscleGroup] = Field(
        default_factory=list, description="Targeted muscle groups"
    )
    description: str = Field(default="", description="Free-text description")
    instructions: List[str] = Field(
        default_factory=list, description="Ordered instruction steps"
    )
    difficulty_level: DifficultyLevel
    equipment: List[Equipment] = Field(
        default_factory=list, description="Required equipment"
    )
    image_names: List[str] = Field(
        default_factory=list,
        description="Demonstration image references (names or URLs)",
    )

    model_config = {"frozen": True}

    @property
    def is_cardio(self) -> bool:
        return self.category == ExerciseCategory.CARDIO

    def matches(self, search_text: str) -> bool:
        """
        Case-insensitive substring match on the exercise name.

        An empty or whitespace-only search matches every exercise.
        """
        needle = search_text.strip().casefold()
        if not needle:
            return True
        return needle in self.name.casefold()

    def __str__(self) -> str:
        return f"{self.name} ({self.category.value})"
