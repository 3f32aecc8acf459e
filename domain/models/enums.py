"""
String-tagged enums used by the exercise library and workout log.

The values are stored verbatim in documents, so they must never be renamed
without a data migration.
"""

from enum import Enum


class ExerciseCategory(str, Enum):
    """Broad training modality of an exercise."""

    STRENGTH = "Strength"
    CARDIO = "Cardio"
    FLEXIBILITY = "Flexibility"
    BALANCE = "Balance"
    FUNCTIONAL = "Functional"


class MuscleGroup(str, Enum):
    """Muscle groups an exercise can target."""

    CHEST = "Chest"
    BACK = "Back"
    SHOULDERS = "Shoulders"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    FOREARMS = "Forearms"
    ABS = "Abs"
    QUADS = "Quadriceps"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"
    FULL_BODY = "Full Body"


class DifficultyLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class Equipment(str, Enum):
    """
    Equipment required to perform an exercise.

    NONE means the exercise can be done without any equipment; OTHER covers
    anything not listed.
    """

    NONE = "None"
    DUMBBELL = "Dumbbell"
    BARBELL = "Barbell"
    KETTLEBELL = "Kettlebell"
    RESISTANCE_BAND = "Resistance Band"
    MACHINE = "Machine"
    BODY_WEIGHT = "Body Weight"
    TREADMILL = "Treadmill"
    BICYCLE = "Bicycle"
    JUMP_ROPE = "Jump Rope"
    OTHER = "Other"


class WorkoutType(str, Enum):
    STRENGTH = "Strength"
    CARDIO = "Cardio"
    HIIT = "HIIT"
    FLEXIBILITY = "Flexibility"
    CUSTOM = "Custom"
