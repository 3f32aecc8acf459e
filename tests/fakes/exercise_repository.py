"""
Fake Exercise Repository for testing.

This module provides an in-memory implementation of ExerciseRepository
for fast, isolated testing without database dependencies.
"""
from typing import List, Optional
from uuid import UUID

from domain.models import Exercise
from infrastructure.db.documents import (
    decode_document,
    encode_document,
    exercise_ref,
    exercises_ref,
)
from tests.fakes.document_store import InMemoryDocumentStore


class FakeExerciseRepository:
    """
    In-memory fake implementation of ExerciseRepository for testing.

    Usage:
        repo = FakeExerciseRepository()
        repo.seed(sample_exercises())
        exercises = await repo.fetch_all_exercises()
    """

    def __init__(self, store: Optional[InMemoryDocumentStore] = None):
        self.store = store if store is not None else InMemoryDocumentStore()

    def reset(self) -> None:
        self.store.reset()

    def seed(self, exercises: List[Exercise]) -> None:
        for exercise in exercises:
            self.store.put(exercise_ref(exercise.id).path, encode_document(exercise))

    def get_all(self) -> List[Exercise]:
        """All stored exercises (test helper)."""
        return [
            decode_document(Exercise, document, path)
            for path, document in self.store.children(exercises_ref().path).items()
        ]

    # =========================================================================
    # ExerciseRepository Protocol Methods
    # =========================================================================

    async def save_exercise(self, exercise: Exercise) -> None:
        self.store.check("save_exercise")
        self.store.put(exercise_ref(exercise.id).path, encode_document(exercise))

    async def fetch_all_exercises(self) -> List[Exercise]:
        self.store.check("fetch_all_exercises")
        return self.get_all()

    async def delete_exercise(self, exercise_id: UUID) -> None:
        self.store.check("delete_exercise")
        self.store.delete(exercise_ref(exercise_id).path)
