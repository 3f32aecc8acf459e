"""
Exercise Repository Interface (Port).

Exercises form a global collection at exercises/{exerciseId}.
"""
from typing import List, Protocol
from uuid import UUID

from domain.models import Exercise


class ExerciseRepository(Protocol):
    """
    Abstract interface for the shared exercise library.
    """

    async def save_exercise(self, exercise: Exercise) -> None:
        """
        Upsert an exercise document keyed by its id.

        Raises:
            EncodingError: If the exercise cannot be serialized
            StoreError: If the write is rejected
        """
        ...

    async def fetch_all_exercises(self) -> List[Exercise]:
        """
        Fetch every exercise in the library.

        Returns:
            List of exercises; empty (not an error) when the collection is empty

        Raises:
            DecodeError: If a stored document does not match the schema
            StoreError: For any other store failure
        """
        ...

    async def delete_exercise(self, exercise_id: UUID) -> None:
        """
        Delete an exercise document.

        Raises:
            StoreError: If the delete is rejected
        """
        ...
