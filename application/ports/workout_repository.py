"""
Workout Repository Interface (Port).

Workouts live in a per-user subcollection at
users/{userId}/workouts/{workoutId}. The owner is part of the storage path,
not a field of the workout document.
"""
from typing import List, Protocol
from uuid import UUID

from domain.models import Workout


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence.
    """

    async def save_workout(self, workout: Workout, user_id: str) -> None:
        """
        Upsert a workout document for a user.

        Args:
            workout: Workout to store (keyed by workout.id)
            user_id: Owning identity id

        Raises:
            EncodingError: If the workout cannot be serialized
            StoreError: If the write is rejected
        """
        ...

    async def fetch_workouts(self, user_id: str) -> List[Workout]:
        """
        Fetch a user's workouts, newest first.

        The ordering is applied by the store query (sort by date descending),
        not by sorting on the client.

        Returns:
            Workouts ordered by date descending; empty list when none

        Raises:
            DecodeError: If a stored document does not match the schema
            StoreError: For any other store failure
        """
        ...

    async def delete_workout(self, workout_id: UUID, user_id: str) -> None:
        """
        Delete one of a user's workouts.

        Raises:
            StoreError: If the delete is rejected
        """
        ...
