"""
Supabase implementation of WorkoutRepository.

Workouts form a per-user subcollection (logical path
users/{userId}/workouts/{workoutId}) backed by the `workouts` table. The
table keeps a copy of the document's `date` in its own column so the store
can sort by it.
"""
import logging
from typing import List
from uuid import UUID

from supabase import AsyncClient

from domain.models import Workout
from infrastructure.db.documents import (
    DOCUMENT_COLUMN,
    decode_document,
    encode_document,
    workout_ref,
    workouts_ref,
)
from infrastructure.db.errors import store_error

logger = logging.getLogger(__name__)


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    All Supabase query logic for workouts is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: AsyncClient):
        """
        Initialize with Supabase client.

        Args:
            client: Async Supabase client instance (injected, not global)
        """
        self._client = client

    async def save_workout(self, workout: Workout, user_id: str) -> None:
        """
        Upsert a workout document for a user.

        The whole document is overwritten; the last write wins.
        """
        ref = workout_ref(user_id, workout.id)
        document = encode_document(workout)
        row = {**ref.row(document), "date": document["date"]}

        try:
            await (
                self._client.table(ref.table)
                .upsert(row, on_conflict="user_id,workout_id")
                .execute()
            )
        except Exception as e:
            raise store_error(f"save workout at {ref.path}", e) from e
        logger.info(f"Workout saved at {ref.path}")

    async def fetch_workouts(self, user_id: str) -> List[Workout]:
        """
        Fetch a user's workouts ordered by date, newest first.

        The order comes from the query itself; results are not re-sorted here.
        """
        collection = workouts_ref(user_id)
        try:
            result = (
                await self._client.table(collection.table)
                .select(f"path, {DOCUMENT_COLUMN}")
                .eq("user_id", user_id)
                .order("date", desc=True)
                .execute()
            )
        except Exception as e:
            raise store_error(f"fetch workouts from {collection.path}", e) from e

        rows = result.data or []
        logger.debug(f"Fetched {len(rows)} workouts from {collection.path}")
        return [
            decode_document(Workout, row.get(DOCUMENT_COLUMN), row.get("path", collection.path))
            for row in rows
        ]

    async def delete_workout(self, workout_id: UUID, user_id: str) -> None:
        ref = workout_ref(user_id, workout_id)
        try:
            await (
                self._client.table(ref.table)
                .delete()
                .eq("user_id", user_id)
                .eq("workout_id", ref.keys["workout_id"])
                .execute()
            )
        except Exception as e:
            raise store_error(f"delete workout at {ref.path}", e) from e
        logger.info(f"Workout deleted at {ref.path}")
