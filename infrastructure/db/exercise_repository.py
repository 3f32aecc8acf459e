"""
Supabase implementation of ExerciseRepository.

The exercise library is a global collection (logical path
exercises/{exerciseId}) backed by the `exercises` table.
"""
import logging
from typing import List
from uuid import UUID

from supabase import AsyncClient

from domain.models import Exercise
from infrastructure.db.documents import (
    DOCUMENT_COLUMN,
    decode_document,
    encode_document,
    exercise_ref,
    exercises_ref,
)
from infrastructure.db.errors import store_error

logger = logging.getLogger(__name__)


class SupabaseExerciseRepository:
    """
    Supabase implementation of ExerciseRepository protocol.
    """

    def __init__(self, client: AsyncClient):
        """
        Initialize with Supabase client.

        Args:
            client: Async Supabase client instance (injected, not global)
        """
        self._client = client

    async def save_exercise(self, exercise: Exercise) -> None:
        ref = exercise_ref(exercise.id)
        document = encode_document(exercise)
        try:
            await (
                self._client.table(ref.table)
                .upsert(ref.row(document), on_conflict="exercise_id")
                .execute()
            )
        except Exception as e:
            raise store_error(f"save exercise at {ref.path}", e) from e
        logger.info(f"Exercise '{exercise.name}' saved at {ref.path}")

    async def fetch_all_exercises(self) -> List[Exercise]:
        collection = exercises_ref()
        try:
            result = (
                await self._client.table(collection.table)
                .select(f"path, {DOCUMENT_COLUMN}")
                .execute()
            )
        except Exception as e:
            raise store_error(f"fetch exercises from {collection.path}", e) from e

        rows = result.data or []
        return [
            decode_document(Exercise, row.get(DOCUMENT_COLUMN), row.get("path", collection.path))
            for row in rows
        ]

    async def delete_exercise(self, exercise_id: UUID) -> None:
        ref = exercise_ref(exercise_id)
        try:
            await (
                self._client.table(ref.table)
                .delete()
                .eq("exercise_id", ref.keys["exercise_id"])
                .execute()
            )
        except Exception as e:
            raise store_error(f"delete exercise at {ref.path}", e) from e
        logger.info(f"Exercise deleted at {ref.path}")
