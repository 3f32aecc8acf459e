"""
Document paths and codec for the Supabase-backed document store.

Each logical document path maps to a row in a Supabase table:

    users/{userId}                       -> users(user_id)
    users/{userId}/workouts/{workoutId}  -> workouts(user_id, workout_id)
    exercises/{exerciseId}               -> exercises(exercise_id)

Rows hold the encoded record in a JSONB `document` column next to their key
columns and `path`. See supabase/migrations for the table definitions.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Type, TypeVar
from uuid import UUID

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from application.exceptions import DecodeError, EncodingError
from domain.models import DocumentModel

logger = logging.getLogger(__name__)

USERS_TABLE = "users"
WORKOUTS_TABLE = "workouts"
EXERCISES_TABLE = "exercises"

DOCUMENT_COLUMN = "document"

ModelT = TypeVar("ModelT", bound=DocumentModel)


@dataclass(frozen=True)
class DocumentRef:
    """Location of a single document: its logical path and backing row keys."""

    path: str
    table: str
    keys: Dict[str, str] = field(default_factory=dict)

    def row(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Build the table row for an encoded document."""
        return {**self.keys, "path": self.path, DOCUMENT_COLUMN: document}


@dataclass(frozen=True)
class CollectionRef:
    """Location of a collection: path prefix plus the keys that scope it."""

    path: str
    table: str
    keys: Dict[str, str] = field(default_factory=dict)


def user_ref(user_id: str) -> DocumentRef:
    return DocumentRef(
        path=f"users/{user_id}",
        table=USERS_TABLE,
        keys={"user_id": user_id},
    )


def workouts_ref(user_id: str) -> CollectionRef:
    return CollectionRef(
        path=f"users/{user_id}/workouts",
        table=WORKOUTS_TABLE,
        keys={"user_id": user_id},
    )


def workout_ref(user_id: str, workout_id: UUID) -> DocumentRef:
    wid = str(workout_id)
    return DocumentRef(
        path=f"users/{user_id}/workouts/{wid}",
        table=WORKOUTS_TABLE,
        keys={"user_id": user_id, "workout_id": wid},
    )


def exercises_ref() -> CollectionRef:
    return CollectionRef(path="exercises", table=EXERCISES_TABLE)


def exercise_ref(exercise_id: UUID) -> DocumentRef:
    eid = str(exercise_id)
    return DocumentRef(
        path=f"exercises/{eid}",
        table=EXERCISES_TABLE,
        keys={"exercise_id": eid},
    )


def encode_document(record: DocumentModel) -> Dict[str, Any]:
    """
    Encode a record for storage.

    Raises:
        EncodingError: If the record cannot be serialized
    """
    try:
        return record.to_document()
    except (PydanticSerializationError, ValueError, TypeError) as e:
        logger.error(f"Failed to encode {type(record).__name__}: {e}")
        raise EncodingError(f"Could not encode {type(record).__name__}: {e}") from e


def decode_document(model: Type[ModelT], data: Any, path: str) -> ModelT:
    """
    Decode a stored document into `model`.

    Raises:
        DecodeError: If the document does not match the schema
    """
    if not isinstance(data, dict):
        raise DecodeError(f"Document at {path} is not an object", path=path)
    try:
        return model.from_document(data)
    except ValidationError as e:
        logger.error(f"Document at {path} does not match {model.__name__}: {e}")
        raise DecodeError(
            f"Stored data at {path} is not a valid {model.__name__}", path=path
        ) from e
