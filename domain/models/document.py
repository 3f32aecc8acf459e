"""
Base class for records that are persisted as documents.

Documents use camelCase keys so the stored shape matches the records written
by the mobile clients field-for-field. Absent optional fields are omitted
from the document rather than written as null.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DocumentT = TypeVar("DocumentT", bound="DocumentModel")


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so stored dates always sort consistently."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class DocumentModel(BaseModel):
    """Pydantic model with document (de)serialization helpers."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_document(self) -> Dict[str, Any]:
        """
        Serialize to a JSON-compatible document.

        Returns:
            Dict keyed by camelCase field names, enums as their string tags,
            dates as ISO-8601 strings and unset optionals omitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls: Type[DocumentT], data: Dict[str, Any]) -> DocumentT:
        """
        Build a record from a stored document.

        Raises:
            pydantic.ValidationError: If the document does not match the schema.
        """
        return cls.model_validate(data)
