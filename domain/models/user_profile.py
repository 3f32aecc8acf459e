"""
User profile record, stored at users/{userId}.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import Field, field_validator

from domain.models.document import DocumentModel, ensure_utc


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserProfile(DocumentModel):
    """
    Profile owned by a single authenticated user.

    Profiles are written as a whole (full-record overwrite) and are never
    deleted by the application.
    """

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    username: str
    email: str
    join_date: datetime = Field(default_factory=_utc_now)
    profile_image: Optional[str] = Field(
        default=None, description="Image name or URL"
    )
    height: Optional[float] = Field(default=None, ge=0, description="Height in cm")
    weight: Optional[float] = Field(default=None, ge=0, description="Weight in kg")
    fitness_goals: List[str] = Field(default_factory=list)

    @field_validator("join_date")
    @classmethod
    def validate_join_date(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @classmethod
    def default_for(cls, email: str) -> "UserProfile":
        """
        Build the profile used when an identity has no profile document.

        The username is the part of the email before '@', or "User" when
        that part is empty.
        """
        local_part = email.split("@", 1)[0] if email else ""
        return cls(username=local_part or "User", email=email or "")

    def with_measurements(
        self,
        height: Optional[float],
        weight: Optional[float],
        goals: List[str],
    ) -> "UserProfile":
        """Return a copy with new height, weight and goals."""
        return self.model_validate(
            {
                **self.model_dump(),
                "height": height,
                "weight": weight,
                "fitness_goals": list(goals),
            }
        )
