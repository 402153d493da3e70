"""
Pydantic models for Activities following kkb_fastapi pattern.
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.constants import MAX_ACTIVITY_AMOUNT, ActivityTypeEnum


class ActivityBase(BaseModel):
    """Base activity model."""

    activity_type: ActivityTypeEnum = Field(
        ..., description="Activity type", examples=["transportation"]
    )
    category: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Category within the activity type",
        examples=["car"],
    )
    amount: float = Field(
        ...,
        ge=0,
        le=MAX_ACTIVITY_AMOUNT,
        allow_inf_nan=False,
        description="Quantity in the declared unit",
        examples=[10],
    )
    unit: str = Field(
        ..., min_length=1, max_length=20, description="Unit of the amount", examples=["km"]
    )
    description: str | None = Field(None, max_length=500, description="Optional note")


class ActivityCreate(ActivityBase):
    """Model for creating an activity."""

    date: datetime | None = Field(
        None, description="When the activity happened (defaults to now)"
    )

    @field_validator("date")
    @classmethod
    def normalize_to_naive_utc(cls, value: datetime | None) -> datetime | None:
        """Store timestamps as naive UTC."""
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class ActivityUpdate(ActivityBase):
    """Model for a full activity update; the activity date is kept."""


class ActivityPydModel(ActivityBase):
    """Model for activity response."""

    model_config = ConfigDict(from_attributes=True)

    activity_type: str
    id: UUID
    owner_id: str
    carbon_footprint: float
    date: datetime
    created_at: datetime
    updated_at: datetime


class ActivityDeletedPydModel(BaseModel):
    """Model for delete confirmation."""

    id: UUID
    message: str = "Activity deleted"
