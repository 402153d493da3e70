"""
Activity SQLAlchemy model.

One row per logged activity, always owned by exactly one user.
"""

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Float, Index, String, Text, Uuid

from app.database import Base
from app.utils.constants import OWNER_ID_MAX_LENGTH


class ActivityDBModel(Base):
    """
    Logged carbon-emitting activity.

    ``carbon_footprint`` is derived from type, category and amount when the
    row is created or updated, and stored rather than recomputed on read.
    """

    __tablename__ = "activities"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    owner_id = Column(
        String(OWNER_ID_MAX_LENGTH),
        nullable=False,
        index=True,
        comment="Opaque id of the owning user, supplied by the auth gateway",
    )

    activity_type = Column(
        String(32),
        nullable=False,
        comment="transportation, electricity, food, waste or water",
    )

    category = Column(
        String(50),
        nullable=False,
        comment="Category within the activity type (e.g. car, meat)",
    )

    amount = Column(
        Float,
        nullable=False,
        comment="Quantity in the declared unit",
    )

    unit = Column(
        String(20),
        nullable=False,
        comment="Descriptive unit; not used in computation",
    )

    carbon_footprint = Column(
        Float,
        nullable=False,
        default=0.0,
        comment="Computed footprint in kg CO2",
    )

    date = Column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        comment="When the activity happened",
    )

    description = Column(
        Text,
        nullable=True,
        comment="Optional free text",
    )

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    __table_args__ = (
        Index("ix_activities_owner_date", "owner_id", "date"),
        {"comment": "Activities logged by users with their computed carbon footprint"},
    )

    def __repr__(self):
        return (
            f"<ActivityDBModel: {self.activity_type}/{self.category} - "
            f"{self.amount} {self.unit} ({self.carbon_footprint} kg CO2) on {self.date}>"
        )
