"""
Activity store service.

Owner-scoped create/list/get/update/delete. Footprints are computed here,
synchronously, every time type, category or amount is written.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ActivityNotFoundError
from app.database.repositories import ActivityRepository
from app.database.schemas import ActivityDBModel
from app.pydantic_models.activity import ActivityCreate, ActivityUpdate
from app.services.calculators.factor_matcher import FactorMatcher
from app.services.calculators.footprint_calculator import compute_footprint

logger = logging.getLogger(__name__)


def _parse_activity_id(activity_id: UUID | str) -> UUID:
    if isinstance(activity_id, UUID):
        return activity_id
    try:
        return UUID(str(activity_id))
    except ValueError:
        # A malformed id cannot match any record
        raise ActivityNotFoundError(activity_id) from None


class ActivityStore:
    """
    Service for persisting an owner's activities.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize store with database session.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = ActivityRepository(session)
        self.factor_matcher = FactorMatcher()

    def _footprint_fields(self, fields: ActivityCreate | ActivityUpdate) -> dict:
        activity_type = fields.activity_type.value
        self.factor_matcher.warn_if_unknown(activity_type, fields.category)

        return {
            "activity_type": activity_type,
            "category": fields.category,
            "amount": fields.amount,
            "unit": fields.unit,
            "description": fields.description,
            "carbon_footprint": compute_footprint(
                activity_type, fields.category, fields.amount
            ),
        }

    async def create(self, owner_id: str, fields: ActivityCreate) -> ActivityDBModel:
        """
        Create an activity for an owner.

        Args:
            owner_id: Owning user id
            fields: Validated activity fields

        Returns:
            Stored activity with computed carbon footprint
        """
        data = self._footprint_fields(fields)
        data["owner_id"] = owner_id
        data["date"] = fields.date or datetime.utcnow()

        activity = await self.repo.create(**data)

        logger.info(
            f"Created {activity.activity_type} activity {activity.id} for owner {owner_id}: "
            f"{activity.carbon_footprint} kg CO2"
        )
        return activity

    async def list(
        self, owner_id: str, skip: int = 0, limit: Optional[int] = None
    ) -> list[ActivityDBModel]:
        """
        List an owner's activities, most recent first.
        """
        return await self.repo.get_all_for_owner(owner_id, skip=skip, limit=limit)

    async def get(self, owner_id: str, activity_id: UUID | str) -> ActivityDBModel:
        """
        Get one of the owner's activities.

        Raises:
            ActivityNotFoundError: If no activity matches both id and owner
        """
        activity_uuid = _parse_activity_id(activity_id)
        activity = await self.repo.get_by_id_for_owner(owner_id, activity_uuid)
        if activity is None:
            raise ActivityNotFoundError(activity_id)
        return activity

    async def update(
        self, owner_id: str, activity_id: UUID | str, fields: ActivityUpdate
    ) -> ActivityDBModel:
        """
        Replace type, category, amount, unit and description, recomputing the footprint.

        Raises:
            ActivityNotFoundError: If no activity matches both id and owner
        """
        activity_uuid = _parse_activity_id(activity_id)
        data = self._footprint_fields(fields)

        activity = await self.repo.update_for_owner(owner_id, activity_uuid, **data)
        if activity is None:
            logger.info(f"Update of activity {activity_id} by owner {owner_id}: not found")
            raise ActivityNotFoundError(activity_id)

        logger.info(
            f"Updated activity {activity.id} for owner {owner_id}: "
            f"{activity.carbon_footprint} kg CO2"
        )
        return activity

    async def delete(self, owner_id: str, activity_id: UUID | str) -> None:
        """
        Delete one of the owner's activities.

        Raises:
            ActivityNotFoundError: If no activity matches both id and owner
        """
        activity_uuid = _parse_activity_id(activity_id)
        deleted = await self.repo.delete_for_owner(owner_id, activity_uuid)
        if not deleted:
            logger.info(f"Delete of activity {activity_id} by owner {owner_id}: not found")
            raise ActivityNotFoundError(activity_id)

        logger.info(f"Deleted activity {activity_uuid} for owner {owner_id}")

    async def clear(self, owner_id: str) -> int:
        """
        Delete every activity of an owner.

        Returns:
            Number of deleted activities
        """
        deleted = await self.repo.delete_all_for_owner(owner_id)
        logger.info(f"Cleared {deleted} activities for owner {owner_id}")
        return deleted
