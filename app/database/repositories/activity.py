"""
Repository for Activity database operations.

Every query is filtered by owner id, so a record owned by someone else is
indistinguishable from a missing one.
"""
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.repositories.base import BaseRepository
from app.database.schemas import ActivityDBModel


class ActivityRepository(BaseRepository[ActivityDBModel]):
    """
    Repository for owner-scoped activity operations.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize activity repository.

        Args:
            session: Async database session
        """
        super().__init__(ActivityDBModel, session)

    async def get_all_for_owner(
        self, owner_id: str, skip: int = 0, limit: Optional[int] = None
    ) -> List[ActivityDBModel]:
        """
        Get an owner's activities, most recent first.

        Args:
            owner_id: Owning user id
            skip: Number of records to skip
            limit: Maximum number of records to return (None for all)

        Returns:
            List of activities ordered by date descending
        """
        return await self.get_all(
            skip=skip,
            limit=limit,
            filters={"owner_id": owner_id},
            order_by=(self.model.date.desc(), self.model.created_at.desc()),
        )

    async def get_by_id_for_owner(
        self, owner_id: str, id: UUID
    ) -> Optional[ActivityDBModel]:
        """
        Get an activity by ID if it belongs to the owner.

        Args:
            owner_id: Owning user id
            id: Activity UUID

        Returns:
            Activity if found and owned, None otherwise
        """
        stmt = select(self.model).where(
            self.model.id == id, self.model.owner_id == owner_id
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def update_for_owner(
        self, owner_id: str, id: UUID, **data: Any
    ) -> Optional[ActivityDBModel]:
        """
        Update an activity matching both ID and owner.

        Args:
            owner_id: Owning user id
            id: Activity UUID
            **data: Fields to update

        Returns:
            Updated activity if matched, None otherwise
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id, self.model.owner_id == owner_id)
            .values(**data)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()

        if result.rowcount == 0:
            return None

        instance = await self.get_by_id_for_owner(owner_id, id)
        await self.session.refresh(instance)
        return instance

    async def delete_for_owner(self, owner_id: str, id: UUID) -> bool:
        """
        Delete an activity matching both ID and owner (hard delete).

        Args:
            owner_id: Owning user id
            id: Activity UUID

        Returns:
            True if deleted, False if not found
        """
        stmt = delete(self.model).where(
            self.model.id == id, self.model.owner_id == owner_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_all_for_owner(self, owner_id: str) -> int:
        """
        Delete every activity of an owner.

        Returns:
            Number of deleted activities
        """
        stmt = delete(self.model).where(self.model.owner_id == owner_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def count_for_owner(self, owner_id: str) -> int:
        """Count an owner's activities."""
        return await self.count(filters={"owner_id": owner_id})
