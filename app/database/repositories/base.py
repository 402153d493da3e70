"""
Base repository with common CRUD operations.

Provides generic database operations that can be inherited by specific repositories.
"""
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Provides generic database access methods for any SQLAlchemy model.
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    def _apply_filters(self, stmt, filters: Optional[Dict]):
        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    stmt = stmt.where(getattr(self.model, field) == value)
        return stmt

    async def create(self, **data: Any) -> ModelType:
        """
        Create a new record.

        Args:
            **data: Field values for the new record

        Returns:
            Created model instance
        """
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def get_by_id(self, id: UUID) -> Optional[ModelType]:
        """
        Get record by ID.

        Args:
            id: Record UUID

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_all(
        self,
        skip: int = 0,
        limit: Optional[int] = 100,
        filters: Optional[Dict] = None,
        order_by: Sequence = (),
    ) -> List[ModelType]:
        """
        Get all records with optional filtering and ordering.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return (None for no limit)
            filters: Optional dict of field:value filters
            order_by: Column expressions to sort by

        Returns:
            List of model instances
        """
        stmt = self._apply_filters(select(self.model), filters)
        if order_by:
            stmt = stmt.order_by(*order_by)
        stmt = stmt.offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, filters: Optional[Dict] = None) -> int:
        """
        Count records with optional filtering.

        Args:
            filters: Optional dict of field:value filters

        Returns:
            Number of matching records
        """
        stmt = self._apply_filters(select(func.count()).select_from(self.model), filters)
        result = await self.session.execute(stmt)
        return result.scalar_one()
