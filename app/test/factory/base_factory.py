"""
Base factory for async SQLAlchemy models following kkb_fastapi pattern.
"""
import asyncio
import inspect
from typing import Any

import factory
from factory.alchemy import SQLAlchemyOptions
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.session_manager.db_session import Database
from app.database.session_manager.exceptions import DatabaseNotInitialized


def factory_session() -> AsyncSession:
    """New session from the session maker the conftest initialised for this test."""
    if Database._async_session_maker is None:
        raise DatabaseNotInitialized("Database.init() must run before factories are used")
    return Database._async_session_maker()


class AsyncSQLAlchemyFactory(factory.Factory):
    """
    Base factory for creating async SQLAlchemy model instances.

    ``await SomeFactory(...)`` builds the instance and commits it in its own session.
    """

    _options_class = SQLAlchemyOptions

    class Meta:
        abstract = True

    @classmethod
    async def create(cls, **kwargs) -> Any:
        """
        Create and commit an instance asynchronously.

        Args:
            **kwargs: Attributes to set on the instance

        Returns:
            Created model instance
        """
        return await super().create(**kwargs)

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """
        Create instance and return as Task.

        A Task can be awaited multiple times, unlike a coroutine.
        """
        async def maker_coroutine():
            for key, value in kwargs.items():
                # SubFactory values arrive as Tasks; await them to get model instances
                if inspect.isawaitable(value):
                    kwargs[key] = await value
            return await cls._save(model_class, *args, **kwargs)

        return asyncio.create_task(maker_coroutine())

    @classmethod
    async def _save(cls, model_class, *args, **kwargs) -> Any:
        """
        Create, add instance to session and commit.

        Args:
            model_class: SQLAlchemy model class
            **kwargs: Model attributes

        Returns:
            Saved instance
        """
        async with cls._meta.sqlalchemy_session() as session:
            obj = model_class(*args, **kwargs)
            session.add(obj)
            await session.commit()
            return obj

    @classmethod
    async def create_batch(cls, size: int, **kwargs) -> list[Any]:
        """
        Create multiple instances asynchronously.

        Args:
            size: Number of instances to create
            **kwargs: Attributes to set on all instances

        Returns:
            List of created instances
        """
        return [await cls.create(**kwargs) for _ in range(size)]
