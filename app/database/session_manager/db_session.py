"""
Async database session manager following kkb_fastapi pattern.

``Database.init`` is called once at startup; every unit of work then uses
``async with Database() as session``.
"""
import logging
from typing import Optional

from sqlalchemy.engine.url import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database.session_manager.exceptions import (
    DatabaseNotInitialized,
    DatabaseTransactionError,
)

logger = logging.getLogger(__name__)


class Database:
    """
    Process-wide async session manager.

    Commits when the block exits cleanly, rolls back otherwise.
    """

    _engine: Optional[AsyncEngine] = None
    _async_session_maker: Optional[async_sessionmaker] = None

    def __init__(self):
        self._session: Optional[AsyncSession] = None

    @classmethod
    def init(cls, async_db_url: URL | str, engine_kw: dict | None = None) -> None:
        """
        Create the engine and session maker.

        Args:
            async_db_url: Async database URL
            engine_kw: Extra keyword arguments for create_async_engine
        """
        cls._engine = create_async_engine(async_db_url, **(engine_kw or {}))
        cls._async_session_maker = async_sessionmaker(
            bind=cls._engine, expire_on_commit=False, class_=AsyncSession
        )
        logger.debug(f"Database session maker initialised for {cls._engine.url.drivername}")

    @classmethod
    async def close(cls) -> None:
        """Dispose the engine and forget the session maker."""
        if cls._engine is not None:
            await cls._engine.dispose()
        cls._engine = None
        cls._async_session_maker = None

    async def __aenter__(self) -> AsyncSession:
        if Database._async_session_maker is None:
            raise DatabaseNotInitialized("Database.init() must be called before use")
        self._session = Database._async_session_maker()
        return self._session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is not None:
                await self._session.rollback()
                return

            try:
                await self._session.commit()
            except SQLAlchemyError as e:
                await self._session.rollback()
                logger.error(f"Database transaction failed: {e}")
                raise DatabaseTransactionError(str(e)) from e
        finally:
            await self._session.close()
            self._session = None
