"""
FastAPI dependencies.
"""
from typing import AsyncGenerator, Optional

from fastapi import Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Config
from app.database.session_manager.db_session import Database
from app.services.recommendations.text_generation import (
    TextGenerationClient,
    TextGenerator,
)
from app.utils.constants import OWNER_ID_HEADER, OWNER_ID_MAX_LENGTH


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that commits on success and rolls back on error."""
    async with Database() as session:
        yield session


async def get_owner_id(
    owner_id: Optional[str] = Header(
        None,
        alias=OWNER_ID_HEADER,
        description="Opaque id of the authenticated user, set by the auth gateway",
    ),
) -> str:
    """
    Resolve the authenticated owner of the request.

    Authentication happens upstream; this only requires that an owner id was
    attached and that it fits the owner_id column.
    """
    if owner_id is None or not owner_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    owner_id = owner_id.strip()
    if len(owner_id) > OWNER_ID_MAX_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid owner identity",
        )
    return owner_id


def get_app_config(request: Request) -> Config:
    """Configuration the application was built with."""
    return request.app.state.config


def get_text_generator() -> Optional[TextGenerator]:
    """Configured external text generator, or None for rule-based only."""
    return TextGenerationClient.get()
