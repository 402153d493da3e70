"""
Recommendations API router.

Read-only text generated from the owner's activities.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Config
from app.core.dependencies import (
    get_app_config,
    get_db_session,
    get_owner_id,
    get_text_generator,
)
from app.pydantic_models.recommendation import InsightPydModel, RecommendationPydModel
from app.services.activity_store import ActivityStore
from app.services.recommendations.recommendation_service import RecommendationService
from app.services.recommendations.text_generation import TextGenerator
from app.utils.constants import (
    PROMPT_ACTIVITY_LIMIT,
    RECENT_AVERAGE_SIZE,
    RECOMMENDATION_ACTIVITY_LIMIT,
)

router = APIRouter(
    prefix="/api/v1/ai",
    tags=["Recommendations"],
)

logger = logging.getLogger(__name__)


@router.post("/recommendations", response_model=RecommendationPydModel)
async def get_recommendations(
    owner_id: str = Depends(get_owner_id),
    session: AsyncSession = Depends(get_db_session),
    config: Config = Depends(get_app_config),
    text_generator: Optional[TextGenerator] = Depends(get_text_generator),
):
    """
    Recommendations for reducing the owner's footprint.

    Uses the owner's most recent activities. When an external text generator
    is configured its output is returned verbatim; if it fails a generic set
    of tips is returned instead.
    """
    settings = config.section("recommendations")
    activities = await ActivityStore(session).list(
        owner_id,
        limit=settings.get("activity_limit", RECOMMENDATION_ACTIVITY_LIMIT),
    )

    service = RecommendationService(
        text_generator=text_generator,
        prompt_activity_limit=settings.get("prompt_activity_limit", PROMPT_ACTIVITY_LIMIT),
    )
    result = await service.recommendations(activities)

    logger.info(
        f"Generated {result.source.value} recommendations for owner {owner_id} "
        f"from {len(activities)} activities"
    )
    return result


@router.post("/insights", response_model=InsightPydModel)
async def get_insights(
    owner_id: str = Depends(get_owner_id),
    session: AsyncSession = Depends(get_db_session),
    config: Config = Depends(get_app_config),
):
    """
    Narrative breakdown of where the owner's footprint comes from.
    """
    activities = await ActivityStore(session).list(owner_id)
    service = RecommendationService(
        recent_average_size=config.section("statistics").get(
            "recent_average_size", RECENT_AVERAGE_SIZE
        ),
    )
    return service.insights(activities)
