"""
Activities API router.

Owner-scoped CRUD for activities plus on-demand footprint statistics.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Config
from app.core.dependencies import get_app_config, get_db_session, get_owner_id
from app.pydantic_models.activity import (
    ActivityCreate,
    ActivityDeletedPydModel,
    ActivityPydModel,
    ActivityUpdate,
)
from app.pydantic_models.statistics import (
    FootprintStatsPydModel,
    StatisticsTrendPydModel,
)
from app.services.activity_store import ActivityStore
from app.services.aggregators.statistics_aggregator import StatisticsAggregator
from app.utils.constants import MONTHLY_WINDOW_DAYS, TREND_WINDOW_DAYS

router = APIRouter(
    prefix="/api/v1/activities",
    tags=["Activities"],
)

logger = logging.getLogger(__name__)


def _aggregator(config: Config) -> StatisticsAggregator:
    settings = config.section("statistics")
    return StatisticsAggregator(
        monthly_window_days=settings.get("monthly_window_days", MONTHLY_WINDOW_DAYS),
        trend_window_days=settings.get("trend_window_days", TREND_WINDOW_DAYS),
    )


@router.post(
    "/",
    response_model=ActivityPydModel,
    status_code=status.HTTP_201_CREATED,
)
async def create_activity(
    activity_in: ActivityCreate,
    owner_id: str = Depends(get_owner_id),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Log a new activity.

    The carbon footprint is computed from type, category and amount. An
    unknown category is accepted and recorded with a zero footprint.
    """
    store = ActivityStore(session)
    return await store.create(owner_id, activity_in)


@router.get("/", response_model=list[ActivityPydModel])
async def list_activities(
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, description="Maximum activities to return"),
    owner_id: str = Depends(get_owner_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List the owner's activities, most recent first."""
    store = ActivityStore(session)
    return await store.list(owner_id, skip=skip, limit=limit)


@router.get("/stats", response_model=FootprintStatsPydModel)
async def get_activity_stats(
    owner_id: str = Depends(get_owner_id),
    session: AsyncSession = Depends(get_db_session),
    config: Config = Depends(get_app_config),
):
    """
    Footprint statistics over all of the owner's activities.

    Returns total, trailing 30-day and per-type footprints and the activity count.
    """
    activities = await ActivityStore(session).list(owner_id)
    logger.info(
        f"Computing footprint statistics for owner {owner_id} over {len(activities)} activities"
    )
    return _aggregator(config).aggregate(activities)


@router.get("/stats/trend", response_model=StatisticsTrendPydModel)
async def get_activity_trend(
    owner_id: str = Depends(get_owner_id),
    session: AsyncSession = Depends(get_db_session),
    config: Config = Depends(get_app_config),
):
    """
    Week-over-week footprint comparison and average footprint per activity.
    """
    activities = await ActivityStore(session).list(owner_id)
    logger.info(
        f"Computing footprint trend for owner {owner_id} over {len(activities)} activities"
    )
    return _aggregator(config).trend_summary(activities)


@router.get("/{activity_id}", response_model=ActivityPydModel)
async def get_activity(
    activity_id: str,
    owner_id: str = Depends(get_owner_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get one of the owner's activities."""
    store = ActivityStore(session)
    return await store.get(owner_id, activity_id)


@router.put("/{activity_id}", response_model=ActivityPydModel)
async def update_activity(
    activity_id: str,
    activity_in: ActivityUpdate,
    owner_id: str = Depends(get_owner_id),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Replace an activity's fields and recompute its carbon footprint.
    """
    store = ActivityStore(session)
    return await store.update(owner_id, activity_id, activity_in)


@router.delete("/{activity_id}", response_model=ActivityDeletedPydModel)
async def delete_activity(
    activity_id: str,
    owner_id: str = Depends(get_owner_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete one of the owner's activities."""
    store = ActivityStore(session)
    await store.delete(owner_id, activity_id)
    return ActivityDeletedPydModel(id=activity_id)
