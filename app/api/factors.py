"""
Emission Factors API router.

Read-only view of the static emission factor table.
"""
import logging

from fastapi import APIRouter, HTTPException, status

from app.pydantic_models.emission_factor import (
    ActivityCatalogPydModel,
    EmissionFactorPydModel,
)
from app.utils.constants import ActivityTypeEnum
from app.utils.emission_factors import EMISSION_FACTORS, units_for

router = APIRouter(
    prefix="/api/v1/factors",
    tags=["Emission Factors"],
)

logger = logging.getLogger(__name__)


@router.get("/", response_model=list[EmissionFactorPydModel])
async def list_emission_factors(activity_type: ActivityTypeEnum | None = None):
    """
    List emission factors, optionally for a single activity type.
    """
    return [
        EmissionFactorPydModel(
            activity_type=type_name,
            category=category,
            co2e_factor=factor,
            units=units_for(type_name),
        )
        for type_name, categories in EMISSION_FACTORS.items()
        if activity_type is None or type_name == activity_type.value
        for category, factor in categories.items()
    ]


@router.get("/{activity_type}", response_model=ActivityCatalogPydModel)
async def get_activity_catalog(activity_type: str):
    """
    Categories, factors and accepted units for one activity type.
    """
    categories = EMISSION_FACTORS.get(activity_type)
    if categories is None:
        logger.warning(f"Emission factors requested for unknown activity type {activity_type}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Activity type {activity_type} not found",
        )

    return ActivityCatalogPydModel(
        activity_type=activity_type,
        factors=dict(categories),
        units=units_for(activity_type),
    )
