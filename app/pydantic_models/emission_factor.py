"""
Pydantic models for the emission factor table.
"""

from pydantic import BaseModel, Field


class EmissionFactorPydModel(BaseModel):
    """One row of the emission factor table."""

    activity_type: str = Field(..., examples=["transportation"])
    category: str = Field(..., examples=["car"])
    co2e_factor: float = Field(
        ..., ge=0, description="kg CO2 per unit of the category", examples=[0.21]
    )
    units: list[str] = Field(..., examples=[["km", "miles"]])


class ActivityCatalogPydModel(BaseModel):
    """Categories, factors and accepted units for one activity type."""

    activity_type: str = Field(..., examples=["food"])
    factors: dict[str, float] = Field(
        ..., examples=[{"meat": 6.61, "dairy": 1.35}]
    )
    units: list[str] = Field(..., examples=[["kg", "servings"]])
