"""
Pydantic models for footprint statistics.

Statistics are transient: recomputed from an owner's activities on every request.
"""

from pydantic import BaseModel, Field

from app.utils.constants import TrendDirection


class FootprintStatsPydModel(BaseModel):
    """Summary metrics over an activity set."""

    total_footprint: float = Field(
        0.0, description="Sum of all activity footprints (kg CO2)", examples=[42.5]
    )
    monthly_footprint: float = Field(
        0.0,
        description="Footprint of activities in the trailing 30-day window (kg CO2)",
        examples=[12.3],
    )
    by_type: dict[str, float] = Field(
        default_factory=dict,
        description="Footprint per activity type; only types that occur are present",
        examples=[{"transportation": 30.2, "food": 12.3}],
    )
    activity_count: int = Field(
        0, description="Number of activities (all time)", examples=[17]
    )


class WeeklyTrendPydModel(BaseModel):
    """Week-over-week footprint comparison."""

    this_week: float = Field(
        ..., description="Footprint over [now - 7d, now)", examples=[8.4]
    )
    last_week: float = Field(
        ..., description="Footprint over [now - 14d, now - 7d)", examples=[10.5]
    )
    percent_change: float = Field(
        ...,
        description="(this_week - last_week) / last_week * 100; 0 when last_week is 0",
        examples=[-20.0],
    )
    trend: TrendDirection = Field(..., examples=[TrendDirection.DOWN])


class StatisticsTrendPydModel(WeeklyTrendPydModel):
    """Trend comparison plus the per-activity average."""

    average_per_activity: float = Field(
        ..., description="total_footprint / activity_count, 0 for no activities"
    )
