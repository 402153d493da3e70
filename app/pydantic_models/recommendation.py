"""
Pydantic models for recommendation and insight responses.
"""

from pydantic import BaseModel, Field

from app.pydantic_models.statistics import FootprintStatsPydModel
from app.utils.constants import RecommendationSource


class RecommendationPydModel(BaseModel):
    """Recommendation text and the tier that produced it."""

    recommendations: str = Field(..., description="Human-readable recommendations")
    source: RecommendationSource = Field(..., examples=[RecommendationSource.RULE_BASED])


class InsightPydModel(BaseModel):
    """Narrative breakdown of the owner's footprint."""

    insights: str = Field(..., description="Human-readable analysis")
    stats: FootprintStatsPydModel
