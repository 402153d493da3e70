"""
Recommendation and insight service.

Two tiers produce recommendations:
- rule-based templates, always available
- an external text generator, used when one is configured

A failing external generator is masked with a fixed generic-tip message;
callers never see the error.
"""

import logging
from typing import Optional, Sequence

from app.core.exceptions import TextGenerationUnavailable
from app.pydantic_models.recommendation import InsightPydModel, RecommendationPydModel
from app.services.aggregators.statistics_aggregator import (
    FootprintRecord,
    StatisticsAggregator,
)
from app.services.recommendations.rule_based import (
    GENERIC_TIPS_MESSAGE,
    ONBOARDING_MESSAGE,
    generate_insights,
    generate_recommendations,
)
from app.services.recommendations.text_generation import TextGenerator
from app.utils.constants import (
    PROMPT_ACTIVITY_LIMIT,
    RECENT_AVERAGE_SIZE,
    RecommendationSource,
)

logger = logging.getLogger(__name__)


def build_prompt(
    activities: Sequence[FootprintRecord],
    total_footprint: float,
    activity_limit: int = PROMPT_ACTIVITY_LIMIT,
) -> str:
    """
    Build the text-generation prompt.

    Embeds the total footprint and at most ``activity_limit`` recent activities.
    """
    activity_lines = "\n".join(
        f"- {activity.activity_type}/{activity.category}: {activity.amount:g} {activity.unit} "
        f"({activity.carbon_footprint:.2f} kg CO2)"
        for activity in activities[:activity_limit]
    )
    return (
        "Based on the following carbon footprint data, provide 5 specific, actionable "
        "recommendations to reduce carbon emissions.\n\n"
        f"Total carbon footprint: {total_footprint:.2f} kg CO2\n"
        f"Recent activities:\n{activity_lines}\n\n"
        "Keep each recommendation to one or two sentences, practical and encouraging."
    )


class RecommendationService:
    """
    Service producing recommendation and insight texts for an activity set.
    """

    def __init__(
        self,
        text_generator: Optional[TextGenerator] = None,
        prompt_activity_limit: int = PROMPT_ACTIVITY_LIMIT,
        recent_average_size: int = RECENT_AVERAGE_SIZE,
        aggregator: Optional[StatisticsAggregator] = None,
    ):
        """
        Args:
            text_generator: External generator; None selects the rule-based tier
            prompt_activity_limit: Maximum activities embedded in a prompt
            recent_average_size: Activities averaged in the insights text
            aggregator: Statistics aggregator (defaults to one anchored at now)
        """
        self.text_generator = text_generator
        self.prompt_activity_limit = prompt_activity_limit
        self.recent_average_size = recent_average_size
        self.aggregator = aggregator or StatisticsAggregator()

    async def recommendations(
        self, activities: Sequence[FootprintRecord]
    ) -> RecommendationPydModel:
        """
        Produce recommendations for activities ordered most recent first.
        """
        if not activities:
            return RecommendationPydModel(
                recommendations=ONBOARDING_MESSAGE,
                source=RecommendationSource.RULE_BASED,
            )

        if self.text_generator is None:
            return RecommendationPydModel(
                recommendations=generate_recommendations(activities),
                source=RecommendationSource.RULE_BASED,
            )

        stats = self.aggregator.aggregate(activities)
        prompt = build_prompt(
            activities, stats.total_footprint, activity_limit=self.prompt_activity_limit
        )

        try:
            text = await self.text_generator.generate(prompt)
        except TextGenerationUnavailable as e:
            logger.warning(f"External text generation unavailable, using generic tips: {e}")
            return RecommendationPydModel(
                recommendations=GENERIC_TIPS_MESSAGE,
                source=RecommendationSource.FALLBACK,
            )

        return RecommendationPydModel(
            recommendations=text,
            source=RecommendationSource.GENERATED,
        )

    def insights(self, activities: Sequence[FootprintRecord]) -> InsightPydModel:
        """
        Narrate the footprint breakdown for activities ordered most recent first.
        """
        return InsightPydModel(
            insights=generate_insights(activities, self.recent_average_size),
            stats=self.aggregator.aggregate(activities),
        )
