"""
Rule-based recommendation and insight texts.

Recommendations rank activity types by their share of the footprint and
prescribe actions; insights narrate the existing breakdown.
"""

from typing import Sequence

from app.services.aggregators.statistics_aggregator import (
    FootprintRecord,
    StatisticsAggregator,
    footprint_by_category,
    footprint_by_type,
)
from app.utils.constants import RECENT_AVERAGE_SIZE, ActivityType

ONBOARDING_MESSAGE = """Welcome to Carbon Tracker! You haven't logged any activities yet.

Start tracking your daily activities to receive personalized recommendations:

1. Log your transportation methods (car, bus, train, flights)
2. Track your electricity consumption
3. Record your food choices and meals
4. Monitor your waste disposal habits
5. Keep track of water usage

Once you have some data, come back here for tailored suggestions to reduce your environmental impact!"""

GENERIC_TIPS_MESSAGE = """Here are some helpful tips to reduce your carbon footprint:

1. Use public transportation, bike, or walk instead of driving alone
2. Reduce energy consumption by turning off lights and unplugging devices
3. Choose plant-based meals more often to lower food emissions
4. Recycle and compost to minimize waste sent to landfills
5. Use water efficiently and fix any leaks in your home

Visit the Statistics page to see your detailed carbon footprint breakdown!"""

NO_INSIGHTS_MESSAGE = (
    "No activities logged yet. Start tracking your daily activities to see "
    "detailed insights about your carbon footprint patterns."
)

# Total footprint bands (kg CO2) for the closing remark
HIGH_FOOTPRINT_THRESHOLD = 100
MODERATE_FOOTPRINT_THRESHOLD = 50

TYPE_ICONS = {
    ActivityType.TRANSPORTATION: "🚗",
    ActivityType.ELECTRICITY: "⚡",
    ActivityType.FOOD: "🍽️",
    ActivityType.WASTE: "🗑️",
    ActivityType.WATER: "💧",
}


def _percentage(value: float, total: float) -> float:
    if total == 0:
        return 0.0
    return value / total * 100


def _rank(values: dict[str, float]) -> list[tuple[str, float]]:
    """Sort descending by value; ties keep first-seen order."""
    return sorted(values.items(), key=lambda item: item[1], reverse=True)


def _type_recommendation(
    activity_type: str, top_category: str | None, percentage: str
) -> str | None:
    if activity_type == ActivityType.TRANSPORTATION:
        if top_category == "car":
            return (
                f"Your car usage accounts for {percentage}% of emissions. Consider carpooling, "
                "using public transit, or switching to an electric vehicle for shorter commutes."
            )
        if top_category == "flight":
            return (
                f"Air travel makes up {percentage}% of your footprint. Consider video calls "
                "instead of business trips, or choose trains for shorter distances when possible."
            )
        return (
            f"Transportation contributes {percentage}% to your emissions. Walking or cycling "
            "for trips under 2km can make a significant difference."
        )

    if activity_type == ActivityType.ELECTRICITY:
        return (
            f"Electricity usage represents {percentage}% of your carbon footprint. Switch to "
            "LED bulbs, unplug devices when not in use, and consider renewable energy sources."
        )

    if activity_type == ActivityType.FOOD:
        if top_category == "meat":
            return (
                f"Meat consumption accounts for {percentage}% of your emissions. Try incorporating "
                "more plant-based meals or choosing chicken over beef when you do eat meat."
            )
        return (
            f"Food choices contribute {percentage}% to your footprint. Buying local and "
            "seasonal produce can reduce food transportation emissions."
        )

    if activity_type == ActivityType.WASTE:
        return (
            f"Waste disposal accounts for {percentage}% of emissions. Focus on reducing "
            "single-use plastics and composting organic waste to minimize landfill contributions."
        )

    if activity_type == ActivityType.WATER:
        return (
            f"Water usage contributes {percentage}% to your footprint. Taking shorter showers "
            "and fixing leaky faucets can help reduce this significantly."
        )

    return None


def _closing_remark(total: float) -> str:
    if total > HIGH_FOOTPRINT_THRESHOLD:
        return (
            f"Your total footprint of {total:.2f} kg CO2 is above average. Small daily changes "
            "can lead to meaningful reductions over time."
        )
    if total > MODERATE_FOOTPRINT_THRESHOLD:
        return (
            f"Your footprint of {total:.2f} kg CO2 is moderate. Keep up the good work and "
            "focus on your highest emission areas."
        )
    return (
        f"Great job! Your footprint of {total:.2f} kg CO2 is relatively low. "
        "Continue your eco-friendly habits!"
    )


def generate_recommendations(activities: Sequence[FootprintRecord]) -> str:
    """
    Build personalised recommendations from an activity set.

    Every activity type present gets one numbered recommendation, highest
    contributor first; a remark on the total footprint closes the text.
    """
    if not activities:
        return ONBOARDING_MESSAGE

    by_type = footprint_by_type(activities)
    by_category = footprint_by_category(activities)
    total = sum(by_type.values(), 0.0)

    sections = [
        "Based on your activity data, here are personalized recommendations "
        "to reduce your carbon footprint:"
    ]

    number = 0
    for activity_type, type_total in _rank(by_type):
        ranked_categories = _rank(by_category.get(activity_type, {}))
        top_category = ranked_categories[0][0] if ranked_categories else None
        percentage = f"{_percentage(type_total, total):.1f}"

        text = _type_recommendation(activity_type, top_category, percentage)
        if text is None:
            continue
        number += 1
        sections.append(f"{number}. {text}")

    sections.append(_closing_remark(total))
    return "\n\n".join(sections)


def generate_insights(
    activities: Sequence[FootprintRecord],
    recent_average_size: int = RECENT_AVERAGE_SIZE,
) -> str:
    """
    Describe where an owner's footprint comes from.

    Args:
        activities: Activity set, most recent first
        recent_average_size: How many recent activities to average
    """
    if not activities:
        return NO_INSIGHTS_MESSAGE

    by_type = footprint_by_type(activities)
    total = sum(by_type.values(), 0.0)
    ranked = _rank(by_type)

    lines = [
        "Your Carbon Footprint Analysis",
        "",
        f"Total Emissions: {total:.2f} kg CO2 across {len(activities)} logged activities.",
        "",
    ]

    top_type, top_value = ranked[0]
    lines.append(
        f"Primary Emission Source: {top_type.capitalize()} "
        f"({_percentage(top_value, total):.1f}% of total emissions)"
    )
    lines.append("This is your biggest area for potential improvement.")
    lines.append("")

    lines.append("Breakdown by Category:")
    for activity_type, value in ranked:
        icon = TYPE_ICONS.get(activity_type, "•")
        lines.append(
            f"{icon} {activity_type.capitalize()}: {value:.2f} kg CO2 "
            f"({_percentage(value, total):.1f}%)"
        )

    recent_average = StatisticsAggregator.recent_average(activities, recent_average_size)
    lines.append("")
    lines.append(f"Recent Activity Average: {recent_average:.2f} kg CO2 per activity")

    return "\n".join(lines)
