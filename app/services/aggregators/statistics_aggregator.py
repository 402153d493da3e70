"""
Footprint Statistics Service.

Derives summary metrics from an owner's activities. Nothing is cached or
stored: every call recomputes from the activity set it is given.

Windows are rolling, measured back from "now" rather than aligned to
calendar weeks or months.
"""

import logging
from collections import defaultdict
from datetime import datetime, timedelta
from typing import Iterable, Optional, Protocol, Sequence

from app.pydantic_models.statistics import (
    FootprintStatsPydModel,
    StatisticsTrendPydModel,
    WeeklyTrendPydModel,
)
from app.utils.constants import (
    MONTHLY_WINDOW_DAYS,
    RECENT_AVERAGE_SIZE,
    TREND_WINDOW_DAYS,
    TrendDirection,
)

logger = logging.getLogger(__name__)


class FootprintRecord(Protocol):
    """Fields of an activity the aggregator reads."""

    activity_type: str
    category: str
    amount: float
    unit: str
    carbon_footprint: float
    date: datetime


def _window_sum(
    activities: Iterable[FootprintRecord],
    start: datetime,
    end: Optional[datetime] = None,
) -> float:
    """Sum footprints with start <= date (< end when end is given)."""
    return sum(
        (
            activity.carbon_footprint
            for activity in activities
            if activity.date >= start and (end is None or activity.date < end)
        ),
        0.0,
    )


def footprint_by_type(activities: Iterable[FootprintRecord]) -> dict[str, float]:
    """Footprint per activity type; types with no activity are absent."""
    by_type: dict[str, float] = defaultdict(float)
    for activity in activities:
        by_type[activity.activity_type] += activity.carbon_footprint
    return dict(by_type)


def footprint_by_category(
    activities: Iterable[FootprintRecord],
) -> dict[str, dict[str, float]]:
    """Footprint per category, nested under each activity type."""
    by_category: dict[str, dict[str, float]] = defaultdict(lambda: defaultdict(float))
    for activity in activities:
        by_category[activity.activity_type][activity.category] += activity.carbon_footprint
    return {activity_type: dict(categories) for activity_type, categories in by_category.items()}


def average_footprint(activities: Sequence[FootprintRecord]) -> float:
    """Mean footprint per activity, 0.0 for an empty set."""
    if not activities:
        return 0.0
    return sum((activity.carbon_footprint for activity in activities), 0.0) / len(activities)


class StatisticsAggregator:
    """
    Service computing footprint statistics for an activity set.

    Computes:
    - Total, 30-day and per-type footprints plus the activity count
    - Week-over-week trend
    - Average footprint per activity
    """

    def __init__(
        self,
        now: Optional[datetime] = None,
        monthly_window_days: int = MONTHLY_WINDOW_DAYS,
        trend_window_days: int = TREND_WINDOW_DAYS,
    ):
        """
        Args:
            now: Reference time for rolling windows (naive UTC, defaults to utcnow)
            monthly_window_days: Length of the "monthly" window
            trend_window_days: Length of each week in the trend comparison
        """
        self.now = now or datetime.utcnow()
        self.monthly_window = timedelta(days=monthly_window_days)
        self.trend_window = timedelta(days=trend_window_days)

    def aggregate(self, activities: Sequence[FootprintRecord]) -> FootprintStatsPydModel:
        """
        Aggregate an activity set into summary statistics.

        The total is the sum of the per-type sums, so ``sum(by_type.values())``
        always equals ``total_footprint`` exactly. The monthly figure is summed
        with the same per-type grouping and key order, so it never exceeds the
        total and equals it when every activity is inside the window.
        """
        by_type = footprint_by_type(activities)
        total = sum(by_type.values(), 0.0)

        month_start = self.now - self.monthly_window
        monthly_by_type = footprint_by_type(
            activity for activity in activities if activity.date >= month_start
        )
        monthly = sum(
            (monthly_by_type.get(activity_type, 0.0) for activity_type in by_type), 0.0
        )

        logger.debug(
            f"Aggregated {len(activities)} activities: total={total:.4f}, "
            f"monthly={monthly:.4f}, types={sorted(by_type)}"
        )

        return FootprintStatsPydModel(
            total_footprint=total,
            monthly_footprint=monthly,
            by_type=by_type,
            activity_count=len(activities),
        )

    def weekly_trend(self, activities: Sequence[FootprintRecord]) -> WeeklyTrendPydModel:
        """
        Compare the trailing week with the week before it.

        A zero previous week reports 0% change and a neutral trend.
        """
        week_start = self.now - self.trend_window
        this_week = _window_sum(activities, start=week_start, end=self.now)
        last_week = _window_sum(
            activities, start=week_start - self.trend_window, end=week_start
        )

        if last_week == 0:
            percent_change = 0.0
        else:
            percent_change = (this_week - last_week) / last_week * 100

        if percent_change > 0:
            trend = TrendDirection.UP
        elif percent_change < 0:
            trend = TrendDirection.DOWN
        else:
            trend = TrendDirection.NEUTRAL

        return WeeklyTrendPydModel(
            this_week=this_week,
            last_week=last_week,
            percent_change=percent_change,
            trend=trend,
        )

    def average_per_activity(self, activities: Sequence[FootprintRecord]) -> float:
        """Total footprint divided by activity count, 0.0 when there are none."""
        stats = self.aggregate(activities)
        if stats.activity_count == 0:
            return 0.0
        return stats.total_footprint / stats.activity_count

    def trend_summary(self, activities: Sequence[FootprintRecord]) -> StatisticsTrendPydModel:
        """Weekly trend together with the per-activity average."""
        trend = self.weekly_trend(activities)
        return StatisticsTrendPydModel(
            **trend.model_dump(),
            average_per_activity=self.average_per_activity(activities),
        )

    @staticmethod
    def recent_average(
        activities: Sequence[FootprintRecord], size: int = RECENT_AVERAGE_SIZE
    ) -> float:
        """Average footprint of the ``size`` most recent activities (input is newest first)."""
        return average_footprint(activities[:size])
