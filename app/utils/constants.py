"""
Application constants following kkb_fastapi pattern.
"""
from enum import Enum


class ConfigFile:
    """Configuration file paths."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class ActivityType:
    """Activity type constants."""
    TRANSPORTATION = "transportation"
    ELECTRICITY = "electricity"
    FOOD = "food"
    WASTE = "waste"
    WATER = "water"


class ActivityTypeEnum(str, Enum):
    """Activity type enum for API parameters."""
    TRANSPORTATION = "transportation"
    ELECTRICITY = "electricity"
    FOOD = "food"
    WASTE = "waste"
    WATER = "water"


class TrendDirection(str, Enum):
    """Week-over-week footprint trend."""
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


class RecommendationSource(str, Enum):
    """Which tier produced a recommendation text."""
    RULE_BASED = "rule_based"
    GENERATED = "generated"
    FALLBACK = "fallback"


# Rolling windows (days) used by the statistics aggregator
MONTHLY_WINDOW_DAYS = 30
TREND_WINDOW_DAYS = 7

# Number of most recent activities averaged in insights
RECENT_AVERAGE_SIZE = 5

# Activity limits for recommendation generation
RECOMMENDATION_ACTIVITY_LIMIT = 20
PROMPT_ACTIVITY_LIMIT = 10

# Header carrying the opaque owner id set by the auth gateway
OWNER_ID_HEADER = "X-User-Id"

# Minimum rapidfuzz score for a category suggestion
CATEGORY_SUGGESTION_THRESHOLD = 60

# Largest accepted activity amount; keeps every footprint and sum finite
MAX_ACTIVITY_AMOUNT = 1e9

# Length of the owner_id column
OWNER_ID_MAX_LENGTH = 64
