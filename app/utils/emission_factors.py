"""
Static emission factor table.

Two-level mapping ``activity type -> category -> kg CO2 per unit`` plus the
display units accepted for each activity type. This table is the single
source of truth for the footprint calculator, category suggestions and the
factors API; its activity types must match the enum requests are validated
against.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from app.utils.constants import ActivityType, ActivityTypeEnum

_FACTORS = {
    ActivityType.TRANSPORTATION: {
        "car": 0.21,
        "bus": 0.089,
        "train": 0.041,
        "flight": 0.255,
        "bike": 0.0,
    },
    ActivityType.ELECTRICITY: {
        "kwh": 0.92,
    },
    ActivityType.FOOD: {
        "meat": 6.61,
        "dairy": 1.35,
        "vegetables": 0.43,
        "grains": 0.76,
    },
    ActivityType.WASTE: {
        "landfill": 0.57,
        "recycling": 0.21,
    },
    ActivityType.WATER: {
        "liter": 0.0003,
    },
}

_UNITS = {
    ActivityType.TRANSPORTATION: ("km", "miles"),
    ActivityType.ELECTRICITY: ("kwh",),
    ActivityType.FOOD: ("kg", "servings"),
    ActivityType.WASTE: ("kg",),
    ActivityType.WATER: ("liter", "gallons"),
}


def _validate_table() -> None:
    if set(_FACTORS) != {member.value for member in ActivityTypeEnum}:
        raise ValueError("Emission factor table does not match ActivityTypeEnum")
    if set(_FACTORS) != set(_UNITS):
        raise ValueError("Emission factor and unit tables cover different activity types")

    for activity_type, categories in _FACTORS.items():
        if not categories:
            raise ValueError(f"No categories defined for {activity_type}")
        for category, factor in categories.items():
            if factor < 0:
                raise ValueError(
                    f"Negative emission factor for {activity_type}/{category}: {factor}"
                )


_validate_table()

EMISSION_FACTORS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {activity_type: MappingProxyType(dict(categories)) for activity_type, categories in _FACTORS.items()}
)

ACTIVITY_UNITS: Mapping[str, tuple[str, ...]] = MappingProxyType(dict(_UNITS))


def lookup_factor(activity_type: str, category: str) -> Optional[float]:
    """
    Look up the emission factor for an activity type and category.

    Returns:
        Factor in kg CO2 per unit, or None when the pair is unknown
    """
    categories = EMISSION_FACTORS.get(activity_type)
    if categories is None:
        return None
    return categories.get(category)


def categories_for(activity_type: str) -> list[str]:
    """Known categories for an activity type, in table order."""
    return list(EMISSION_FACTORS.get(activity_type, {}))


def units_for(activity_type: str) -> list[str]:
    """Display units accepted for an activity type."""
    return list(ACTIVITY_UNITS.get(activity_type, ()))
