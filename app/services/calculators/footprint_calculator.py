"""
Carbon footprint calculator.

Maps a logged activity to its CO2 footprint using the static emission factor table.
"""

from app.utils.emission_factors import lookup_factor


def compute_footprint(activity_type: str, category: str, amount: float) -> float:
    """
    Calculate the carbon footprint of a single activity.

    Args:
        activity_type: Activity type (e.g. "transportation")
        category: Category within the type (e.g. "car")
        amount: Non-negative quantity, already validated by the caller

    Returns:
        Footprint in kg CO2. Unknown (type, category) pairs yield 0.0.

    Formula:
        footprint (kg CO2) = amount * emission_factor

    Example:
        >>> compute_footprint("transportation", "car", 10)
        2.1
    """
    factor = lookup_factor(activity_type, category)
    if factor is None:
        return 0.0
    return amount * factor
