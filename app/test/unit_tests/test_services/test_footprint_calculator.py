"""
Service tests for the footprint calculator and emission factor table.
"""

import pytest

from app.services.calculators.factor_matcher import FactorMatcher
from app.services.calculators.footprint_calculator import compute_footprint
from app.utils.emission_factors import (
    EMISSION_FACTORS,
    categories_for,
    lookup_factor,
    units_for,
)


def test_car_footprint():
    assert compute_footprint("transportation", "car", 10) == pytest.approx(2.1)


def test_meat_footprint():
    assert compute_footprint("food", "meat", 0.3) == pytest.approx(1.983)


def test_zero_factor_category():
    assert compute_footprint("transportation", "bike", 42) == 0.0


@pytest.mark.parametrize(
    "activity_type,category",
    [
        (activity_type, category)
        for activity_type, categories in EMISSION_FACTORS.items()
        for category in categories
    ],
)
def test_footprint_is_linear_in_amount(activity_type, category):
    """Doubling the amount doubles the footprint for every known pair."""
    for amount in (0.3, 1.0, 7.25, 1234.5):
        single = compute_footprint(activity_type, category, amount)
        double = compute_footprint(activity_type, category, 2 * amount)
        assert double == 2 * single


@pytest.mark.parametrize(
    "activity_type,category",
    [
        ("transportation", "rocket"),
        ("transportation", "Car"),
        ("food", "kwh"),
        ("spaceflight", "car"),
        ("", ""),
    ],
)
def test_unknown_pair_yields_zero(activity_type, category):
    for amount in (0, 1, 1000.5):
        assert compute_footprint(activity_type, category, amount) == 0.0


def test_table_has_no_negative_factors():
    for categories in EMISSION_FACTORS.values():
        assert all(factor >= 0 for factor in categories.values())


def test_table_is_read_only():
    with pytest.raises(TypeError):
        EMISSION_FACTORS["transportation"]["car"] = 0  # type: ignore[index]


def test_lookup_factor():
    assert lookup_factor("electricity", "kwh") == 0.92
    assert lookup_factor("water", "liter") == 0.0003
    assert lookup_factor("water", "gallons") is None
    assert lookup_factor("unknown", "liter") is None


def test_categories_and_units_share_activity_types():
    assert categories_for("food") == ["meat", "dairy", "vegetables", "grains"]
    assert units_for("transportation") == ["km", "miles"]
    assert units_for("spaceflight") == []
    for activity_type in EMISSION_FACTORS:
        assert units_for(activity_type)


def test_factor_matcher_suggests_closest_category():
    matcher = FactorMatcher()

    suggestion = matcher.suggest_category("food", "meats")
    assert suggestion is not None
    assert suggestion[0] == "meat"

    assert matcher.suggest_category("food", "zzzzzz") is None
    assert matcher.suggest_category("spaceflight", "car") is None


def test_factor_matcher_warns_on_unknown_category(caplog):
    matcher = FactorMatcher()

    with caplog.at_level("WARNING"):
        assert matcher.warn_if_unknown("transportation", "car") is True
        assert matcher.warn_if_unknown("transportation", "trian") is False

    assert "Unknown category 'trian'" in caplog.text
    assert "'train'" in caplog.text
