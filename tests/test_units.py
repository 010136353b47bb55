"""
Unit conversion tests.

1-3.  Feet / inches / fraction entry
4-7.  Decimal feet → feet + inches display
8-10. Length and volume unit conversion
11.   Whole-inch round up
"""

import pytest

from concrete_estimator.errors import InvalidReinforcementInput
from concrete_estimator.units import (
    convert_to_feet,
    convert_volume,
    feet_to_feet_inches,
    round_up_to_inch,
    to_decimal_feet,
)


def test_to_decimal_feet_whole_inches():
    assert to_decimal_feet(10, 6, 0) == 10.5


def test_to_decimal_feet_with_fraction():
    """10' 5 1/2" = 10 + 5.5/12 ft."""
    assert to_decimal_feet(10, 5, 0.5) == pytest.approx(10 + 5.5 / 12)


def test_to_decimal_feet_accepts_out_of_range_inches():
    """14" is not rejected — range checks belong to the form."""
    assert to_decimal_feet(1, 14, 0) == pytest.approx(1 + 14 / 12)
    assert to_decimal_feet(2, -6, 0) == pytest.approx(1.5)


def test_feet_to_feet_inches_basic():
    result = feet_to_feet_inches(9 + 8 / 12)
    assert result == {"feet": 9, "inches": 8, "display": "9 ft 8 in"}


def test_feet_to_feet_inches_omits_zero_inches():
    assert feet_to_feet_inches(9.0)["display"] == "9 ft"
    assert feet_to_feet_inches(9.0)["inches"] == 0


def test_feet_to_feet_inches_rolls_over_twelve_inches():
    """9.98 ft → 11.76" rounds to 12" → 10 ft 0 in."""
    result = feet_to_feet_inches(9.98)
    assert result["feet"] == 10
    assert result["inches"] == 0
    assert result["display"] == "10 ft"


def test_feet_to_feet_inches_half_foot():
    assert feet_to_feet_inches(18.75)["display"] == "18 ft 9 in"


def test_convert_to_feet_units():
    assert convert_to_feet(24, "inches") == pytest.approx(2.0)
    assert convert_to_feet(1, "meters") == pytest.approx(3.28084)
    assert convert_to_feet(5, "feet") == 5


def test_convert_volume_cubic_yards():
    assert convert_volume(27, "cubic_yards") == pytest.approx(1.0)
    assert convert_volume(27, "cubic_feet") == 27


def test_unknown_units_raise():
    with pytest.raises(InvalidReinforcementInput):
        convert_to_feet(1, "furlongs")
    with pytest.raises(InvalidReinforcementInput):
        convert_volume(1, "gallons")


def test_round_up_to_inch():
    assert round_up_to_inch(9.5) == 9.5
    assert round_up_to_inch(9.75) == 9.75           # no float creep to 118"
    assert round_up_to_inch(9.51) == pytest.approx(115 / 12)
    assert round_up_to_inch(19.375) == pytest.approx(233 / 12)
