# Length and volume conversions used by the form layer and the calculators

import math

from .errors import InvalidReinforcementInput

# Units in one foot
UNITS_PER_FOOT = {
    "feet": 1.0,
    "inches": 12.0,
    "meters": 0.3048,
    "centimeters": 30.48,
}

# Cubic feet in one volume unit
CUBIC_FEET_PER_UNIT = {
    "cubic_feet": 1.0,
    "cubic_yards": 27.0,
    "cubic_meters": 35.3147,
}


def to_decimal_feet(feet: float, inches: float = 0.0, fraction: float = 0.0) -> float:
    """
    Combine a feet / inches / fractional-inch entry into decimal feet.
    Out-of-range inches (e.g. 14") are accepted as typed.
    """
    return feet + (inches + fraction) / 12.0


def feet_to_feet_inches(decimal_feet: float) -> dict:
    """
    Split decimal feet into whole feet and rounded inches for display.
    9.66667 → {"feet": 9, "inches": 8, "display": "9 ft 8 in"}
    """
    feet = math.floor(decimal_feet)
    inches = round((decimal_feet - feet) * 12)

    # 11.6" rounds to 12", carry into the feet
    if inches == 12:
        feet += 1
        inches = 0

    display = "%d ft" % feet if inches == 0 else "%d ft %d in" % (feet, inches)
    return {"feet": feet, "inches": inches, "display": display}


def convert_to_feet(value: float, unit: str = "feet") -> float:
    """Convert a length in the given unit to feet."""
    if unit not in UNITS_PER_FOOT:
        raise InvalidReinforcementInput(
            f"Unknown length unit: {unit}. Available: {list(UNITS_PER_FOOT.keys())}"
        )
    return value / UNITS_PER_FOOT[unit]


def convert_volume(cubic_feet: float, unit: str = "cubic_yards") -> float:
    """Convert cubic feet to the given volume unit."""
    if unit not in CUBIC_FEET_PER_UNIT:
        raise InvalidReinforcementInput(
            f"Unknown volume unit: {unit}. Available: {list(CUBIC_FEET_PER_UNIT.keys())}"
        )
    return cubic_feet / CUBIC_FEET_PER_UNIT[unit]


def round_up_to_inch(length_ft: float) -> float:
    """Round a length in feet up to the next whole inch."""
    # round() first so 9.75 * 12 = 117.00000000000001 stays 117"
    return math.ceil(round(length_ft * 12.0, 6)) / 12.0
