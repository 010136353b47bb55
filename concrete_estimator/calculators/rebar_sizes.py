"""
Rebar gauge table.

Bar number N has a nominal diameter of N/8 inch. The table is fixed,
not computed, so a saved design keeps its numbers.
"""

from ..errors import InvalidReinforcementInput
from ..schemas import RebarSize

BAR_DIAMETER_IN = {
    RebarSize.NO_1: 0.125,
    RebarSize.NO_2: 0.25,
    RebarSize.NO_3: 0.375,
    RebarSize.NO_4: 0.5,
    RebarSize.NO_5: 0.625,
    RebarSize.NO_6: 0.75,
    RebarSize.NO_7: 0.875,
    RebarSize.NO_8: 1.0,
}

# Lap splice length = multiplier × bar diameter
SLAB_SPLICE_MULTIPLIER = 30
COLUMN_SPLICE_MULTIPLIER = 40


def to_rebar_size(value) -> RebarSize:
    """Accept RebarSize, '#5', '5' or 5."""
    if isinstance(value, RebarSize):
        return value
    s = str(value).strip()
    if s.endswith(".0"):
        s = s[:-2]
    if not s.startswith("#"):
        s = "#" + s
    try:
        return RebarSize(s)
    except ValueError:
        raise InvalidReinforcementInput(
            f"Unknown rebar size: {value}. Available: {[r.value for r in RebarSize]}"
        )


def bar_diameter_in(size) -> float:
    return BAR_DIAMETER_IN[to_rebar_size(size)]


def lap_splice_ft(size, multiplier: int = SLAB_SPLICE_MULTIPLIER) -> float:
    """Lap splice length in feet for a bar size."""
    return (multiplier * bar_diameter_in(size)) / 12.0
