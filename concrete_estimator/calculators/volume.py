"""
Concrete volumes in cubic feet.

Every shape takes its dimensions in one length unit and converts to feet
first. Thickened-edge slabs add the extra edge depth around the full perimeter.
"""

import math

from ..errors import InvalidReinforcementInput
from ..units import convert_to_feet, convert_volume

BAGS_PER_CUBIC_YARD_80LB = 45


def slab_volume(length, width, thickness, unit="feet"):
    # type: (float, float, float, str) -> float
    return (convert_to_feet(length, unit) * convert_to_feet(width, unit)
            * convert_to_feet(thickness, unit))


def thickened_edge_slab_volume(length, width, base_thickness, edge_thickness,
                               edge_width, unit="feet"):
    # type: (float, float, float, float, float, str) -> float
    length_ft = convert_to_feet(length, unit)
    width_ft = convert_to_feet(width, unit)
    base_ft = convert_to_feet(base_thickness, unit)
    edge_ft = convert_to_feet(edge_thickness, unit)
    edge_width_ft = convert_to_feet(edge_width, unit)

    base_volume = length_ft * width_ft * base_ft
    perimeter_ft = 2 * (length_ft + width_ft)
    edge_volume = perimeter_ft * edge_width_ft * (edge_ft - base_ft)
    return base_volume + edge_volume


def footer_volume(length, width, depth, unit="feet"):
    # type: (float, float, float, str) -> float
    return slab_volume(length, width, depth, unit)


def rect_column_volume(width, length, height, unit="feet"):
    # type: (float, float, float, str) -> float
    return slab_volume(width, length, height, unit)


def round_column_volume(diameter, height, unit="feet"):
    # type: (float, float, str) -> float
    radius_ft = convert_to_feet(diameter, unit) / 2
    return math.pi * radius_ft * radius_ft * convert_to_feet(height, unit)


def sidewalk_volume(length, width, thickness, unit="feet"):
    # type: (float, float, float, str) -> float
    return slab_volume(length, width, thickness, unit)


def bags_80lb(cubic_yards):
    # type: (float) -> int
    """Premix bag count — about 45 × 80 lb bags per cubic yard."""
    return max(0, math.ceil(cubic_yards * BAGS_PER_CUBIC_YARD_80LB))


SHAPES = {
    "slab": lambda r: slab_volume(r.length, r.width, r.thickness, r.unit),
    "thickened_edge_slab": lambda r: thickened_edge_slab_volume(
        r.length, r.width, r.thickness, r.edge_thickness, r.edge_width, r.unit),
    "footer": lambda r: footer_volume(r.length, r.width, r.thickness, r.unit),
    "rect_column": lambda r: rect_column_volume(r.width, r.length, r.height, r.unit),
    "round_column": lambda r: round_column_volume(r.diameter, r.height, r.unit),
    "sidewalk": lambda r: sidewalk_volume(r.length, r.width, r.thickness, r.unit),
}


def shape_volume(shape, request):
    """
    Volume for a named shape from a VolumeRequest.
    Returns a dict of cubic feet, cubic yards and cubic meters.
    """
    if shape not in SHAPES:
        raise InvalidReinforcementInput(
            f"Unknown shape: {shape}. Available: {list(SHAPES.keys())}"
        )
    cubic_feet = SHAPES[shape](request)
    return {
        "shape": shape,
        "cubic_feet": cubic_feet,
        "cubic_yards": convert_volume(cubic_feet, "cubic_yards"),
        "cubic_meters": convert_volume(cubic_feet, "cubic_meters"),
        "bags_80lb": bags_80lb(convert_volume(cubic_feet, "cubic_yards")),
    }
