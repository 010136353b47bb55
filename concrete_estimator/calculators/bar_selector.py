"""
Bar size selection — rules of thumb for flat work and columns.

Slabs/footers:  #4 under 5.5", #5 for 5.5"–8", #6 over 8".
Columns:        size from the larger plan dimension, one vertical bar
                per 8" of perimeter, never fewer than 4.
"""

import logging
import math
from typing import Optional

from ..config import settings
from ..schemas import BarPick, ColumnBarPick, RebarSize
from .rebar_sizes import to_rebar_size

logger = logging.getLogger(__name__)

MIN_VERTICAL_BARS = 4
VERTICAL_BAR_PERIMETER_IN = 8.0


def pick_slab_bar(thickness_in: float) -> RebarSize:
    if thickness_in < 5.5:
        return RebarSize.NO_4
    if thickness_in <= 8:
        return RebarSize.NO_5
    return RebarSize.NO_6


def pick_slab_rebar(thickness_in: float, spacing_x_in: float = None,
                    spacing_y_in: float = None, manual_size=None) -> BarPick:
    """
    Bar size + spacing for a slab. A manual size bypasses the thickness rule.
    Omitted spacings fall back to DEFAULT_SPACING_IN.
    """
    if spacing_x_in is None:
        spacing_x_in = settings.DEFAULT_SPACING_IN
    if spacing_y_in is None:
        spacing_y_in = settings.DEFAULT_SPACING_IN

    if manual_size is not None:
        size = to_rebar_size(manual_size)
        logger.debug("Manual slab bar size %s", size.value)
    else:
        size = pick_slab_bar(thickness_in)

    return BarPick(size=size, spacing_x_in=spacing_x_in, spacing_y_in=spacing_y_in)


def default_vertical_bars(width_ft: float, length_ft: float) -> int:
    perimeter_in = 2 * (width_ft + length_ft) * 12
    return max(MIN_VERTICAL_BARS, math.ceil(perimeter_in / VERTICAL_BAR_PERIMETER_IN))


def pick_column_bar(width_ft: float, length_ft: float,
                    vertical_bars: Optional[int] = None) -> ColumnBarPick:
    """Size from max(width, length): < 1 ft → #4, < 2 ft → #5, else #6."""
    max_dimension = max(width_ft, length_ft)
    if max_dimension < 1:
        size = RebarSize.NO_4
    elif max_dimension < 2:
        size = RebarSize.NO_5
    else:
        size = RebarSize.NO_6

    if vertical_bars is None:
        vertical_bars = default_vertical_bars(width_ft, length_ft)
    return ColumnBarPick(size=size, vertical_bars=_at_least_min_bars(vertical_bars))


def pick_column_rebar(width_ft: float, length_ft: float, manual_size=None,
                      vertical_bars: Optional[int] = None) -> ColumnBarPick:
    """
    Column pick. A manual size skips the dimension rule and its bar count
    defaults to 4 when none is given.
    """
    if manual_size is None:
        return pick_column_bar(width_ft, length_ft, vertical_bars)

    size = to_rebar_size(manual_size)
    if vertical_bars is None:
        vertical_bars = MIN_VERTICAL_BARS
    logger.debug("Manual column bar size %s × %d", size.value, vertical_bars)
    return ColumnBarPick(size=size, vertical_bars=_at_least_min_bars(vertical_bars))


def _at_least_min_bars(count: int) -> int:
    count = int(count)
    if count < MIN_VERTICAL_BARS:
        logger.warning("Vertical bar count %d raised to minimum of %d",
                       count, MIN_VERTICAL_BARS)
        return MIN_VERTICAL_BARS
    return count
