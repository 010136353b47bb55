"""
Slab / footer rebar calculator.

Two mats of bars: the X list runs across the width at X spacing,
the Y list runs across the length at Y spacing. Lap splices are 30× bar diameter.
"""

import logging

from ..config import settings
from ..schemas import RebarResult
from .bar_selector import pick_slab_rebar
from .base import BaseCalculator
from .cut_list import build_cut_list, list_totals
from .rebar_sizes import SLAB_SPLICE_MULTIPLIER

logger = logging.getLogger(__name__)


def calculate_slab_rebar(length_ft: float, width_ft: float, thickness_in: float,
                         cover_in: float = None, stock_ft: float = None,
                         manual_size=None, spacing_x_in: float = None,
                         spacing_y_in: float = None) -> RebarResult:
    """
    Complete rebar solution for a rectangular slab or footer.

    Omitted cover, stock length and spacings take the configured defaults
    (2" cover, 20 ft stock, 12" o.c.).
    """
    if cover_in is None:
        cover_in = settings.DEFAULT_SLAB_COVER_IN
    if stock_ft is None:
        stock_ft = settings.DEFAULT_STOCK_LENGTH_FT

    pick = pick_slab_rebar(thickness_in, spacing_x_in, spacing_y_in, manual_size)

    list_x = build_cut_list(width_ft, pick.spacing_x_in, cover_in, stock_ft,
                            pick.size, SLAB_SPLICE_MULTIPLIER)
    list_y = build_cut_list(length_ft, pick.spacing_y_in, cover_in, stock_ft,
                            pick.size, SLAB_SPLICE_MULTIPLIER)
    total_bars, total_linear_ft = list_totals(list_x, list_y)

    logger.debug("Slab %.2f × %.2f ft: %s, %d bars, %.1f lf",
                 length_ft, width_ft, pick.size.value, total_bars, total_linear_ft)

    return RebarResult(
        pick=pick,
        list_x=list_x,
        list_y=list_y,
        total_bars=total_bars,
        total_linear_ft=total_linear_ft,
    )


class SlabRebarCalculator(BaseCalculator):

    kind = "rebar"

    def parse_cover(self, fields: dict) -> float:
        return self.parse_inches(fields.get("cover"), default=settings.DEFAULT_SLAB_COVER_IN)

    def calculate(self, fields: dict) -> RebarResult:
        manual_size = self.parse_manual_size(fields)
        return calculate_slab_rebar(
            length_ft=self.parse_length_ft(fields, "length"),
            width_ft=self.parse_length_ft(fields, "width"),
            thickness_in=self.parse_inches(fields.get("thickness")),
            cover_in=self.parse_cover(fields),
            stock_ft=self.parse_feet(fields.get("stock_length"), default=None),
            manual_size=manual_size,
            spacing_x_in=self.parse_optional_inches(fields.get("spacing_x")),
            spacing_y_in=self.parse_optional_inches(fields.get("spacing_y")),
        )
