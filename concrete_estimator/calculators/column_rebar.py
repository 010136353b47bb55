"""
Column rebar calculator — vertical bars plus closed ties.

Verticals: clear height (height minus top and bottom cover), spliced at
40× bar diameter when taller than the stock.
Ties: one closed loop inside the cover per spacing interval up the column,
only when both sides have clear room inside the cover.
Spacing 12" for #4, 10" for #5, 8" for larger bars (never over 16").
Ties are never spliced.
"""

import logging
import math

from ..config import settings
from ..schemas import ColumnRebarResult, RebarSize
from .bar_selector import pick_column_rebar
from .base import BaseCalculator
from .cut_list import CutListBuilder, check_stock_length, list_totals, spliced_bar_list
from .rebar_sizes import COLUMN_SPLICE_MULTIPLIER
from .span import clear_span_ft

logger = logging.getLogger(__name__)

MAX_TIE_SPACING_IN = 16.0
TIE_SPACING_IN = {
    RebarSize.NO_4: 12.0,
    RebarSize.NO_5: 10.0,
}
DEFAULT_TIE_SPACING_IN = 8.0


def tie_spacing_in(size: RebarSize) -> float:
    return min(MAX_TIE_SPACING_IN, TIE_SPACING_IN.get(size, DEFAULT_TIE_SPACING_IN))


def tie_perimeter_ft(width_ft: float, length_ft: float, cover_in: float) -> float:
    return 2 * (clear_span_ft(width_ft, cover_in) + clear_span_ft(length_ft, cover_in))


def number_of_ties(height_ft: float, spacing_in: float) -> int:
    return max(0, math.ceil((height_ft * 12) / spacing_in))


def calculate_column_rebar(width_ft: float, length_ft: float, height_ft: float,
                           cover_in: float = None, stock_ft: float = None,
                           manual_size=None, vertical_bars: int = None) -> ColumnRebarResult:
    """Vertical bar and tie cut lists for a rectangular column."""
    if cover_in is None:
        cover_in = settings.DEFAULT_COLUMN_COVER_IN
    if stock_ft is None:
        stock_ft = settings.DEFAULT_STOCK_LENGTH_FT
    check_stock_length(stock_ft)

    pick = pick_column_rebar(width_ft, length_ft, manual_size, vertical_bars)

    clear_height_ft = clear_span_ft(height_ft, cover_in)
    vertical_list = spliced_bar_list(clear_height_ft, pick.vertical_bars, stock_ft,
                                     pick.size, COLUMN_SPLICE_MULTIPLIER)

    spacing = tie_spacing_in(pick.size)
    ties = CutListBuilder()
    if clear_span_ft(width_ft, cover_in) > 0 and clear_span_ft(length_ft, cover_in) > 0:
        ties.add_many(tie_perimeter_ft(width_ft, length_ft, cover_in),
                      number_of_ties(height_ft, spacing))
    else:
        logger.info("Column %.2f × %.2f ft has no room inside %.2f in cover — no ties",
                    width_ft, length_ft, cover_in)
    tie_list = ties.build()

    total_bars, total_linear_ft = list_totals(vertical_list, tie_list)

    return ColumnRebarResult(
        pick=pick,
        vertical_bars=vertical_list,
        tie_list=tie_list,
        tie_spacing_in=spacing,
        total_bars=total_bars,
        total_linear_ft=total_linear_ft,
    )


class ColumnRebarCalculator(BaseCalculator):

    kind = "column"

    def parse_cover(self, fields: dict) -> float:
        return self.parse_inches(fields.get("cover"), default=settings.DEFAULT_COLUMN_COVER_IN)

    def calculate(self, fields: dict) -> ColumnRebarResult:
        manual_size = self.parse_manual_size(fields)
        return calculate_column_rebar(
            width_ft=self.parse_length_ft(fields, "width"),
            length_ft=self.parse_length_ft(fields, "length"),
            height_ft=self.parse_length_ft(fields, "height"),
            cover_in=self.parse_cover(fields),
            stock_ft=self.parse_feet(fields.get("stock_length"), default=None),
            manual_size=manual_size,
            vertical_bars=self.parse_optional_int(fields.get("vertical_bars")),
        )
