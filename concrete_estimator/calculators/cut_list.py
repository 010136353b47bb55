"""
Grouped rebar cut list — bar count, lap splices, inch rounding, merging.

For one direction of a member:
  1. clear span = span × 12 − 2 × cover                       (inches)
  2. bars = ceil(clear span / spacing) + 1                     (a bar at each edge)
  3. every bar has the same required length = clear span / 12  (feet)
  4. lap splice = multiplier × bar diameter / 12               (30× flat work, 40× columns)
  5. bar fits the stock → one piece; otherwise one splice, two pieces:
       first  = stock − lap
       second = required − first + lap
  6. each piece rounded UP to the next whole inch
  7. a piece within 0.1 ft of an existing length adds to that line's qty
  8. lines sorted shortest first

The full lap is taken off the first piece and added back to the second.
This departs from a half-lap split; designs saved with half-lap piece
lengths will not match these.

Only one splice is modeled. A bar longer than twice the stock comes out
short on the second piece — existing saved designs depend on these numbers.
"""

import logging
import math
from typing import Iterable, List, Tuple

from ..errors import InvalidReinforcementInput
from ..schemas import CutListItem, RebarSize
from ..units import round_up_to_inch
from .rebar_sizes import SLAB_SPLICE_MULTIPLIER, lap_splice_ft
from .span import clear_span_in

logger = logging.getLogger(__name__)

MERGE_TOLERANCE_FT = 0.1
DEFAULT_STOCK_FT = 20.0


class CutListBuilder:
    """Accumulates pieces into (length, qty) lines."""

    def __init__(self):
        self._lines = []  # [[length_ft, qty], ...] in insertion order

    def add(self, length_ft: float, qty: int = 1) -> None:
        rounded = round_up_to_inch(length_ft)
        for line in self._lines:
            if abs(line[0] - rounded) < MERGE_TOLERANCE_FT:
                line[1] += qty
                return
        self._lines.append([rounded, qty])

    def add_many(self, length_ft: float, count: int) -> None:
        for _ in range(count):
            self.add(length_ft)

    def build(self) -> Tuple[CutListItem, ...]:
        lines = sorted(self._lines, key=lambda line: line[0])
        return tuple(CutListItem(length_ft=length, qty=qty) for length, qty in lines)


def check_stock_length(stock_ft: float) -> None:
    if not (stock_ft > 0) or not math.isfinite(stock_ft):
        raise InvalidReinforcementInput(f"Stock length must be a positive number, got {stock_ft} ft")


def check_spacing(spacing_in: float) -> None:
    if not (spacing_in > 0) or not math.isfinite(spacing_in):
        raise InvalidReinforcementInput(f"Bar spacing must be a positive number, got {spacing_in} in")


def bars_needed(clear_in: float, spacing_in: float) -> int:
    """Bars across a clear span at the given spacing, including both edges."""
    check_spacing(spacing_in)
    if clear_in <= 0:
        return 0
    return math.ceil(clear_in / spacing_in) + 1


def splice_pieces(required_ft: float, stock_ft: float, lap_ft: float) -> List[float]:
    """Piece lengths for one bar under the single-splice policy."""
    if required_ft <= stock_ft:
        return [required_ft]
    first_ft = stock_ft - lap_ft
    second_ft = (required_ft - first_ft) + lap_ft
    return [first_ft, second_ft]


def spliced_bar_list(required_ft: float, count: int, stock_ft: float,
                     size=RebarSize.NO_4,
                     splice_multiplier: int = SLAB_SPLICE_MULTIPLIER) -> Tuple[CutListItem, ...]:
    """
    Cut list for `count` identical bars of `required_ft`, spliced when they
    exceed the stock. Used directly for column verticals.
    """
    check_stock_length(stock_ft)
    builder = CutListBuilder()
    if required_ft <= 0 or count <= 0:
        return builder.build()

    lap_ft = lap_splice_ft(size, splice_multiplier)
    if required_ft > stock_ft and stock_ft <= lap_ft:
        raise InvalidReinforcementInput(
            f"{stock_ft} ft stock is too short to lap splice (lap {lap_ft:.2f} ft)")
    if required_ft > 2 * stock_ft:
        logger.warning(
            "%.2f ft bar exceeds twice the %.1f ft stock — single splice under-covers it",
            required_ft, stock_ft)

    pieces = splice_pieces(required_ft, stock_ft, lap_ft)
    for _ in range(count):
        for piece_ft in pieces:
            builder.add(piece_ft)
    return builder.build()


def build_cut_list(span_ft: float, spacing_in: float, cover_in: float,
                   stock_ft: float = DEFAULT_STOCK_FT, size=RebarSize.NO_4,
                   splice_multiplier: int = SLAB_SPLICE_MULTIPLIER) -> Tuple[CutListItem, ...]:
    """
    Cut list for bars laid across `span_ft` at `spacing_in` on center.

    Raises InvalidReinforcementInput for non-positive spacing or stock.
    Cover consuming the whole span yields an empty list.
    """
    check_spacing(spacing_in)
    check_stock_length(stock_ft)

    clear_in = clear_span_in(span_ft, cover_in)
    count = bars_needed(clear_in, spacing_in)
    if count == 0:
        logger.info("No clear span left (%.2f ft span, %.2f in cover) — no bars",
                    span_ft, cover_in)
    return spliced_bar_list(clear_in / 12.0, count, stock_ft, size, splice_multiplier)


def merge_cut_list(items: Iterable[CutListItem]) -> Tuple[CutListItem, ...]:
    """Re-group an existing cut list. A list built here comes back unchanged."""
    builder = CutListBuilder()
    for item in items:
        builder.add(item.length_ft, item.qty)
    return builder.build()


def list_totals(*cut_lists) -> Tuple[int, float]:
    """(total bars, total linear feet) across any number of cut lists."""
    total_bars = 0
    total_linear_ft = 0.0
    for cut_list in cut_lists:
        for item in cut_list:
            total_bars += item.qty
            total_linear_ft += item.length_ft * item.qty
    return total_bars, total_linear_ft
