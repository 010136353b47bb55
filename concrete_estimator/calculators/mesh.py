"""
Welded wire mesh calculator.

Standard 5' × 10' sheets (6" × 6" grid). Lapping 6" on every side leaves
4.5' × 9.5' = 42.75 sq ft of coverage per sheet.
"""

import math

from ..schemas import MeshResult
from .base import BaseCalculator

SHEET_SIZE_LABEL = "5' × 10'"
SHEET_WIDTH_FT = 5.0
SHEET_LENGTH_FT = 10.0
SHEET_OVERLAP_FT = 0.5
EFFECTIVE_SHEET_SQ_FT = (SHEET_WIDTH_FT - SHEET_OVERLAP_FT) * (SHEET_LENGTH_FT - SHEET_OVERLAP_FT)


def calculate_mesh(length_ft: float, width_ft: float) -> MeshResult:
    if length_ft <= 0 or width_ft <= 0:
        total_sq_ft = 0.0
    else:
        total_sq_ft = length_ft * width_ft

    return MeshResult(
        sheets=math.ceil(total_sq_ft / EFFECTIVE_SHEET_SQ_FT),
        sheet_size=SHEET_SIZE_LABEL,
        total_sq_ft=total_sq_ft,
    )


class MeshCalculator(BaseCalculator):

    kind = "mesh"

    def calculate(self, fields: dict) -> MeshResult:
        return calculate_mesh(
            self.parse_length_ft(fields, "length"),
            self.parse_length_ft(fields, "width"),
        )
