"""
Fiber reinforcement calculator.

Dosage in lb/yd³ by fiber type and duty level (manufacturer ranges):
  micro   — polypropylene, plastic shrinkage control
  macro   — synthetic, light structural replacement for mesh
  steel   — structural applications
Bags are rounded up — you can't buy half a bag.
"""

import logging
import math

from ..config import settings
from ..errors import InvalidReinforcementInput
from ..schemas import DutyLevel, FiberResult, FiberType
from ..units import convert_volume
from .base import BaseCalculator
from .volume import slab_volume

logger = logging.getLogger(__name__)

FIBER_DOSE_LB_PER_CY = {
    FiberType.MICRO: {DutyLevel.LIGHT: 0.75, DutyLevel.MED: 1.0, DutyLevel.HEAVY: 1.5},
    FiberType.MACRO: {DutyLevel.LIGHT: 3.0, DutyLevel.MED: 4.0, DutyLevel.HEAVY: 5.0},
    FiberType.STEEL: {DutyLevel.LIGHT: 30.0, DutyLevel.MED: 50.0, DutyLevel.HEAVY: 70.0},
}

BAG_WEIGHT_LB = {
    FiberType.STEEL: 40.0,
    FiberType.MACRO: 50.0,
    FiberType.MICRO: 1.0,
}


def to_fiber_type(value) -> FiberType:
    try:
        return FiberType(str(getattr(value, "value", value)).strip().lower())
    except ValueError:
        raise InvalidReinforcementInput(
            f"Unknown fiber type: {value}. Available: {[f.value for f in FiberType]}"
        )


def to_duty_level(value) -> DutyLevel:
    s = str(getattr(value, "value", value)).strip().lower()
    if s == "medium":
        s = "med"
    try:
        return DutyLevel(s)
    except ValueError:
        raise InvalidReinforcementInput(
            f"Unknown duty level: {value}. Available: {[d.value for d in DutyLevel]}"
        )


def pick_fiber_dose(fiber_type, duty=DutyLevel.MED) -> float:
    """Dosage in lb/yd³."""
    return FIBER_DOSE_LB_PER_CY[to_fiber_type(fiber_type)][to_duty_level(duty)]


def calculate_fiber(cubic_yards: float, fiber_type, duty=None) -> FiberResult:
    """Fiber weight and bag count for a pour. Negative volumes count as zero."""
    fiber_type = to_fiber_type(fiber_type)
    duty = to_duty_level(duty if duty is not None else settings.DEFAULT_DUTY_LEVEL)
    cubic_yards = max(0.0, cubic_yards)

    dose = pick_fiber_dose(fiber_type, duty)
    total_lb = dose * cubic_yards
    bag_weight = BAG_WEIGHT_LB[fiber_type]
    logger.debug("Fiber %s/%s: %.2f yd³ × %.2f lb/yd³ = %.2f lb",
                 fiber_type.value, duty.value, cubic_yards, dose, total_lb)

    return FiberResult(
        fiber_type=fiber_type,
        duty=duty,
        cubic_yards=cubic_yards,
        dose=dose,
        total_lb=total_lb,
        bags=math.ceil(total_lb / bag_weight),
        bag_weight=bag_weight,
    )


def recalculate_fiber(previous: FiberResult, fiber_type=None, duty=None) -> FiberResult:
    """
    Re-run a fiber calculation for the same pour with a different product.
    Anything not given carries over from `previous`.
    """
    return calculate_fiber(
        previous.cubic_yards,
        fiber_type if fiber_type is not None else previous.fiber_type,
        duty if duty is not None else previous.duty,
    )


class FiberCalculator(BaseCalculator):

    kind = "fiber"

    def calculate(self, fields: dict) -> FiberResult:
        cubic_yards = self.parse_number(fields.get("cubic_yards"), default=None)
        if cubic_yards is None:
            # No volume given, take it from the slab dimensions
            cubic_feet = slab_volume(
                self.parse_length_ft(fields, "length"),
                self.parse_length_ft(fields, "width"),
                self.parse_inches(fields.get("thickness")) / 12.0,
            )
            cubic_yards = convert_volume(cubic_feet, "cubic_yards")
        return calculate_fiber(
            cubic_yards,
            self.parse_choice(fields.get("fiber_type"), default=FiberType.MICRO.value),
            self.parse_choice(fields.get("duty")) or None,
        )
