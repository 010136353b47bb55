"""
Calculator registry — keyed by each calculator's result `kind`.

rebar   slab / footer mats (RebarResult)
column  vertical bars + ties (ColumnRebarResult)
fiber   fiber dosage (FiberResult)
mesh    welded wire sheets (MeshResult)
"""

from ..errors import InvalidReinforcementInput
from .base import BaseCalculator
from .column_rebar import ColumnRebarCalculator
from .fiber import FiberCalculator
from .mesh import MeshCalculator
from .slab_rebar import SlabRebarCalculator


def _register(*calculator_classes) -> dict:
    registry = {}
    for calculator_class in calculator_classes:
        if calculator_class.kind in registry:
            raise ValueError(f"Duplicate calculator kind: {calculator_class.kind}")
        registry[calculator_class.kind] = calculator_class
    return registry


# Order is the order the form layer lists the tabs in
CALCULATOR_REGISTRY = _register(
    SlabRebarCalculator,
    ColumnRebarCalculator,
    FiberCalculator,
    MeshCalculator,
)


def get_calculator(kind: str) -> BaseCalculator:
    """Calculator instance for a result kind. Unknown kinds raise InvalidReinforcementInput."""
    try:
        return CALCULATOR_REGISTRY[kind]()
    except KeyError:
        raise InvalidReinforcementInput(
            f"No calculator for kind: {kind}. Available: {list_calculators()}"
        )


def calculate(kind: str, fields: dict):
    """Parse raw form fields with the calculator for `kind` and return its result."""
    return get_calculator(kind).calculate(fields)


def has_calculator(kind: str) -> bool:
    return kind in CALCULATOR_REGISTRY


def list_calculators() -> list:
    return list(CALCULATOR_REGISTRY)
