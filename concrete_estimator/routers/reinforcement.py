"""
Reinforcement API — the form layer's entry point into the calculators.

GET  /api/reinforcement/                    — List calculator kinds
POST /api/reinforcement/fiber/recalculate   — Same pour, different fiber product
POST /api/reinforcement/{kind}              — Run a calculator on raw form fields
POST /api/reinforcement/{kind}/record       — Run it and return the flattened record
"""

import logging

from fastapi import APIRouter, HTTPException

from ..calculators.fiber import recalculate_fiber
from ..calculators.registry import get_calculator, has_calculator, list_calculators
from ..errors import InvalidReinforcementInput
from ..records import to_record
from ..schemas import CalculateRequest, FiberRecalculateRequest, FiberResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reinforcement", tags=["reinforcement"])


def _calculator_for(kind: str):
    if not has_calculator(kind):
        raise HTTPException(
            status_code=404,
            detail=f"No calculator for kind: {kind}. Available: {list_calculators()}",
        )
    return get_calculator(kind)


def _run(calculator, fields: dict):
    try:
        return calculator.calculate(fields)
    except InvalidReinforcementInput as e:
        logger.info("Rejected %s input: %s", calculator.kind, e)
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/")
def list_kinds():
    return {"kinds": list_calculators()}


@router.post("/fiber/recalculate", response_model=FiberResult)
def recalculate_fiber_endpoint(request: FiberRecalculateRequest):
    """Re-run the fiber numbers for the previous pour with a new type and/or duty level."""
    return recalculate_fiber(request.previous, request.fiber_type, request.duty)


@router.post("/{kind}")
def calculate(kind: str, request: CalculateRequest):
    """
    Run the calculator for `kind` (rebar, column, fiber, mesh).

    Blank inputs take the configured defaults. Non-positive spacing or
    stock length, and unknown bar sizes or fiber options, return 400.
    """
    calculator = _calculator_for(kind)
    return _run(calculator, request.fields)


@router.post("/{kind}/record")
def calculate_record(kind: str, request: CalculateRequest):
    """Run the calculator and flatten the result for storage."""
    calculator = _calculator_for(kind)
    result = _run(calculator, request.fields)
    return to_record(
        result,
        project_name=request.project_name,
        cover_in=calculator.parse_cover(request.fields),
        geometry=calculator.parse_geometry(request.fields),
    )
