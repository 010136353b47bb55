from fastapi import APIRouter, HTTPException

from ..calculators.volume import SHAPES, shape_volume
from ..errors import InvalidReinforcementInput
from ..schemas import VolumeRequest, VolumeResult

router = APIRouter(prefix="/volume", tags=["volume"])


@router.get("/")
def list_shapes():
    return {"shapes": list(SHAPES.keys())}


@router.post("/{shape}", response_model=VolumeResult)
def calculate_volume(shape: str, request: VolumeRequest):
    """Concrete volume for a shape. Dimensions are all in `request.unit`."""
    if shape not in SHAPES:
        raise HTTPException(status_code=404, detail=f"Unknown shape: {shape}")
    try:
        return shape_volume(shape, request)
    except InvalidReinforcementInput as e:
        raise HTTPException(status_code=400, detail=str(e))
