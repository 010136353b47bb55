from enum import Enum
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class RebarSize(str, Enum):
    NO_1 = "#1"
    NO_2 = "#2"
    NO_3 = "#3"
    NO_4 = "#4"
    NO_5 = "#5"
    NO_6 = "#6"
    NO_7 = "#7"
    NO_8 = "#8"


class FiberType(str, Enum):
    MICRO = "micro"
    MACRO = "macro"
    STEEL = "steel"


class DutyLevel(str, Enum):
    LIGHT = "light"
    MED = "med"
    HEAVY = "heavy"


class ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)


class CutListItem(ValueObject):
    length_ft: float
    qty: int


class BarPick(ValueObject):
    size: RebarSize
    spacing_x_in: float
    spacing_y_in: float


class ColumnBarPick(ValueObject):
    size: RebarSize
    vertical_bars: int


class RebarResult(ValueObject):
    kind: Literal["rebar"] = "rebar"
    pick: BarPick
    list_x: Tuple[CutListItem, ...] = ()
    list_y: Tuple[CutListItem, ...] = ()
    total_bars: int
    total_linear_ft: float


class ColumnRebarResult(ValueObject):
    kind: Literal["column"] = "column"
    pick: ColumnBarPick
    vertical_bars: Tuple[CutListItem, ...] = ()
    tie_list: Tuple[CutListItem, ...] = ()
    tie_spacing_in: float
    total_bars: int
    total_linear_ft: float


class FiberResult(ValueObject):
    kind: Literal["fiber"] = "fiber"
    fiber_type: FiberType
    duty: DutyLevel
    cubic_yards: float
    dose: float         # lb/yd³
    total_lb: float
    bags: int
    bag_weight: float


class MeshResult(ValueObject):
    kind: Literal["mesh"] = "mesh"
    sheets: int
    sheet_size: str
    total_sq_ft: float


ReinforcementResult = Annotated[
    Union[RebarResult, ColumnRebarResult, FiberResult, MeshResult],
    Field(discriminator="kind"),
]


# --- Request bodies ---

class CalculateRequest(BaseModel):
    fields: dict = {}
    project_name: Optional[str] = None


class FiberRecalculateRequest(BaseModel):
    previous: FiberResult
    fiber_type: Optional[FiberType] = None
    duty: Optional[DutyLevel] = None


class VolumeRequest(BaseModel):
    length: float = 0.0
    width: float = 0.0
    thickness: float = 0.0
    height: float = 0.0
    diameter: float = 0.0
    edge_thickness: float = 0.0
    edge_width: float = 0.0
    unit: str = "feet"


class VolumeResult(BaseModel):
    shape: str
    cubic_feet: float
    cubic_yards: float
    cubic_meters: float
    bags_80lb: int
