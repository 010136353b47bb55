"""
Flattened projection of a calculator result for the persistence layer.

One summary dict per calculation plus cut-list rows tagged with a direction:
  X / Y        slab mats
  VERTICAL     column verticals
  TIE          column ties
Storage ids, timestamps and project links are added by the caller.
"""

from typing import Optional

from .schemas import ColumnRebarResult, FiberResult, MeshResult, RebarResult
from .units import feet_to_feet_inches


def cut_list_row(item, direction: str, bar_size: str) -> dict:
    """Build a cut-list row dict for storage."""
    return {
        "direction": direction,
        "length_ft": item.length_ft,
        "length_display": feet_to_feet_inches(item.length_ft)["display"],
        "quantity": item.qty,
        "bar_size": bar_size,
    }


def _empty_record(kind: str, project_name: Optional[str], cover_in: Optional[float],
                  geometry: Optional[dict]) -> dict:
    record = {
        "reinforcement_type": kind,
        "project_name": project_name,
        "cover_in": cover_in,
        "bar_size": None,
        "spacing_x_in": None,
        "spacing_y_in": None,
        "total_bars_x": None,
        "total_bars_y": None,
        "total_bars": None,
        "total_linear_ft": None,
        "vertical_bars": None,
        "tie_spacing": None,
        "fiber_dose": None,
        "fiber_total_lb": None,
        "fiber_bags": None,
        "fiber_type": None,
        "mesh_sheets": None,
        "mesh_sheet_size": None,
        "cut_list_items": [],
    }
    record.update(geometry or {})
    return record


def to_record(result, project_name: str = None, cover_in: float = None,
              geometry: dict = None) -> dict:
    """
    Flatten any calculator result.

    `geometry` holds the member dimensions as entered (length_ft, width_ft,
    thickness_in, height_ft) and is copied into the record as-is.
    """
    if not isinstance(result, (RebarResult, ColumnRebarResult, FiberResult, MeshResult)):
        raise TypeError(f"Not a reinforcement result: {type(result).__name__}")

    record = _empty_record(result.kind, project_name, cover_in, geometry)

    if isinstance(result, RebarResult):
        size = result.pick.size.value
        record.update({
            "bar_size": size,
            "spacing_x_in": result.pick.spacing_x_in,
            "spacing_y_in": result.pick.spacing_y_in,
            "total_bars_x": sum(item.qty for item in result.list_x),
            "total_bars_y": sum(item.qty for item in result.list_y),
            "total_bars": result.total_bars,
            "total_linear_ft": result.total_linear_ft,
            "cut_list_items": (
                [cut_list_row(item, "X", size) for item in result.list_x]
                + [cut_list_row(item, "Y", size) for item in result.list_y]
            ),
        })
    elif isinstance(result, ColumnRebarResult):
        size = result.pick.size.value
        record.update({
            "bar_size": size,
            "vertical_bars": result.pick.vertical_bars,
            "tie_spacing": result.tie_spacing_in,
            "total_bars": result.total_bars,
            "total_linear_ft": result.total_linear_ft,
            "cut_list_items": (
                [cut_list_row(item, "VERTICAL", size) for item in result.vertical_bars]
                + [cut_list_row(item, "TIE", size) for item in result.tie_list]
            ),
        })
    elif isinstance(result, FiberResult):
        record.update({
            "fiber_dose": result.dose,
            "fiber_total_lb": result.total_lb,
            "fiber_bags": result.bags,
            "fiber_type": result.fiber_type.value,
        })
    else:
        record.update({
            "mesh_sheets": result.sheets,
            "mesh_sheet_size": result.sheet_size,
        })

    return record
