"""
Persistence projection tests — flattened records for storage.
"""

import pytest

from concrete_estimator.calculators.column_rebar import calculate_column_rebar
from concrete_estimator.calculators.fiber import calculate_fiber
from concrete_estimator.calculators.mesh import calculate_mesh
from concrete_estimator.calculators.slab_rebar import calculate_slab_rebar
from concrete_estimator.records import to_record


def test_slab_record_rows_tagged_by_direction():
    result = calculate_slab_rebar(12, 10, 4, cover_in=3)
    record = to_record(result, project_name="Garage slab", cover_in=3,
                       geometry={"length_ft": 12, "width_ft": 10, "thickness_in": 4})

    assert record["reinforcement_type"] == "rebar"
    assert record["project_name"] == "Garage slab"
    assert record["length_ft"] == 12
    assert record["bar_size"] == "#4"
    assert record["spacing_x_in"] == 12
    assert record["total_bars_x"] == 11
    assert record["total_bars_y"] == 13
    assert record["total_bars"] == 24
    assert record["fiber_bags"] is None

    rows = record["cut_list_items"]
    assert [r["direction"] for r in rows] == ["X", "Y"]
    assert rows[0] == {
        "direction": "X",
        "length_ft": 9.5,
        "length_display": "9 ft 6 in",
        "quantity": 11,
        "bar_size": "#4",
    }


def test_column_record_has_verticals_and_ties():
    result = calculate_column_rebar(1, 1, 10, cover_in=1.5)
    record = to_record(result, cover_in=1.5)

    assert record["reinforcement_type"] == "column"
    assert record["vertical_bars"] == 6
    assert record["tie_spacing"] == 10
    assert record["spacing_x_in"] is None
    directions = [r["direction"] for r in record["cut_list_items"]]
    assert directions == ["VERTICAL", "TIE"]
    assert record["cut_list_items"][0]["length_display"] == "9 ft 9 in"


def test_fiber_and_mesh_records():
    fiber = to_record(calculate_fiber(10, "steel", "light"))
    assert fiber["reinforcement_type"] == "fiber"
    assert fiber["fiber_type"] == "steel"
    assert fiber["fiber_total_lb"] == 300
    assert fiber["fiber_bags"] == 8
    assert fiber["cut_list_items"] == []

    mesh = to_record(calculate_mesh(20, 10))
    assert mesh["mesh_sheets"] == 5
    assert mesh["mesh_sheet_size"] == "5' × 10'"


def test_record_rejects_non_results():
    with pytest.raises(TypeError):
        to_record({"kind": "rebar"})
