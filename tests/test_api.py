"""
API tests — reinforcement and volume endpoints.

1.    Health
2-5.  /api/reinforcement/{kind}
6-7.  Error mapping (unknown kind 404, bad input 400)
8.    /record projection
9.    Fiber recalculation round trip
10.   Volume endpoint
"""


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_list_kinds(client):
    resp = client.get("/api/reinforcement/")
    assert resp.status_code == 200
    assert resp.json()["kinds"] == ["rebar", "column", "fiber", "mesh"]


def test_slab_rebar_endpoint(client, slab_fields):
    resp = client.post("/api/reinforcement/rebar", json={"fields": slab_fields})
    assert resp.status_code == 200
    data = resp.json()
    assert data["kind"] == "rebar"
    assert data["pick"] == {"size": "#4", "spacing_x_in": 12.0, "spacing_y_in": 12.0}
    assert data["list_x"] == [{"length_ft": 9.5, "qty": 11}]
    assert data["list_y"] == [{"length_ft": 11.5, "qty": 13}]
    assert data["total_bars"] == 24


def test_column_endpoint(client, column_fields):
    resp = client.post("/api/reinforcement/column", json={"fields": column_fields})
    assert resp.status_code == 200
    data = resp.json()
    assert data["kind"] == "column"
    assert data["pick"]["vertical_bars"] == 6
    assert data["vertical_bars"] == [{"length_ft": 9.75, "qty": 6}]
    assert data["tie_list"] == [{"length_ft": 3.0, "qty": 12}]


def test_fiber_and_mesh_endpoints(client):
    resp = client.post("/api/reinforcement/fiber", json={
        "fields": {"cubic_yards": "10", "fiber_type": "micro", "duty": "med"}})
    assert resp.status_code == 200
    assert resp.json()["bags"] == 10

    resp = client.post("/api/reinforcement/mesh", json={
        "fields": {"length": "20", "width": "10"}})
    assert resp.status_code == 200
    assert resp.json()["sheets"] == 5


def test_unknown_kind_is_404(client):
    resp = client.post("/api/reinforcement/stucco", json={"fields": {}})
    assert resp.status_code == 404


def test_zero_spacing_is_400(client, slab_fields):
    fields = dict(slab_fields, spacing_x="0")
    resp = client.post("/api/reinforcement/rebar", json={"fields": fields})
    assert resp.status_code == 400
    assert "spacing" in resp.json()["detail"].lower()


def test_nan_spacing_is_400(client, slab_fields):
    fields = dict(slab_fields, spacing_x="nan")
    resp = client.post("/api/reinforcement/rebar", json={"fields": fields})
    assert resp.status_code == 400
    assert "spacing" in resp.json()["detail"].lower()


def test_nan_stock_length_is_400(client, slab_fields):
    fields = dict(slab_fields, stock_length="nan")
    resp = client.post("/api/reinforcement/rebar", json={"fields": fields})
    assert resp.status_code == 400


def test_record_endpoint(client, slab_fields):
    resp = client.post("/api/reinforcement/rebar/record", json={
        "fields": slab_fields, "project_name": "Shop floor"})
    assert resp.status_code == 200
    record = resp.json()
    assert record["project_name"] == "Shop floor"
    assert record["cover_in"] == 3
    assert record["length_ft"] == 12
    assert record["thickness_in"] == 4
    assert len(record["cut_list_items"]) == 2


def test_fiber_recalculate_endpoint(client):
    first = client.post("/api/reinforcement/fiber", json={
        "fields": {"cubic_yards": "12", "fiber_type": "micro"}}).json()
    resp = client.post("/api/reinforcement/fiber/recalculate", json={
        "previous": first, "fiber_type": "steel"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["fiber_type"] == "steel"
    assert data["duty"] == "med"
    assert data["total_lb"] == 600
    assert data["bags"] == 15


def test_volume_endpoint(client):
    resp = client.post("/api/volume/slab", json={
        "length": 27, "width": 10, "thickness": 4, "unit": "inches"})
    assert resp.status_code == 200
    assert resp.json()["cubic_feet"] > 0

    resp = client.post("/api/volume/slab", json={"length": 1, "unit": "furlongs"})
    assert resp.status_code == 400

    resp = client.post("/api/volume/pyramid", json={})
    assert resp.status_code == 404
