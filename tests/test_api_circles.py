from starlette.testclient import TestClient

from geocircles.api.app import app


def test_api_lists_catalog_locations():
    with TestClient(app) as c:
        resp = c.get("/api/locations")
    assert resp.status_code == 200
    assert [loc["id"] for loc in resp.json()] == ["london", "nebraska", "delhi", "fiji", "chukotka"]


def test_api_circles_for_catalog():
    with TestClient(app) as c:
        resp = c.post("/api/circles", json={})
    assert resp.status_code == 200
    data = resp.json()

    assert data["errors"] == []
    by_id = {f["location_id"]: f for f in data["features"]}
    assert by_id["london"]["kind"] == "single"
    assert by_id["london"]["point_count"] == 121
    assert by_id["chukotka"]["kind"] == "multi"
    assert by_id["chukotka"]["batch_count"] == 4
    assert by_id["chukotka"]["geometry"]["type"] == "MultiPolygon"
    assert isinstance(data["meta"]["api_ms"], int)


def test_api_circles_isolates_bad_locations_and_applies_overrides():
    payload = {
        "locations": [
            {"id": "ok", "latitude": 10.0, "longitude": 20.0, "radius_m": 50_000},
            {"id": "pole", "latitude": -90.0, "longitude": 0.0, "radius_m": 50_000},
        ],
        "settings_overrides": {"sampling": {"point_count": 12}},
    }
    with TestClient(app) as c:
        resp = c.post("/api/circles", json=payload)
    assert resp.status_code == 200
    data = resp.json()

    assert [f["location_id"] for f in data["features"]] == ["ok"]
    assert data["features"][0]["point_count"] == 13
    assert data["errors"][0]["location_id"] == "pole"
    assert data["errors"][0]["code"] == "INVALID_CENTER"


def test_api_rejects_disallowed_overrides():
    with TestClient(app) as c:
        resp = c.post("/api/circles", json={"settings_overrides": {"catalog": {"locations_path": "x.json"}}})
    assert resp.status_code == 400
    assert "catalog" in resp.json()["detail"]
