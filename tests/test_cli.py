import json

from geocircles.cli import main


def test_cli_circles_summary(capsys):
    code = main(["circles"])
    out = capsys.readouterr().out

    assert code == 0
    lines = [line for line in out.splitlines() if line.strip()]
    assert len(lines) == 5
    assert lines[4].startswith("chukotka:")
    assert "crossings=2 batches=4" in lines[4]


def test_cli_circles_geojson_with_linear_interpolation(capsys):
    code = main(["circles", "--geojson", "--interpolation", "linear"])
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["type"] == "FeatureCollection"
    types = {f["properties"]["id"]: f["geometry"]["type"] for f in data["features"]}
    assert types["london"] == "Polygon"
    assert types["chukotka"] == "MultiPolygon"


def test_cli_single_circle_reports_failure(capsys):
    code = main(["circle", "--lat", "90", "--lon", "0", "--radius", "1000"])
    out = capsys.readouterr().out

    assert code == 1
    assert "INVALID_CENTER" in out


def test_cli_single_circle_json(capsys):
    code = main(["circle", "--lat", "10", "--lon", "20", "--radius", "5000", "--point-count", "8", "--json"])
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["features"][0]["point_count"] == 9
    assert data["errors"] == []


def test_cli_flat(capsys):
    assert main(["flat"]) == 0
    assert "a: points=121" in capsys.readouterr().out
