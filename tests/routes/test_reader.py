import json

import pytest
from conftest import CANONICAL_POLYLINE

from geokit.geo.schemas import Coordinate
from geokit.routes.reader import RouteReader


@pytest.fixture
def route_folder(tmp_path):
    (tmp_path / "canonical.yaml").write_text(f"polyline: '{CANONICAL_POLYLINE}'\n")
    (tmp_path / "alps.json").write_text(
        json.dumps(
            {
                "name": "alps",
                "coordinates": [[45.8326, 6.8652, 4808.0], [45.9763, 7.6586, 4478.0]],
            }
        )
    )
    (tmp_path / "notes.txt").write_text("not a route")
    return tmp_path


@pytest.fixture
def waypoints_folder(route_folder):
    (route_folder / "waypoints.csv").write_text(
        "Name,Latitude,Longitude,Elevation\n"
        "loop,51.1789,-1.8262,100.0\n"
        "loop,51.0688,-1.7945,50.0\n"
        "coast,50.0663,-5.7148,0.0\n"
        "coast,58.6440,-3.0701,0.0\n"
        "loop,51.1789,-1.8262,100.0\n"
    )
    return route_folder


def test_route_reader(route_folder):
    reader = RouteReader(route_folder)

    assert len(reader) == 2
    assert sorted(reader.route_names) == ["alps", "canonical"]
    assert len(reader["canonical"]) == 3
    assert reader["alps"][0] == Coordinate(45.8326, 6.8652, 4808.0)


def test_route_reader_iteration(route_folder):
    reader = RouteReader(route_folder)

    names = [route.name for route in reader]
    assert sorted(names) == ["alps", "canonical"]
    # iterating again starts over
    assert len(list(reader)) == 2


def test_route_reader_with_waypoints(waypoints_folder):
    reader = RouteReader(waypoints_folder, with_waypoints=True)

    assert len(reader) == 4
    loop = reader["loop"]
    assert len(loop) == 3
    assert loop[1].latitude == pytest.approx(51.0688)
    assert loop[1].longitude == pytest.approx(-1.7945)
    assert loop[1].elevation == 50.0
    assert reader["coast"].length_km() == pytest.approx(968.9, abs=0.5)


def test_route_reader_waypoints_without_elevation(tmp_path):
    (tmp_path / "waypoints.csv").write_text(
        "Name,Latitude,Longitude\nflat,10.0,20.0\nflat,10.5,20.5\n"
    )
    reader = RouteReader(tmp_path, with_waypoints=True)

    assert reader["flat"][0] == Coordinate(10.0, 20.0, 0.0)


def test_route_reader_missing_folder(tmp_path):
    with pytest.raises(FileNotFoundError):
        RouteReader(tmp_path / "missing")


def test_route_reader_missing_waypoints(route_folder):
    with pytest.raises(FileNotFoundError):
        RouteReader(route_folder, with_waypoints=True)


def test_route_reader_multiple_waypoint_files(waypoints_folder):
    (waypoints_folder / "more.csv").write_text("Name,Latitude,Longitude\n")
    with pytest.raises(ValueError):
        RouteReader(waypoints_folder, with_waypoints=True)


def test_route_reader_suffix_case_and_directories(route_folder):
    (route_folder / "UPPER.YAML").write_text(f"polyline: '{CANONICAL_POLYLINE}'\n")
    (route_folder / "archive.json").mkdir()
    reader = RouteReader(route_folder)

    assert sorted(reader.route_names) == ["UPPER", "alps", "canonical"]
