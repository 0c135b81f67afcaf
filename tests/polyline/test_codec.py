import pytest
from conftest import CANONICAL_POINTS, CANONICAL_POLYLINE

from geokit.geo.schemas import Coordinate
from geokit.polyline.codec import decode_geo_polyline, encode_geo_polyline
from geokit.utils.errors import InvalidPolylineError


def test_decode_canonical_polyline():
    coordinates = decode_geo_polyline(CANONICAL_POLYLINE)

    assert len(coordinates) == len(CANONICAL_POINTS)
    for coordinate, (lat, long) in zip(coordinates, CANONICAL_POINTS):
        assert isinstance(coordinate, Coordinate)
        assert coordinate.latitude == pytest.approx(lat, abs=1e-5)
        assert coordinate.longitude == pytest.approx(long, abs=1e-5)
        assert coordinate.elevation == 0


def test_decode_empty_polyline():
    assert decode_geo_polyline("") == []


def test_decode_zero_deltas():
    coordinates = decode_geo_polyline("????")
    assert coordinates == [Coordinate(0.0, 0.0), Coordinate(0.0, 0.0)]


def test_decode_with_precision():
    # same integers as the canonical example, read with six decimals
    coordinates = decode_geo_polyline(CANONICAL_POLYLINE, precision=6)
    assert coordinates[0].latitude == pytest.approx(3.85)
    assert coordinates[0].longitude == pytest.approx(-12.02)


def test_decode_truncated_in_value():
    # "_" still carries the continuation bit
    with pytest.raises(InvalidPolylineError) as error:
        decode_geo_polyline("_p~iF~ps|U_")
    assert error.value.index == 11


def test_decode_missing_longitude():
    with pytest.raises(InvalidPolylineError) as error:
        decode_geo_polyline("_p~iF")
    assert error.value.index == 5


def test_decode_invalid_character():
    with pytest.raises(InvalidPolylineError) as error:
        decode_geo_polyline("_p~iF ps|U")
    assert error.value.index == 5


def test_encode_canonical_coordinates(canonical_coordinates):
    assert encode_geo_polyline(canonical_coordinates) == CANONICAL_POLYLINE


def test_encode_single_coordinate():
    assert encode_geo_polyline([Coordinate(38.5, -120.2)]) == "_p~iF~ps|U"


def test_encode_empty():
    assert encode_geo_polyline([]) == ""


def test_encode_drops_precision_and_elevation():
    coordinates = [
        Coordinate(48.8583701, 2.2944813, 330.0),
        Coordinate(-22.951916, -43.2104872, 700.0),
    ]
    decoded = decode_geo_polyline(encode_geo_polyline(coordinates))

    assert decoded[0] == Coordinate(48.85837, 2.29448)
    assert decoded[1] == Coordinate(-22.95192, -43.21049)
