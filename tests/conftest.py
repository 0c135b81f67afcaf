import pytest

from geokit.geo.schemas import Coordinate

# example of the published polyline algorithm
CANONICAL_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
CANONICAL_POINTS = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]


@pytest.fixture(scope="session")
def canonical_coordinates():
    return [Coordinate(latitude=lat, longitude=long) for lat, long in CANONICAL_POINTS]


@pytest.fixture(scope="session")
def stonehenge():
    return Coordinate(latitude=51.178889, longitude=-1.826111)


# pairs used for the symmetry and range properties
@pytest.fixture(scope="session")
def coordinate_pairs():
    return [
        (Coordinate(50.06632, -5.71475), Coordinate(58.64402, -3.07009)),
        (Coordinate(-33.8688, 151.2093), Coordinate(51.5074, -0.1278)),
        (Coordinate(40.7128, -74.0060), Coordinate(35.6762, 139.6503)),
        (Coordinate(0.0, 0.0), Coordinate(0.0, 1.0)),
        (Coordinate(-60.0, 45.0), Coordinate(70.0, -120.0)),
        (Coordinate(10.0, 179.5), Coordinate(-10.0, -179.5)),
    ]
