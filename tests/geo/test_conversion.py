import numpy as np
import pytest

from geokit.geo.conversion import to_vec, to_vecs
from geokit.geo.schemas import Coordinate, UTMLocation
from geokit.geo.spherical import midpoint
from geokit.geo.utm import to_utm
from geokit.utils.errors import MixedUTMZoneError


def test_to_vec_from_utm_location():
    location = UTMLocation(easting=582033.0, northing=5670417.0, zone=30, hemisphere="N")
    vec = to_vec(location)

    assert isinstance(vec, np.ndarray)
    assert vec.shape == (2,)
    assert vec.dtype == np.float64
    np.testing.assert_array_equal(vec, [582033.0, 5670417.0])


def test_to_vec_from_coordinate(stonehenge):
    location = to_utm(stonehenge)
    np.testing.assert_array_equal(
        to_vec(stonehenge), [location.easting, location.northing]
    )


def test_to_vec_rejects_other_types():
    with pytest.raises(TypeError):
        to_vec((51.178889, -1.826111))


def test_to_vecs_same_zone(stonehenge):
    salisbury = Coordinate(51.0688, -1.7945)
    vecs = to_vecs([stonehenge, to_utm(salisbury)])

    assert vecs.shape == (2, 2)
    np.testing.assert_array_equal(vecs[0], to_vec(stonehenge))
    # Salisbury is about 12 km south of Stonehenge
    assert 11000 < np.linalg.norm(vecs[0] - vecs[1]) < 13000


def test_to_vecs_mixed_zones(stonehenge):
    with pytest.raises(MixedUTMZoneError):
        to_vecs([stonehenge, Coordinate(48.8566, 2.3522)])


def test_to_vecs_mixed_hemispheres():
    with pytest.raises(MixedUTMZoneError):
        to_vecs([Coordinate(0.5, 3.0), Coordinate(-0.5, 3.0)])


def test_to_vecs_empty():
    assert to_vecs([]).shape == (0, 2)


def test_to_vec_unwrapped_midpoint():
    mid = midpoint(Coordinate(0.0, -179.0), Coordinate(0.0, 177.0))
    vec = to_vec(mid)

    assert vec.shape == (2,)
    # 4 degrees west of the central meridian of zone 1
    assert vec[0] < 500000
