from functools import singledispatch
from typing import Iterable, Union

import numpy as np

from geokit.geo.schemas import Coordinate, UTMLocation
from geokit.geo.utm import to_utm
from geokit.utils.checks import check_same_utm_zone


@singledispatch
def to_vec(location) -> np.ndarray:
    """
    Flatten a location into a planar (easting, northing) vector in meters.

    Accepts a `UTMLocation`, or a `Coordinate` which is projected with
    `to_utm` first. The zone and hemisphere are dropped, so vectors from
    different zones must not be mixed.

    Returns
    -------
    np.ndarray
        array of shape (2,)
    """
    raise TypeError(f"Cannot convert {type(location).__name__} to a planar vector")


@to_vec.register
def _(location: UTMLocation) -> np.ndarray:
    return np.array([location.easting, location.northing], dtype=np.float64)


@to_vec.register
def _(coordinate: Coordinate) -> np.ndarray:
    return to_vec(to_utm(coordinate))


def to_vecs(items: Iterable[Union[UTMLocation, Coordinate]]) -> np.ndarray:
    """
    Flatten several locations into planar vectors.

    Parameters
    ----------
    items : Iterable[Union[UTMLocation, Coordinate]]
        UTM locations or coordinates, coordinates are projected with `to_utm`

    Returns
    -------
    np.ndarray
        array of shape (N, 2) with easting and northing in meters

    Raises
    ------
    MixedUTMZoneError
        if the locations do not all lie in the same zone and hemisphere
    """

    locations = [
        to_utm(item) if isinstance(item, Coordinate) else item for item in items
    ]
    check_same_utm_zone(locations)
    if not locations:
        return np.empty((0, 2), dtype=np.float64)
    return np.stack([to_vec(location) for location in locations])
