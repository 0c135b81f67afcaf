from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from geokit.utils.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MAX_UTM_ZONE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_UTM_ZONE,
    POLYLINE_CHAR_OFFSET,
    POLYLINE_MAX_CHAR,
)
from geokit.utils.errors import (
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidPolylineError,
    InvalidUTMZoneError,
    MixedUTMZoneError,
)

if TYPE_CHECKING:
    from geokit.geo.schemas import Coordinate, UTMLocation


def check_latitude(latitude: float) -> None:
    """
    Check if the latitude is valid.

    Parameters
    ----------
    latitude : float
        latitude

    Raises
    ------
    InvalidLatitudeError
        if the latitude is not valid
    """
    if latitude < MIN_LATITUDE or latitude > MAX_LATITUDE:
        raise InvalidLatitudeError()


def check_longitude(longitude: float) -> None:
    """
    Check if the longitude is valid.

    Parameters
    ----------
    longitude : float
        longitude

    Raises
    ------
    InvalidLongitudeError
        if the longitude is not valid
    """
    if longitude < MIN_LONGITUDE or longitude > MAX_LONGITUDE:
        raise InvalidLongitudeError()


def check_coordinate(coordinate: Coordinate) -> None:
    """
    Check if the coordinate is valid.

    Parameters
    ----------
    coordinate : Coordinate
        geographic coordinate

    Raises
    ------
    InvalidLatitudeError
        if the latitude is not valid
    InvalidLongitudeError
        if the longitude is not valid
    """
    check_latitude(coordinate.latitude)
    check_longitude(coordinate.longitude)


def check_utm_zone(zone: int) -> None:
    """
    Check if the UTM zone number is valid.

    Parameters
    ----------
    zone : int
        UTM zone number

    Raises
    ------
    InvalidUTMZoneError
        if the zone is not between 1 and 60
    """
    if zone < MIN_UTM_ZONE or zone > MAX_UTM_ZONE:
        raise InvalidUTMZoneError()


def check_same_utm_zone(locations: Iterable[UTMLocation]) -> None:
    """
    Check that all UTM locations share the same zone and hemisphere.

    Parameters
    ----------
    locations : Iterable[UTMLocation]
        UTM locations

    Raises
    ------
    MixedUTMZoneError
        if two locations come from different zones or hemispheres
    """
    zones = {(location.zone, location.hemisphere) for location in locations}
    if len(zones) > 1:
        raise MixedUTMZoneError()


def check_polyline_character(encoded: str, index: int) -> None:
    """
    Check that the character at `index` can be part of an encoded polyline.

    Parameters
    ----------
    encoded : str
        encoded polyline
    index : int
        position of the character to check

    Raises
    ------
    InvalidPolylineError
        if the string ends before `index` or the character is out of range
    """
    if index >= len(encoded):
        raise InvalidPolylineError("The encoded polyline is truncated", index=index)
    value = ord(encoded[index])
    if value < POLYLINE_CHAR_OFFSET or value > POLYLINE_MAX_CHAR:
        raise InvalidPolylineError(
            f"Invalid character {encoded[index]!r} in encoded polyline", index=index
        )
