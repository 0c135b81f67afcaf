"""Universal Transverse Mercator projection on the WGS84 ellipsoid.

The forward and inverse transforms use the classic Transverse Mercator series
(Snyder, "Map Projections: A Working Manual", USGS PP 1395, pp. 57-64). The
meridian arc is expanded to e^6, the forward series to the sixth power of the
longitude offset and the footpoint latitude to sin(8 mu), which keeps the
round trip well under a centimeter inside a zone.
"""

import math
from typing import Optional

from geokit.geo.schemas import Coordinate, Hemisphere, UTMLocation
from geokit.utils.constants import (
    MAX_UTM_ZONE,
    MIN_UTM_ZONE,
    UTM_BAND_LETTERS,
    UTM_FALSE_EASTING,
    UTM_FALSE_NORTHING_SOUTH,
    UTM_MAX_LATITUDE,
    UTM_MIN_LATITUDE,
    UTM_SCALE_FACTOR,
    UTM_ZONE_WIDTH,
    WGS84_ECCENTRICITY_SQUARED,
    WGS84_SEMI_MAJOR_AXIS,
)

E2 = WGS84_ECCENTRICITY_SQUARED
E4 = E2 * E2
E6 = E4 * E2
EP2 = E2 / (1 - E2)  # second eccentricity squared

# meridian arc coefficients
M1 = 1 - E2 / 4 - 3 * E4 / 64 - 5 * E6 / 256
M2 = 3 * E2 / 8 + 3 * E4 / 32 + 45 * E6 / 1024
M3 = 15 * E4 / 256 + 45 * E6 / 1024
M4 = 35 * E6 / 3072

# footpoint latitude coefficients
_SQRT_1_E2 = math.sqrt(1 - E2)
E1 = (1 - _SQRT_1_E2) / (1 + _SQRT_1_E2)
P2 = 3 * E1 / 2 - 27 * E1**3 / 32
P4 = 21 * E1**2 / 16 - 55 * E1**4 / 32
P6 = 151 * E1**3 / 96
P8 = 1097 * E1**4 / 512


def utm_zone_number(
    latitude: float, longitude: float, irregular_zones: bool = False
) -> int:
    """
    Get the UTM zone number of a coordinate.

    Parameters
    ----------
    latitude : float
        latitude in degrees, only used for the irregular zones
    longitude : float
        longitude in degrees
    irregular_zones : bool
        apply the Norway (32V) and Svalbard (31X to 37X) exceptions, by default
        False

    Returns
    -------
    int
        zone number between 1 and 60
    """

    zone = int(math.floor((longitude + 180) / UTM_ZONE_WIDTH)) + 1
    # longitude 180 belongs to the last zone, unwrapped longitudes past the
    # antimeridian stay in the edge zones
    zone = max(MIN_UTM_ZONE, min(zone, MAX_UTM_ZONE))

    if not irregular_zones:
        return zone

    if 56 <= latitude < 64 and 3 <= longitude < 12:
        return 32

    if 72 <= latitude < 84:
        if 0 <= longitude < 9:
            return 31
        elif 9 <= longitude < 21:
            return 33
        elif 21 <= longitude < 33:
            return 35
        elif 33 <= longitude < 42:
            return 37

    return zone


def utm_band_letter(latitude: float) -> Optional[str]:
    """
    Get the UTM latitude band letter.

    Parameters
    ----------
    latitude : float
        latitude in degrees

    Returns
    -------
    Optional[str]
        band letter from C to X, None outside the UTM latitude range
    """

    if latitude < UTM_MIN_LATITUDE or latitude > UTM_MAX_LATITUDE:
        return None
    index = int((latitude - UTM_MIN_LATITUDE) // 8)
    # band X is 12 degrees tall
    return UTM_BAND_LETTERS[min(index, len(UTM_BAND_LETTERS) - 1)]


def central_meridian(zone: int) -> float:
    """Return the longitude of the central meridian of a zone, in degrees."""
    return (zone - 1) * UTM_ZONE_WIDTH - 180 + UTM_ZONE_WIDTH / 2


def meridian_arc(latitude: float) -> float:
    """
    Length of the meridian from the equator to a latitude on the ellipsoid.

    Parameters
    ----------
    latitude : float
        latitude in radians

    Returns
    -------
    float
        arc length in meters
    """

    return WGS84_SEMI_MAJOR_AXIS * (
        M1 * latitude
        - M2 * math.sin(2 * latitude)
        + M3 * math.sin(4 * latitude)
        - M4 * math.sin(6 * latitude)
    )


def to_utm(coordinate: Coordinate, irregular_zones: bool = False) -> UTMLocation:
    """
    Project a WGS84 coordinate into its UTM zone.

    Parameters
    ----------
    coordinate : Coordinate
        geographic coordinate
    irregular_zones : bool
        use the Norway and Svalbard zone exceptions, by default False

    Returns
    -------
    UTMLocation
        projected location, elevation is copied from the coordinate
    """

    zone = utm_zone_number(
        coordinate.latitude, coordinate.longitude, irregular_zones=irregular_zones
    )

    lat = math.radians(coordinate.latitude)
    long = math.radians(coordinate.longitude)
    long0 = math.radians(central_meridian(zone))

    sin_lat = math.sin(lat)
    cos_lat = math.cos(lat)
    tan_lat = math.tan(lat)

    n = WGS84_SEMI_MAJOR_AXIS / math.sqrt(1 - E2 * sin_lat**2)
    t = tan_lat**2
    c = EP2 * cos_lat**2
    a = cos_lat * (long - long0)
    m = meridian_arc(lat)

    easting = (
        UTM_SCALE_FACTOR
        * n
        * (
            a
            + (1 - t + c) * a**3 / 6
            + (5 - 18 * t + t**2 + 72 * c - 58 * EP2) * a**5 / 120
        )
        + UTM_FALSE_EASTING
    )
    northing = UTM_SCALE_FACTOR * (
        m
        + n
        * tan_lat
        * (
            a**2 / 2
            + (5 - t + 9 * c + 4 * c**2) * a**4 / 24
            + (61 - 58 * t + t**2 + 600 * c - 330 * EP2) * a**6 / 720
        )
    )

    hemisphere = Hemisphere.from_latitude(coordinate.latitude)
    if hemisphere is Hemisphere.SOUTH:
        northing += UTM_FALSE_NORTHING_SOUTH

    return UTMLocation(
        easting=easting,
        northing=northing,
        zone=zone,
        hemisphere=hemisphere,
        elevation=coordinate.elevation,
        band=utm_band_letter(coordinate.latitude),
    )


def to_coordinate(location: UTMLocation) -> Coordinate:
    """
    Convert a UTM location back to a WGS84 coordinate.

    Parameters
    ----------
    location : UTMLocation
        projected location

    Returns
    -------
    Coordinate
        geographic coordinate, elevation is copied from the location
    """

    x = location.easting - UTM_FALSE_EASTING
    y = location.northing
    if location.is_southern:
        y -= UTM_FALSE_NORTHING_SOUTH

    mu = y / UTM_SCALE_FACTOR / (WGS84_SEMI_MAJOR_AXIS * M1)
    footpoint = (
        mu
        + P2 * math.sin(2 * mu)
        + P4 * math.sin(4 * mu)
        + P6 * math.sin(6 * mu)
        + P8 * math.sin(8 * mu)
    )

    sin_fp = math.sin(footpoint)
    cos_fp = math.cos(footpoint)
    tan_fp = math.tan(footpoint)

    e_sin2 = 1 - E2 * sin_fp**2
    n1 = WGS84_SEMI_MAJOR_AXIS / math.sqrt(e_sin2)
    r1 = WGS84_SEMI_MAJOR_AXIS * (1 - E2) / e_sin2**1.5
    t1 = tan_fp**2
    c1 = EP2 * cos_fp**2
    d = x / (n1 * UTM_SCALE_FACTOR)

    lat = footpoint - (n1 * tan_fp / r1) * (
        d**2 / 2
        - (5 + 3 * t1 + 10 * c1 - 4 * c1**2 - 9 * EP2) * d**4 / 24
        + (61 + 90 * t1 + 298 * c1 + 45 * t1**2 - 252 * EP2 - 3 * c1**2)
        * d**6
        / 720
    )
    long = (
        d
        - (1 + 2 * t1 + c1) * d**3 / 6
        + (5 - 2 * c1 + 28 * t1 - 3 * c1**2 + 8 * EP2 + 24 * t1**2) * d**5 / 120
    ) / cos_fp

    return Coordinate(
        latitude=math.degrees(lat),
        longitude=central_meridian(location.zone) + math.degrees(long),
        elevation=location.elevation,
    )
