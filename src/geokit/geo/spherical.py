import math

from geokit.geo.schemas import Coordinate
from geokit.utils.constants import EARTH_RADIUS_KM


def distance_spherical(coordinate0: Coordinate, coordinate1: Coordinate) -> float:
    """
    Calculate the great-circle distance with the spherical law of cosines.

    Loses precision for points a few meters apart, use `distance_haversine`
    for short distances.

    Parameters
    ----------
    coordinate0 : Coordinate
        first coordinate
    coordinate1 : Coordinate
        second coordinate

    Returns
    -------
    float
        spherical distance in kilometers
    """

    lat1 = math.radians(coordinate0.latitude)
    long1 = math.radians(coordinate0.longitude)
    lat2 = math.radians(coordinate1.latitude)
    long2 = math.radians(coordinate1.longitude)

    cos_angle = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(
        lat2
    ) * math.cos(long2 - long1)
    # math.acos raises outside [-1, 1], keep the IEEE NaN of the formula instead
    if abs(cos_angle) > 1:
        return math.nan

    return math.acos(cos_angle) * EARTH_RADIUS_KM


def distance_haversine(coordinate0: Coordinate, coordinate1: Coordinate) -> float:
    """
    Calculate the haversine distance between two coordinates.

    Parameters
    ----------
    coordinate0 : Coordinate
        first coordinate
    coordinate1 : Coordinate
        second coordinate

    Returns
    -------
    float
        haversine distance in kilometers
    """

    lat1 = math.radians(coordinate0.latitude)
    long1 = math.radians(coordinate0.longitude)
    lat2 = math.radians(coordinate1.latitude)
    long2 = math.radians(coordinate1.longitude)

    dlong = long2 - long1
    dlat = lat2 - lat1

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlong / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    distance = c * EARTH_RADIUS_KM
    return distance


def bearing_haversine(coordinate0: Coordinate, coordinate1: Coordinate) -> float:
    """
    Calculate the initial bearing from one coordinate to another.

    Parameters
    ----------
    coordinate0 : Coordinate
        start coordinate
    coordinate1 : Coordinate
        end coordinate

    Returns
    -------
    float
        bearing in degrees clockwise from north, in [0, 360)
    """

    lat1 = math.radians(coordinate0.latitude)
    lat2 = math.radians(coordinate1.latitude)
    dlong = math.radians(coordinate1.longitude - coordinate0.longitude)

    y = math.sin(dlong) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(
        dlong
    )
    bearing = (math.degrees(math.atan2(y, x)) + 360) % 360
    # -1e-15 % 360 rounds up to 360.0
    return 0.0 if bearing == 360 else bearing


def midpoint(coordinate0: Coordinate, coordinate1: Coordinate) -> Coordinate:
    """
    Calculate the midpoint of the great-circle path between two coordinates.

    The longitude is not wrapped back into [-180, 180], so paths crossing the
    antimeridian can return a longitude outside that range.

    Parameters
    ----------
    coordinate0 : Coordinate
        first coordinate
    coordinate1 : Coordinate
        second coordinate

    Returns
    -------
    Coordinate
        midpoint with zero elevation
    """

    lat1 = math.radians(coordinate0.latitude)
    long1 = math.radians(coordinate0.longitude)
    lat2 = math.radians(coordinate1.latitude)
    dlong = math.radians(coordinate1.longitude - coordinate0.longitude)

    bx = math.cos(lat2) * math.cos(dlong)
    by = math.cos(lat2) * math.sin(dlong)

    lat_mid = math.atan2(
        math.sin(lat1) + math.sin(lat2),
        math.sqrt((math.cos(lat1) + bx) ** 2 + by**2),
    )
    long_mid = long1 + math.atan2(by, math.cos(lat1) + bx)

    return Coordinate(latitude=math.degrees(lat_mid), longitude=math.degrees(long_mid))
