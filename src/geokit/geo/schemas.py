from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from geokit.utils.checks import check_utm_zone
from geokit.utils.errors import InvalidHemisphereError


@dataclass(frozen=True)
class Coordinate:
    """A geographic point on the WGS84 ellipsoid.

    Parameters
    ----------
    latitude : float
        latitude in decimal degrees
    longitude : float
        longitude in decimal degrees
    elevation : float
        elevation in meters, by default 0
    """

    latitude: float
    longitude: float
    elevation: float = 0.0


class Hemisphere(str, Enum):
    NORTH = "N"
    SOUTH = "S"

    @staticmethod
    def from_latitude(latitude: float) -> Hemisphere:
        return Hemisphere.NORTH if latitude >= 0 else Hemisphere.SOUTH


@dataclass(frozen=True)
class UTMLocation:
    """A point projected into a UTM zone.

    Easting and northing only make sense together with the zone and hemisphere
    that produced them.

    Parameters
    ----------
    easting : float
        easting in meters, including the false easting
    northing : float
        northing in meters, including the false northing in the south
    zone : int
        UTM zone number (1 to 60)
    hemisphere : Hemisphere
        hemisphere of the projected point, "N" and "S" are accepted as well
    elevation : float
        elevation in meters, carried through from the source coordinate
    band : str, optional
        latitude band letter, by default None
    """

    easting: float
    northing: float
    zone: int
    hemisphere: Hemisphere
    elevation: float = 0.0
    band: Optional[str] = None

    def __post_init__(self) -> None:
        check_utm_zone(self.zone)
        try:
            hemisphere = Hemisphere(self.hemisphere)
        except ValueError:
            raise InvalidHemisphereError() from None
        object.__setattr__(self, "hemisphere", hemisphere)

    @property
    def is_southern(self) -> bool:
        return self.hemisphere is Hemisphere.SOUTH
