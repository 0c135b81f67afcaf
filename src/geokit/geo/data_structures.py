from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

import numpy as np

from geokit.geo.schemas import Coordinate, UTMLocation
from geokit.geo.spherical import (
    bearing_haversine,
    distance_haversine,
    distance_spherical,
    midpoint,
)
from geokit.geo.utm import to_utm
from geokit.polyline.codec import decode_geo_polyline, encode_geo_polyline
from geokit.utils.checks import check_coordinate
from geokit.utils.errors import InvalidRouteFileError
from geokit.utils.io import JsonParser, YamlParser

DISTANCE_METHODS = {
    "haversine": distance_haversine,
    "spherical": distance_spherical,
}


@dataclass
class Route:
    """An ordered sequence of coordinates, e.g. a decoded polyline.

    Parameters
    ----------
    coordinates : List[Coordinate]
        coordinates of the route, in travel order
    name : str, optional
        name of the route

    Properties
    ----------
    start : Coordinate
        first coordinate of the route
    end : Coordinate
        last coordinate of the route
    """

    coordinates: List[Coordinate] = field(default_factory=list)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        self.coordinates = list(self.coordinates)
        for coordinate in self.coordinates:
            check_coordinate(coordinate)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __getitem__(self, index: int) -> Coordinate:
        return self.coordinates[index]

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coordinates)

    @property
    def start(self) -> Coordinate:
        return self.coordinates[0]

    @property
    def end(self) -> Coordinate:
        return self.coordinates[-1]

    @staticmethod
    def from_polyline(encoded: str, name: Optional[str] = None) -> Route:
        """Create a route from an encoded polyline."""
        return Route(coordinates=decode_geo_polyline(encoded), name=name)

    @staticmethod
    def from_dict(data: Dict) -> Route:
        """Create a route from a mapping holding a polyline or a coordinate list.

        Parameters
        ----------
        data : Dict
            mapping with an optional "name" and either a "polyline" string or a
            "coordinates" list of [lat, long] or [lat, long, elevation] items

        Returns
        -------
        Route
            the route

        Raises
        ------
        InvalidRouteFileError
            if the mapping has neither "polyline" nor "coordinates"
        """
        if not isinstance(data, dict):
            raise InvalidRouteFileError("A route file must contain a mapping.")
        name = data.get("name")
        if "polyline" in data:
            return Route.from_polyline(data["polyline"], name=name)
        if "coordinates" in data:
            return Route(
                coordinates=[Coordinate(*values) for values in data["coordinates"]],
                name=name,
            )
        raise InvalidRouteFileError()

    @staticmethod
    def from_yaml(yaml_file: Union[str, Path]) -> Route:
        return Route.from_dict(YamlParser.load(yaml_file))

    @staticmethod
    def from_json(json_file: Union[str, Path]) -> Route:
        return Route.from_dict(JsonParser.load(json_file))

    def to_polyline(self) -> str:
        return encode_geo_polyline(self.coordinates)

    def to_dict(self) -> Dict:
        """Return the route as a mapping, coordinates keep their elevation."""
        return {
            "name": self.name,
            "coordinates": [
                [c.latitude, c.longitude, c.elevation] for c in self.coordinates
            ],
        }

    def to_yaml(self, yaml_file: Union[str, Path]) -> None:
        YamlParser.dump(self.to_dict(), yaml_file)

    def to_json(self, json_file: Union[str, Path]) -> None:
        JsonParser.dump(self.to_dict(), json_file)

    def segment_distances(self, method: str = "haversine") -> np.ndarray:
        """Return the great-circle distance of each segment of the route.

        Parameters
        ----------
        method : str
            "haversine" or "spherical" (law of cosines), by default "haversine"

        Returns
        -------
        np.ndarray
            distances in kilometers, one per pair of consecutive coordinates
        """
        if method not in DISTANCE_METHODS:
            raise ValueError(
                f"Unknown distance method {method!r}, "
                f"expected one of {sorted(DISTANCE_METHODS)}"
            )
        distance = DISTANCE_METHODS[method]
        return np.array(
            [distance(a, b) for a, b in zip(self.coordinates, self.coordinates[1:])],
            dtype=np.float64,
        )

    def length_km(self, method: str = "haversine") -> float:
        """Return the total length of the route in kilometers."""
        return float(self.segment_distances(method=method).sum())

    def bearings(self) -> np.ndarray:
        """Return the initial bearing of each segment, in degrees."""
        return np.array(
            [
                bearing_haversine(a, b)
                for a, b in zip(self.coordinates, self.coordinates[1:])
            ],
            dtype=np.float64,
        )

    def segment_midpoints(self) -> List[Coordinate]:
        return [midpoint(a, b) for a, b in zip(self.coordinates, self.coordinates[1:])]

    def to_utm(self) -> List[UTMLocation]:
        return [to_utm(coordinate) for coordinate in self.coordinates]

    def to_array(self) -> np.ndarray:
        """Return the route as an array of shape (N, 3): lat, long, elevation."""
        if not self.coordinates:
            return np.empty((0, 3), dtype=np.float64)
        return np.array(
            [[c.latitude, c.longitude, c.elevation] for c in self.coordinates],
            dtype=np.float64,
        )
