import logging
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd
from tqdm import tqdm

from geokit.geo.data_structures import Route
from geokit.geo.schemas import Coordinate
from geokit.utils.io import PARSERS


class RouteReader:
    """Route reader that loads routes from the files of a folder.

    Every YAML or JSON file of the folder holds one route, either as an encoded
    polyline or as a list of coordinates (see `Route.from_dict`). The folder may
    also contain a single CSV file of waypoints, grouped into routes by name.

    Parameters
    ----------
    route_folder : Union[str, Path]
        path to the folder containing the route files
    with_waypoints : bool
        whether the folder contains a CSV file of waypoints
    logger : logging.Logger
        logger to use for logging

    """

    COLUMN_NAMES = [
        "Name",
        "Latitude",
        "Longitude",
        "Elevation",
    ]

    def __init__(
        self,
        route_folder: Union[str, Path],
        with_waypoints: bool = False,
        logger: logging.Logger = None,
    ) -> None:
        self.route_folder = (
            route_folder if isinstance(route_folder, Path) else Path(route_folder)
        )
        if not self.route_folder.exists():
            raise FileNotFoundError(f"Route folder not found at {self.route_folder}")
        if logger is None:
            logger = logging.getLogger(__name__)
        self.logger = logger
        self.with_waypoints = with_waypoints
        self._initialize_db()

    def __len__(self) -> int:
        return self._num_routes

    def __getitem__(self, name: str) -> Route:
        return self._route_db[name]

    @property
    def route_names(self) -> List[str]:
        """List of route names in the reader."""
        return list(self._route_db.keys())

    def _initialize_db(self) -> None:
        """Initialize the route database."""
        self._route_db: Dict[str, Route] = dict()
        self._num_routes = 0
        self._build_route_db()
        if self.with_waypoints:
            self._build_route_db_from_waypoints()
        self.current_idx = 0

    def _add_route(self, name: str, route: Route) -> None:
        if name in self._route_db:
            self.logger.warning(f"Route {name} already loaded, replacing it")
        else:
            self._num_routes += 1
        self._route_db[name] = route

    def _build_route_db(self) -> None:
        """Build the route database from the YAML and JSON files."""
        self.logger.info(f"Building route database for {self.route_folder}")
        route_files = sorted(
            path
            for path in self.route_folder.glob("*")
            if path.is_file() and path.suffix.lower() in PARSERS
        )
        for route_file in tqdm(route_files, total=len(route_files)):
            data = PARSERS[route_file.suffix.lower()].load(route_file)
            route = Route.from_dict(data)
            if route.name is None:
                route.name = route_file.stem
            self._add_route(route.name, route)
        self.logger.info(
            f"Route database built successfully with {self._num_routes} routes"
        )

    def _build_route_db_from_waypoints(self) -> None:
        """Build routes from the waypoints CSV file.

        The CSV file should have the following columns, rows of a route being
        in travel order:
        - Name
        - Latitude
        - Longitude
        - Elevation (optional)
        """
        csv_files = list(self.route_folder.glob("*.csv"))
        if len(csv_files) == 0:
            raise FileNotFoundError(f"No CSV files found in {self.route_folder}")
        if len(csv_files) > 1:
            raise ValueError(f"Multiple CSV files found in {self.route_folder}")
        csv_file = csv_files[0]
        self.logger.info(f"Building routes from waypoints in {csv_file}")
        waypoints = pd.read_csv(csv_file)
        if "Elevation" not in waypoints.columns:
            waypoints["Elevation"] = 0.0
        for name, group in tqdm(
            waypoints.groupby("Name", sort=False), total=waypoints["Name"].nunique()
        ):
            coordinates = [
                Coordinate(
                    latitude=float(row["Latitude"]),
                    longitude=float(row["Longitude"]),
                    elevation=float(row["Elevation"]),
                )
                for _, row in group.iterrows()
            ]
            self._add_route(str(name), Route(coordinates=coordinates, name=str(name)))
        self.logger.info(
            f"Route database built successfully with {self._num_routes} routes"
        )

    def __next__(self) -> Route:
        """Get the next route in the reader."""
        if self._num_routes == 0 or self.current_idx >= self._num_routes:
            raise StopIteration

        route = self._route_db[self.route_names[self.current_idx]]
        self.current_idx += 1
        return route

    def __iter__(self) -> "RouteReader":
        """Return the reader as an iterator."""
        self.current_idx = 0
        return self
