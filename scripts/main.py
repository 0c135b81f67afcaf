import argparse
import logging
from pprint import pprint

from geokit.geo.conversion import to_vec
from geokit.geo.spherical import bearing_haversine, midpoint
from geokit.geo.utm import to_utm
from geokit.routes.reader import RouteReader


def summarize_route(route) -> dict:
    summary = {
        "name": route.name,
        "points": len(route),
        "length_haversine_km": route.length_km(method="haversine"),
        "length_spherical_km": route.length_km(method="spherical"),
    }
    if len(route) < 2:
        return summary

    start_utm = to_utm(route.start)
    summary.update(
        {
            "initial_bearing_deg": bearing_haversine(route.start, route.end),
            "midpoint": midpoint(route.start, route.end),
            "start_utm": f"{start_utm.zone}{start_utm.band or start_utm.hemisphere.value}"
            f" {start_utm.easting:.0f}E {start_utm.northing:.0f}N",
            "start_planar_m": to_vec(route.start).round(1).tolist(),
        }
    )
    return summary


if __name__ == "__main__":

    parser = argparse.ArgumentParser(description="Summarize the routes of a folder.")
    parser.add_argument("route_folder", nargs="?", default="data/routes/")
    parser.add_argument("--waypoints", action="store_true")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logging.basicConfig(format=format, level=logging.INFO, datefmt="%H:%M:%S")

    logger = logging.getLogger("%s.Summary" % __name__)  # noqa
    if args.debug:
        logger.setLevel(logging.DEBUG)

    reader = RouteReader(
        route_folder=args.route_folder,
        with_waypoints=args.waypoints,
        logger=logging.getLogger("%s.RouteReader" % __name__),  # noqa
    )
    logger.info(f"Summarizing {len(reader)} routes")

    summaries = []
    for route in reader:
        logger.debug(f"Summarizing route {route.name}")
        summaries.append(summarize_route(route))
    pprint(summaries)
