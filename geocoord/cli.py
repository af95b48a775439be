"""
Command line front end for geocoord.

Examples:
    geocoord describe 50.45 30.52
    geocoord distance 50.45 30.52 51.5074 -0.1278 --units mi
    geocoord sun 50.45 30.52 --date 2016-03-31
"""

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

from . import __version__
from .config import GeoConfig
from .dms import LATITUDE_HEMISPHERES, LONGITUDE_HEMISPHERES, decimal_to_dms, format_dms
from .engines import GeodeticEngine, SolarEngine
from .errors import GeoError
from .geo import Coordinate
from .unit import UNITS_BY_SYMBOL

logger = logging.getLogger("geocoord")


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="geocoord",
        description="Distances, bearings, DMS and sun times for points on Earth",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--units",
        type=str,
        default="km",
        choices=sorted(UNITS_BY_SYMBOL),
        help="Distance units (default: km)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"geocoord {__version__}",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    describe = commands.add_parser("describe", help="Show a point in DMS and decimal form")
    _add_point(describe)

    dms = commands.add_parser("dms", help="Convert decimal degrees to DMS")
    dms.add_argument("value", type=float, help="Decimal degrees")
    dms.add_argument("--lng", action="store_true", help="Use E/W instead of N/S")

    for name, text in (("distance", "Great-circle distance"), ("bearing", "Initial bearing")):
        sub = commands.add_parser(name, help=f"{text} between two points")
        _add_point(sub)
        _add_point(sub, "2")

    endpoint = commands.add_parser("endpoint", help="Destination from bearing and distance")
    _add_point(endpoint)
    endpoint.add_argument("bearing", type=float, help="Degrees clockwise from north")
    endpoint.add_argument("distance", type=float, help="Distance in --units")

    sun = commands.add_parser("sun", help="Sunrise and sunset in UTC")
    _add_point(sun)
    sun.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Calendar date YYYY-MM-DD (default: today, UTC)",
    )

    links = commands.add_parser("links", help="Map viewer links")
    _add_point(links)
    return parser


def _add_point(parser: argparse.ArgumentParser, suffix: str = "") -> None:
    parser.add_argument(f"lat{suffix}", type=float, help="Latitude in decimal degrees")
    parser.add_argument(f"lng{suffix}", type=float, help="Longitude in decimal degrees")


def run(args: argparse.Namespace) -> List[str]:
    """
    Execute a parsed command.

    Args:
        args: Parsed command line

    Returns:
        Output lines

    Raises:
        GeoError: If coordinate input cannot be interpreted
    """
    if args.command == "dms":
        hemispheres = LONGITUDE_HEMISPHERES if args.lng else LATITUDE_HEMISPHERES
        return [format_dms(decimal_to_dms(args.value, True, hemispheres))]

    config = GeoConfig(units=UNITS_BY_SYMBOL[args.units])
    point = Coordinate(args.lat, args.lng)

    if args.command == "describe":
        return [point.describe(), point.to_canonical_string()]

    if args.command in ("distance", "bearing", "endpoint"):
        geodetic = GeodeticEngine(config)
        if args.command == "distance":
            return [f"{point.distance_to(Coordinate(args.lat2, args.lng2), engine=geodetic).value:.3f} {args.units}"]
        if args.command == "bearing":
            return [f"{point.direction_to(Coordinate(args.lat2, args.lng2), engine=geodetic).value:.2f}°"]
        destination = point.endpoint(args.bearing, args.distance, engine=geodetic)
        return [destination.describe(), destination.to_canonical_string()]

    if args.command == "sun":
        solar = SolarEngine(config)
        lines = []
        for label, instant in (
            ("sunrise", point.sunrise(args.date, engine=solar)),
            ("sunset", point.sunset(args.date, engine=solar)),
        ):
            lines.append(f"{label}: {instant.isoformat() if instant else 'none'}")
        return lines

    return [f"{name}: {url}" for name, url in point.links().items()]


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s - %(message)s",
    )
    logger.debug("Running %s", args.command)

    try:
        lines = run(args)
    except GeoError as e:
        logger.error(f"{e}")
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
