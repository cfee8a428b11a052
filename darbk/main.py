"""
Main entry point for the Darbk command line tool.

Sets up logging, loads the configuration and the metro data, and answers
route, search, progress and trip-simulation queries.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.models.station import GeoPoint
from .core.services.json_data_repository import DataLoadError
from .core.services.position_sources import LoggingNotifier, SimulatedPositionSource
from .core.services.route_service import RouteService
from .core.services.service_factory import ServiceFactory
from .managers.config_manager import ConfigData, ConfigManager, ConfigurationError
from .version import get_version_string

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup console logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="darbk", description="Riyadh Metro routing")
    parser.add_argument("--version", action="version", version=get_version_string())
    parser.add_argument("--config", help="Path to a configuration file")
    parser.add_argument("--data-dir", help="Directory holding the stations and lines files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    route_parser = subparsers.add_parser("route", help="Find a route between two station codes")
    route_parser.add_argument("--from", dest="origin", required=True, help="Origin station code")
    route_parser.add_argument("--to", dest="destination", required=True, help="Destination station code")

    search_parser = subparsers.add_parser("search", help="Search stations by name")
    search_parser.add_argument("text", nargs="?", default="", help="Text to match in station names")
    search_parser.add_argument("--line", help="Restrict results to a line code")

    progress_parser = subparsers.add_parser("progress", help="Progress of a position along a route")
    progress_parser.add_argument("--from", dest="origin", required=True, help="Origin station code")
    progress_parser.add_argument("--to", dest="destination", required=True, help="Destination station code")
    progress_parser.add_argument("--lat", type=float, required=True, help="Current latitude")
    progress_parser.add_argument("--lon", type=float, required=True, help="Current longitude")

    track_parser = subparsers.add_parser("track", help="Simulate riding a route station by station")
    track_parser.add_argument("--from", dest="origin", required=True, help="Origin station code")
    track_parser.add_argument("--to", dest="destination", required=True, help="Destination station code")

    return parser


def load_config(path: Optional[str]) -> ConfigData:
    if path is None:
        return ConfigData()
    return ConfigManager(path).load_config()


def select_route(route_service: RouteService, origin_code: str, destination_code: str) -> bool:
    """Select origin and destination on the session, reporting unknown codes."""
    for code in (origin_code, destination_code):
        if route_service.catalog.get(code) is None:
            print(f"Unknown station code: {code}", file=sys.stderr)
            return False

    route_service.origin = route_service.catalog.get(origin_code)
    route_service.destination = route_service.catalog.get(destination_code)
    if route_service.update_route() is None:
        print(f"No route from {origin_code} to {destination_code}", file=sys.stderr)
        return False
    return True


def print_route(route_service: RouteService) -> None:
    route = route_service.route
    numbers = route_service.station_numbers()
    print(f"{route.origin.name} -> {route.destination.name}: "
          f"{route.stops_count} stops, {route.changes} changes")
    for station in route:
        print(f"  {numbers.get(station.code, ''):>3} {station.code:<10} {station.line_code:<6} "
              f"{station.name} / {station.name_ar}")


def run(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    factory = ServiceFactory(config, data_directory=args.data_dir)
    route_service = factory.get_route_service()

    if args.command == "search":
        for station in route_service.catalog.search(args.text, line_code=args.line):
            print(f"{station.code:<10} {station.line_code:<6} {station.name} / {station.name_ar}")
        return 0

    if not select_route(route_service, args.origin, args.destination):
        return 1

    if args.command == "route":
        print_route(route_service)
    elif args.command == "progress":
        position = GeoPoint(latitude=args.lat, longitude=args.lon)
        value = route_service.route_progress(position)
        print(f"progress={value:.3f} remaining_stops={route_service.remaining_stops(value)}")
    elif args.command == "track":
        notifier = LoggingNotifier()
        source = SimulatedPositionSource.along_stations(route_service.route_stations)
        tracker = factory.create_trip_tracker(source, notifier)
        while not source.exhausted:
            status = tracker.update()
            print(f"progress={status.progress:.3f} remaining_stops={status.remaining_stops}")
        for station in notifier.arrivals:
            print(f"Arrived at {station.name} / {station.name_ar}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        return run(args)
    except (ConfigurationError, DataLoadError) as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
