"""
Route Service

Session-level orchestration of the routing core: holds the current
catalog snapshot, graph and origin/destination selection, and derives the
route, its polyline and progress values for the presentation layer.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..models.graph import MetroGraph
from ..models.metro_line import MetroLine
from ..models.route import RoutePlan, UpcomingStop
from ..models.station import GeoPoint, StationRecord
from .network_graph_builder import build_graph
from .pathfinding_algorithm import route_stations, shortest_path
from .progress_estimator import progress
from .route_projector import RouteProjector
from .station_catalog import STATION_NUMBER_START, FavoriteStations, StationCatalog


# Number of stops shown in the upcoming-stops preview
UPCOMING_STOPS_LIMIT = 6


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class RouteService:
    """
    Routing state for one user session.

    The catalog, graph and projector are replaced together on every load
    and never patched, so readers always see a consistent snapshot.
    """

    def __init__(self, stations: Iterable[StationRecord] = (), lines: Iterable[MetroLine] = (),
                 upcoming_stops_limit: int = UPCOMING_STOPS_LIMIT,
                 station_number_start: int = STATION_NUMBER_START,
                 graph: Optional[MetroGraph] = None):
        """
        Initialize the route service.

        Args:
            stations: Station records to route over
            lines: Line geometries used to draw routes
            upcoming_stops_limit: Maximum stops returned by upcoming_stops()
            station_number_start: First display number on each line
            graph: Prebuilt graph for these stations, built here when omitted
        """
        self.logger = logging.getLogger(__name__)
        self.upcoming_stops_limit = upcoming_stops_limit
        self.station_number_start = station_number_start

        self.catalog = StationCatalog()
        self.graph = MetroGraph()
        self.projector = RouteProjector()
        self.favorites = FavoriteStations()

        self.origin: Optional[StationRecord] = None
        self.destination: Optional[StationRecord] = None
        self.route: Optional[RoutePlan] = None

        self.load(stations, lines, graph)

    def load(self, stations: Iterable[StationRecord], lines: Iterable[MetroLine] = (),
             graph: Optional[MetroGraph] = None) -> None:
        """
        Replace the station and line snapshot and rebuild the graph.

        A graph already built from the same stations can be passed in.
        Any route in progress is cleared since it refers to the old snapshot.
        """
        catalog = StationCatalog(stations)
        if graph is None:
            graph = build_graph(catalog)
        projector = RouteProjector(lines)

        self.catalog, self.graph, self.projector = catalog, graph, projector
        self.clear_route()

        self.logger.info(f"Loaded {len(catalog)} stations and {len(projector.line_names)} line geometries")

    @property
    def route_stations(self) -> List[StationRecord]:
        return list(self.route.stations) if self.route else []

    def find_route(self, origin_code: str, destination_code: str) -> Optional[RoutePlan]:
        """
        Compute a route between two codes without touching session state.

        Returns:
            RoutePlan, or None when unreachable or degenerate (one station or fewer)
        """
        path = shortest_path(self.graph, origin_code, destination_code)
        stations = route_stations(self.graph, path)
        if len(stations) <= 1:
            return None
        return RoutePlan(tuple(stations))

    def set_destination(self, station: StationRecord, user_location: Optional[GeoPoint] = None) -> Optional[RoutePlan]:
        """
        Pick a destination and route to it.

        The origin becomes the station nearest to user_location; without a
        location the origin is the destination itself, which yields no route.
        """
        self.destination = station
        if user_location is not None:
            self.origin = self.catalog.nearest_station(user_location)
        else:
            self.origin = station
        return self.update_route()

    def set_origin(self, station: StationRecord) -> Optional[RoutePlan]:
        self.origin = station
        return self.update_route()

    def update_route(self) -> Optional[RoutePlan]:
        """
        Recompute the route for the current origin and destination.

        An unreachable pair or a degenerate path clears the whole selection.
        """
        if self.origin is None or self.destination is None:
            self.route = None
            return None

        route = self.find_route(self.origin.code, self.destination.code)
        if route is None:
            self.logger.info(f"No route from '{self.origin.code}' to '{self.destination.code}'; clearing selection")
            self.clear_route()
            return None

        self.route = route
        self.logger.info(f"Route {route} ({route.stops_count} stops, {route.changes} changes)")
        return route

    def clear_route(self) -> None:
        self.origin = None
        self.destination = None
        self.route = None

    def route_progress(self, position: Optional[GeoPoint]) -> float:
        """Progress of position along the current route, in [0, 1]."""
        return progress(self.route_stations, position)

    def route_polyline(self) -> List[GeoPoint]:
        """Polyline for the current route; empty when there is no route."""
        return self.projector.route_polyline(self.route_stations)

    def remaining_stops(self, progress_value: Optional[float] = None) -> int:
        """
        Count the stops left on the route.

        Without a progress value this is the total number of hops. The
        station reached is rounded back from the progress fraction, which
        is itself an exact index over the hop count.
        """
        count = len(self.route_stations)
        if count < 2:
            return 0
        if progress_value is None:
            return count - 1
        index = round(_clamp(progress_value) * (count - 1))
        return max(count - 1 - index, 0)

    def next_station(self) -> Optional[StationRecord]:
        """The station after the origin, or the only station of a one-stop route."""
        stations = self.route_stations
        if len(stations) > 1:
            return stations[1]
        return stations[0] if stations else None

    def current_line_code(self, progress_value: float) -> Optional[str]:
        """Line code of the route station reached at the given progress."""
        stations = self.route_stations
        if not stations:
            return None
        if len(stations) == 1:
            return stations[0].line_code
        return stations[self._index_for(progress_value)].line_code

    def station_numbers(self) -> Dict[str, int]:
        """Display numbers of the catalog stations, per line from the configured start."""
        return self.catalog.station_numbers(start=self.station_number_start)

    def upcoming_stops(self, limit: Optional[int] = None) -> List[UpcomingStop]:
        """Preview of the first stops of the route with their interchange lines."""
        limit = self.upcoming_stops_limit if limit is None else limit
        return [
            UpcomingStop(
                name_ar=station.name_ar,
                line_code=station.line_code,
                line_codes=tuple(self.catalog.lines_serving(station)),
            )
            for station in self.route_stations[:limit]
        ]

    def _index_for(self, progress_value: float) -> int:
        count = len(self.route_stations)
        index = int(_clamp(progress_value) * (count - 1))
        return min(max(index, 0), count - 1)
