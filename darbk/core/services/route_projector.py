"""
Route Projector

Snaps a route onto its line's track geometry so the drawn overlay follows
the real track rather than straight segments between station dots.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from ..models.metro_line import MetroLine
from ..models.station import GeoPoint, StationRecord
from ...utils.geo import closest_index


logger = logging.getLogger(__name__)


def raw_coordinates(route_stations: Sequence[StationRecord]) -> List[GeoPoint]:
    return [station.location for station in route_stations]


def project(route_stations: Sequence[StationRecord], line_geometry: Sequence[GeoPoint]) -> List[GeoPoint]:
    """
    Slice a polyline between the points closest to the route's endpoints.

    The first and last route stations are each matched to their closest
    polyline index. The slice between the two indices (inclusive) is
    returned running from origin to destination: in polyline order when
    the origin index comes first, reversed otherwise.

    Args:
        route_stations: Ordered stations of the route
        line_geometry: Ordered track points of the line

    Returns:
        The snapped polyline, or the stations' own coordinates when there
        are fewer than two stations or no geometry
    """
    stations = list(route_stations)
    points = list(line_geometry)

    if len(stations) < 2 or not points:
        return raw_coordinates(stations)

    start_index = closest_index(points, stations[0].location)
    end_index = closest_index(points, stations[-1].location)

    if start_index <= end_index:
        return points[start_index:end_index + 1]
    return list(reversed(points[end_index:start_index + 1]))


class RouteProjector:
    """Projects routes onto the geometry of the line they travel on."""

    def __init__(self, lines: Iterable[MetroLine] = ()):
        """
        Initialize the projector.

        Args:
            lines: Line geometries; the first line with a given name wins
        """
        self.logger = logging.getLogger(__name__)
        self._lines_by_name: Dict[str, MetroLine] = {}
        for line in lines:
            self._lines_by_name.setdefault(line.name, line)

    def get_line(self, name: str) -> Optional[MetroLine]:
        return self._lines_by_name.get(name)

    @property
    def line_names(self) -> List[str]:
        return list(self._lines_by_name)

    def route_polyline(self, route_stations: Sequence[StationRecord]) -> List[GeoPoint]:
        """
        Get the polyline to draw for a route.

        Only single-line routes are snapped, onto the geometry named after
        the first station's line. Routes crossing lines, routes shorter
        than two stations and routes without matching geometry are drawn
        through the raw station coordinates.
        """
        stations = list(route_stations)
        if len(stations) < 2:
            return raw_coordinates(stations)

        line_codes = {station.line_code for station in stations}
        if len(line_codes) > 1:
            self.logger.debug(f"Route spans lines {sorted(line_codes)}; using station coordinates")
            return raw_coordinates(stations)

        line = self.get_line(stations[0].line_name)
        if line is None or line.is_empty:
            self.logger.debug(f"No geometry for line '{stations[0].line_name}'; using station coordinates")
            return raw_coordinates(stations)

        return project(stations, line.points)
