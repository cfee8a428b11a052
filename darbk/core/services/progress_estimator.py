"""
Progress Estimator

Nearest-station estimate of how far along a route a live position is.
"""

from typing import Optional, Sequence

from ..models.station import GeoPoint, StationRecord
from ...utils.geo import closest_index


def nearest_station_index(route_stations: Sequence[StationRecord], position: GeoPoint) -> Optional[int]:
    """Get the index of the route station closest to position (first on ties)."""
    return closest_index([station.location for station in route_stations], position)


def progress(route_stations: Sequence[StationRecord], live_position: Optional[GeoPoint]) -> float:
    """
    Estimate route progress in [0, 1].

    Progress is the index of the nearest route station over the number of
    hops. It is a heuristic, not along-track interpolation: noisy or
    off-route positions can make it jump backwards, and that is passed
    through unchanged.

    Args:
        route_stations: Ordered stations of the route
        live_position: Latest position sample, if any

    Returns:
        0.0 without a position or with fewer than two stations, otherwise
        nearest_index / (station_count - 1)
    """
    if live_position is None or len(route_stations) < 2:
        return 0.0

    index = nearest_station_index(route_stations, live_position)
    return index / max(len(route_stations) - 1, 1)
