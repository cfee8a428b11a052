"""
Trip Tracker

Turns a stream of position samples into route progress and a one-time
arrival notification. The position source and notifier are passed in
explicitly so tracking runs without any platform services.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..interfaces.i_notifier import INotifier
from ..interfaces.i_position_source import IPositionSource
from ..models.station import GeoPoint, StationRecord
from .progress_estimator import nearest_station_index
from .route_service import RouteService


@dataclass(frozen=True)
class TripStatus:
    """Snapshot of trip progress for one position sample."""

    progress: float
    nearest_index: Optional[int]
    remaining_stops: int
    arrived: bool


class TripTracker:
    """Recomputes progress on each sample and announces arrival once per route."""

    def __init__(self, route_service: RouteService,
                 position_source: Optional[IPositionSource] = None,
                 notifier: Optional[INotifier] = None):
        """
        Initialize the trip tracker.

        Args:
            route_service: Session whose current route is tracked
            position_source: Where samples come from when update() gets none
            notifier: Receives the arrival event
        """
        self.route_service = route_service
        self.position_source = position_source
        self.notifier = notifier
        self.logger = logging.getLogger(__name__)
        self._notified_route: Optional[Tuple[str, ...]] = None

    def update(self, position: Optional[GeoPoint] = None) -> TripStatus:
        """
        Process one position sample.

        Args:
            position: Sample to use; pulled from the position source when omitted

        Returns:
            TripStatus for the sample
        """
        if position is None and self.position_source is not None:
            position = self.position_source.current_position()

        stations = self.route_service.route_stations
        if position is None or len(stations) < 2:
            return TripStatus(progress=0.0, nearest_index=None,
                              remaining_stops=max(len(stations) - 1, 0), arrived=False)

        last_index = len(stations) - 1
        index = nearest_station_index(stations, position)
        arrived = index == last_index

        if arrived:
            self._announce_arrival(tuple(station.code for station in stations), stations[-1])

        return TripStatus(
            progress=index / last_index,
            nearest_index=index,
            remaining_stops=last_index - index,
            arrived=arrived,
        )

    def reset(self) -> None:
        """Re-arm the arrival notification."""
        self._notified_route = None

    def _announce_arrival(self, route_key: Tuple[str, ...], destination: StationRecord) -> None:
        if self._notified_route == route_key:
            return
        self._notified_route = route_key
        self.logger.info(f"Arrived at destination {destination}")
        if self.notifier is not None:
            self.notifier.notify_arrival(destination)
