"""
Position Sources and Notifiers

Platform-free implementations of the tracking collaborators: a position
source that replays recorded points and a notifier that writes to the log.
"""

import logging
from typing import Iterable, List, Optional

from ..interfaces.i_notifier import INotifier
from ..interfaces.i_position_source import IPositionSource
from ..models.station import GeoPoint, StationRecord


class SimulatedPositionSource(IPositionSource):
    """
    Replays a fixed sequence of positions.

    Each call returns the next point; once exhausted the last point keeps
    being reported, like a device that has stopped moving.
    """

    def __init__(self, points: Iterable[GeoPoint]):
        self._points: List[GeoPoint] = list(points)
        self._cursor = 0

    @classmethod
    def along_stations(cls, stations: Iterable[StationRecord]) -> 'SimulatedPositionSource':
        """Create a source that visits each station's location in turn."""
        return cls(station.location for station in stations)

    def current_position(self) -> Optional[GeoPoint]:
        if not self._points:
            return None
        point = self._points[min(self._cursor, len(self._points) - 1)]
        self._cursor += 1
        return point

    @property
    def exhausted(self) -> bool:
        return self._cursor >= len(self._points)

    def rewind(self) -> None:
        self._cursor = 0


class LoggingNotifier(INotifier):
    """Notifier that records arrivals in the application log."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.arrivals: List[StationRecord] = []

    def notify_arrival(self, station: StationRecord) -> None:
        self.arrivals.append(station)
        self.logger.info(f"You have arrived at {station.get_display_name()} ({station.code})")
