"""
Notifier Interface

Receives trip events raised by trip tracking.
"""

from abc import ABC, abstractmethod

from ..models.station import StationRecord


class INotifier(ABC):
    """Interface for delivering trip notifications."""

    @abstractmethod
    def notify_arrival(self, station: StationRecord) -> None:
        """
        Announce arrival at the destination station.

        Args:
            station: The destination station that was reached
        """
        pass
