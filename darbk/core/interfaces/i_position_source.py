"""
Position Source Interface

Supplies live position samples to trip tracking.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.station import GeoPoint


class IPositionSource(ABC):
    """Interface for anything that can report the traveller's current position."""

    @abstractmethod
    def current_position(self) -> Optional[GeoPoint]:
        """
        Get the latest position sample.

        Returns:
            The current position, or None when no fix is available
        """
        pass
