"""
Data Repository Interface

Interface for loading the station catalog and line geometry snapshot.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.station import StationRecord
from ..models.metro_line import MetroLine


class IDataRepository(ABC):
    """Interface for data repository operations."""

    @abstractmethod
    def load_stations(self) -> List[StationRecord]:
        """
        Load all station records from the data source.

        Returns:
            List of StationRecord objects, possibly with repeated codes
        """
        pass

    @abstractmethod
    def load_lines(self) -> List[MetroLine]:
        """
        Load the track geometry of every line.

        Returns:
            List of MetroLine objects
        """
        pass

    @abstractmethod
    def refresh_data(self) -> bool:
        """
        Drop any cached data and reload from the source.

        Returns:
            True if the reload succeeded, False otherwise
        """
        pass
