"""
Station Catalog

In-memory, code-indexed collection of station records with search,
numbering and nearest-station lookup, plus the session's favorite stations.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional, Set

from ..models.station import GeoPoint, StationRecord
from ...utils.geo import haversine_distance_m


# Display numbers on each line start here and increase by one per station
STATION_NUMBER_START = 11


def line_order_key(station: StationRecord):
    """Sort key placing stations in track order: sequence, then code."""
    return (station.sequence, station.code)


class StationCatalog:
    """
    Deduplicated station records indexed by code.

    When the same code appears more than once the first occurrence wins.
    Insertion order of first occurrences is preserved.
    """

    def __init__(self, stations: Iterable[StationRecord] = ()):
        """
        Initialize the catalog.

        Args:
            stations: Station records, possibly containing repeated codes
        """
        self.logger = logging.getLogger(__name__)

        self._by_code: Dict[str, StationRecord] = {}
        duplicates = 0
        for station in stations:
            if station.code in self._by_code:
                duplicates += 1
                continue
            self._by_code[station.code] = station

        self._by_line: Dict[str, List[StationRecord]] = defaultdict(list)
        self._by_name_ar: Dict[str, List[StationRecord]] = defaultdict(list)
        for station in self._by_code.values():
            self._by_line[station.line_code].append(station)
            self._by_name_ar[station.name_ar].append(station)

        for line_stations in self._by_line.values():
            line_stations.sort(key=line_order_key)

        if duplicates:
            self.logger.debug(f"Dropped {duplicates} duplicate station records")
        self.logger.debug(f"Catalog holds {len(self._by_code)} stations on {len(self._by_line)} lines")

    def get(self, code: str) -> Optional[StationRecord]:
        return self._by_code.get(code)

    def codes(self) -> List[str]:
        return list(self._by_code)

    @property
    def stations(self) -> List[StationRecord]:
        return list(self._by_code.values())

    def line_codes(self) -> List[str]:
        """Get the distinct line codes, sorted."""
        return sorted(self._by_line)

    def stations_on_line(self, line_code: str) -> List[StationRecord]:
        """Get the stations of a line in track order."""
        return list(self._by_line.get(line_code, []))

    def stations_named(self, name_ar: str) -> List[StationRecord]:
        """Get every record sharing a localized name (one per line at interchanges)."""
        return list(self._by_name_ar.get(name_ar, []))

    def lines_serving(self, station: StationRecord) -> List[str]:
        """Get the sorted line codes serving the station's location."""
        return sorted({record.line_code for record in self._by_name_ar.get(station.name_ar, [station])})

    def is_interchange(self, station: StationRecord) -> bool:
        return len(self.lines_serving(station)) > 1

    def search(self, text: str = "", line_code: Optional[str] = None) -> List[StationRecord]:
        """
        Search stations by name.

        Matching is a case-insensitive substring test against both the
        primary and the localized name.

        Args:
            text: Text to look for; empty text matches every station
            line_code: Restrict results to one line

        Returns:
            Matching stations sorted by sequence, then code
        """
        candidates = self.stations if line_code is None else self.stations_on_line(line_code)

        needle = text.strip().casefold()
        if needle:
            candidates = [
                station for station in candidates
                if needle in station.name.casefold() or needle in station.name_ar.casefold()
            ]

        return sorted(candidates, key=line_order_key)

    def station_numbers(self, start: int = STATION_NUMBER_START) -> Dict[str, int]:
        """
        Number the stations of each line in track order.

        Returns:
            Mapping of station code to its display number
        """
        numbering: Dict[str, int] = {}
        for line_stations in self._by_line.values():
            for index, station in enumerate(line_stations):
                numbering[station.code] = start + index
        return numbering

    def nearest_station(self, point: GeoPoint) -> Optional[StationRecord]:
        """Get the station closest to point (first one on ties), None if empty."""
        nearest: Optional[StationRecord] = None
        best_distance = float("inf")
        for station in self._by_code.values():
            distance = haversine_distance_m(point, station.location)
            if distance < best_distance:
                best_distance = distance
                nearest = station
        return nearest

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._by_code)

    def __iter__(self) -> Iterator[StationRecord]:
        return iter(self._by_code.values())


class FavoriteStations:
    """Station codes the user starred during this session."""

    def __init__(self, codes: Iterable[str] = ()):
        self._codes: Set[str] = set(codes)

    def add(self, code: str) -> None:
        self._codes.add(code)

    def remove(self, code: str) -> None:
        self._codes.discard(code)

    def toggle(self, code: str) -> bool:
        """
        Flip the favorite state of a station.

        Returns:
            True if the station is a favorite after the call
        """
        if code in self._codes:
            self._codes.discard(code)
            return False
        self._codes.add(code)
        return True

    def clear(self) -> None:
        self._codes.clear()

    def stations(self, catalog: StationCatalog) -> List[StationRecord]:
        """Get favorite stations present in the catalog, in catalog order."""
        return [station for station in catalog if station.code in self._codes]

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __len__(self) -> int:
        return len(self._codes)
