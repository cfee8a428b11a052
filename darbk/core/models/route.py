"""
Route Model

Data models for a computed route between two stations.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .station import StationRecord


@dataclass(frozen=True)
class UpcomingStop:
    """A stop shown in the upcoming-stops preview of a route."""

    name_ar: str
    line_code: str
    line_codes: Tuple[str, ...]

    @property
    def is_interchange(self) -> bool:
        """Check if more than one line serves this stop."""
        return len(self.line_codes) > 1


@dataclass(frozen=True)
class RoutePlan:
    """
    Ordered stations walked from origin to destination.

    A plan always holds at least two stations; shorter paths mean
    "no route" and are never turned into a plan.
    """

    stations: Tuple[StationRecord, ...]

    def __post_init__(self):
        """Validate route data."""
        if not isinstance(self.stations, tuple):
            object.__setattr__(self, 'stations', tuple(self.stations))

        if len(self.stations) < 2:
            raise ValueError("Route must have at least two stations")

    @property
    def origin(self) -> StationRecord:
        return self.stations[0]

    @property
    def destination(self) -> StationRecord:
        return self.stations[-1]

    @property
    def codes(self) -> List[str]:
        return [station.code for station in self.stations]

    @property
    def stops_count(self) -> int:
        """Number of hops between origin and destination."""
        return len(self.stations) - 1

    @property
    def line_codes(self) -> List[str]:
        """Distinct line codes in the order the route uses them."""
        seen: List[str] = []
        for station in self.stations:
            if station.line_code not in seen:
                seen.append(station.line_code)
        return seen

    @property
    def changes(self) -> int:
        """Number of times the route switches line code between consecutive stations."""
        return sum(
            1 for previous, current in zip(self.stations, self.stations[1:])
            if previous.line_code != current.line_code
        )

    @property
    def is_single_line(self) -> bool:
        return len(self.line_codes) == 1

    def index_of(self, code: str) -> Optional[int]:
        """Get the position of a station code along the route."""
        for index, station in enumerate(self.stations):
            if station.code == code:
                return index
        return None

    def region(self):
        """Get the map region framing the whole route."""
        from ...utils.geo import map_region
        return map_region([station.location for station in self.stations])

    def to_dict(self) -> Dict[str, Any]:
        """Convert route to dictionary representation."""
        return {
            "origin": self.origin.code,
            "destination": self.destination.code,
            "codes": self.codes,
            "stops_count": self.stops_count,
            "line_codes": self.line_codes,
            "changes": self.changes,
        }

    def __len__(self) -> int:
        return len(self.stations)

    def __iter__(self) -> Iterator[StationRecord]:
        return iter(self.stations)

    def __str__(self) -> str:
        return " -> ".join(self.codes)
