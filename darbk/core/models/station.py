"""
Station Model

Immutable data models for metro stations and the geographic points they sit on.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple


@dataclass(frozen=True)
class GeoPoint:
    """A WGS84 coordinate in (latitude, longitude) order."""

    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate coordinate ranges."""
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError("Coordinates must be finite numbers")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")

    @classmethod
    def from_lon_lat(cls, pair: Sequence[float]) -> 'GeoPoint':
        """Create a point from a GeoJSON position ([lon, lat, ...])."""
        if len(pair) < 2:
            raise ValueError(f"GeoJSON position needs at least 2 values, got {len(pair)}")
        return cls(latitude=float(pair[1]), longitude=float(pair[0]))

    def as_tuple(self) -> Tuple[float, float]:
        """Return the point as a (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.latitude, "lon": self.longitude}

    def __str__(self) -> str:
        return f"({self.latitude:.6f}, {self.longitude:.6f})"


@dataclass(frozen=True, eq=False)
class StationRecord:
    """
    Immutable record of a single metro station on a single line.

    The station code is the sole identity key: two records with the same
    code compare equal and hash the same even if other fields differ.
    Interchanges appear as several records (one per line) sharing the
    same localized name under distinct codes.
    """

    code: str
    name: str
    name_ar: str
    line_code: str
    line_name: str
    sequence: int
    location: GeoPoint

    def __post_init__(self):
        """Validate station data after initialization."""
        if not self.code or not self.code.strip():
            raise ValueError("Station code cannot be empty")
        if self.sequence < 0:
            raise ValueError(f"Station sequence must be non-negative, got {self.sequence}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StationRecord):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude

    def get_display_name(self, localized: bool = True) -> str:
        """Get the display name, localized (Arabic) by default."""
        return self.name_ar if localized else self.name

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary representation."""
        return {
            "code": self.code,
            "name": self.name,
            "name_ar": self.name_ar,
            "line_code": self.line_code,
            "line_name": self.line_name,
            "sequence": self.sequence,
            "location": self.location.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StationRecord':
        """Create StationRecord from dictionary representation."""
        location = data["location"]
        return cls(
            code=data["code"],
            name=data["name"],
            name_ar=data["name_ar"],
            line_code=data["line_code"],
            line_name=data["line_name"],
            sequence=int(data["sequence"]),
            location=GeoPoint(latitude=location["lat"], longitude=location["lon"]),
        )

    def __str__(self) -> str:
        return f"{self.code} {self.name}"

    def __repr__(self) -> str:
        return (f"StationRecord(code='{self.code}', name='{self.name}', "
                f"line='{self.line_code}', seq={self.sequence})")
