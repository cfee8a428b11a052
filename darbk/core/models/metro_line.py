"""
Metro Line Model

Line geometry (ordered track polyline) and the fixed line palette.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from .station import GeoPoint


DEFAULT_LINE_COLOR = "#8e8e93"
UNKNOWN_LINE_NAME_AR = "مسار غير معروف"

LINE_COLORS: Dict[str, str] = {
    "Line1": "#00ade5",
    "Line2": "#f0493a",
    "Line3": "#f68d39",
    "Line4": "#ffd105",
    "Line5": "#43b649",
    "Line6": "#984c9d",
}

LINE_NAMES_AR: Dict[str, str] = {
    "Line1": "المسار الأزرق",
    "Line2": "المسار الأحمر",
    "Line3": "المسار البرتقالي",
    "Line4": "المسار الأصفر",
    "Line5": "المسار الأخضر",
    "Line6": "المسار البنفسجي",
}


def line_color(line_code: str) -> str:
    """Get the hex color used for a line code, gray for unknown lines."""
    return LINE_COLORS.get(line_code, DEFAULT_LINE_COLOR)


def line_name_ar(line_code: str) -> str:
    """Get the Arabic display name for a line code."""
    return LINE_NAMES_AR.get(line_code, UNKNOWN_LINE_NAME_AR)


@dataclass(frozen=True)
class MetroLine:
    """
    Track geometry for one metro line.

    Identified by its display name (the same string stations carry as
    ``line_name``). Points are stored in (latitude, longitude) order;
    GeoJSON's [lon, lat] order is normalized by the loader.
    """

    name: str
    points: Tuple[GeoPoint, ...]
    name_ar: Optional[str] = None
    color: Optional[str] = None

    def __post_init__(self):
        """Validate line data."""
        if not self.name or not self.name.strip():
            raise ValueError("Line name cannot be empty")
        if not isinstance(self.points, tuple):
            object.__setattr__(self, 'points', tuple(self.points))

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def to_dict(self) -> Dict[str, Any]:
        """Convert line to dictionary representation."""
        return {
            "name": self.name,
            "name_ar": self.name_ar,
            "color": self.color,
            "points": [point.to_dict() for point in self.points],
        }

    def __str__(self) -> str:
        return f"{self.name} ({self.point_count} points)"

    def __len__(self) -> int:
        return self.point_count

    def __iter__(self) -> Iterator[GeoPoint]:
        return iter(self.points)
