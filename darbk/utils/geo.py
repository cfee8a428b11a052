"""
Geographic helpers.

Great-circle distances, nearest-point lookup on a polyline and the map
region that frames a set of points.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.models.station import GeoPoint

# Mean earth radius in metres
EARTH_RADIUS_M = 6371000.0

# Padding applied to a region's extent so edge points are not flush with the border
REGION_PADDING = 1.2


@dataclass(frozen=True)
class MapRegion:
    """Center and extent (in degrees) of a map viewport."""

    center: GeoPoint
    latitude_delta: float
    longitude_delta: float


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """
    Calculate the great-circle distance between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        float: Distance in metres
    """
    lat1, lon1, lat2, lon2 = map(math.radians, [a.latitude, a.longitude, b.latitude, b.longitude])

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h a hair above 1 for antipodal points
    c = 2 * math.asin(math.sqrt(min(1.0, h)))

    return EARTH_RADIUS_M * c


def closest_index(points: Sequence[GeoPoint], target: GeoPoint) -> Optional[int]:
    """
    Find the index of the point closest to target.

    Linear scan; ties resolve to the first occurrence.

    Returns:
        Index of the closest point, or None for an empty sequence
    """
    best_index: Optional[int] = None
    best_distance = math.inf

    for index, point in enumerate(points):
        distance = haversine_distance_m(target, point)
        if distance < best_distance:
            best_distance = distance
            best_index = index

    return best_index


def map_region(points: Sequence[GeoPoint]) -> Optional[MapRegion]:
    """Get the padded region framing all points, or None when there are none."""
    if not points:
        return None

    latitudes = [point.latitude for point in points]
    longitudes = [point.longitude for point in points]

    center = GeoPoint(
        latitude=sum(latitudes) / len(latitudes),
        longitude=sum(longitudes) / len(longitudes),
    )
    return MapRegion(
        center=center,
        latitude_delta=(max(latitudes) - min(latitudes)) * REGION_PADDING,
        longitude_delta=(max(longitudes) - min(longitudes)) * REGION_PADDING,
    )
