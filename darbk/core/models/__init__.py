"""
Core Models Package

Immutable data models for stations, line geometry, the station graph and routes.
"""

from .station import GeoPoint, StationRecord
from .metro_line import MetroLine, line_color, line_name_ar
from .graph import MetroGraph
from .route import RoutePlan, UpcomingStop

__all__ = [
    'GeoPoint',
    'StationRecord',
    'MetroLine',
    'line_color',
    'line_name_ar',
    'MetroGraph',
    'RoutePlan',
    'UpcomingStop'
]
