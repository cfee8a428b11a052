"""
Core Package

Models and interfaces for the metro routing library. Services live in
``darbk.core.services``.
"""

# Import interfaces
from .interfaces import IDataRepository, IPositionSource, INotifier

# Import models
from .models import (
    GeoPoint, StationRecord, MetroLine, MetroGraph, RoutePlan, UpcomingStop,
    line_color, line_name_ar
)

__all__ = [
    # Interfaces
    'IDataRepository',
    'IPositionSource',
    'INotifier',

    # Models
    'GeoPoint',
    'StationRecord',
    'MetroLine',
    'MetroGraph',
    'RoutePlan',
    'UpcomingStop',
    'line_color',
    'line_name_ar'
]
