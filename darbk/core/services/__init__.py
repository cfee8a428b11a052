"""
Core Services Package

Routing algorithms and the services built on them.
"""

from .station_catalog import StationCatalog, FavoriteStations
from .network_graph_builder import NetworkGraphBuilder, build_graph
from .pathfinding_algorithm import shortest_path, route_stations
from .route_projector import RouteProjector, project
from .progress_estimator import progress, nearest_station_index
from .route_service import RouteService
from .trip_tracker import TripTracker, TripStatus
from .position_sources import SimulatedPositionSource, LoggingNotifier
from .json_data_repository import JsonDataRepository, DataLoadError
from .service_factory import ServiceFactory

__all__ = [
    'StationCatalog',
    'FavoriteStations',
    'NetworkGraphBuilder',
    'build_graph',
    'shortest_path',
    'route_stations',
    'RouteProjector',
    'project',
    'progress',
    'nearest_station_index',
    'RouteService',
    'TripTracker',
    'TripStatus',
    'SimulatedPositionSource',
    'LoggingNotifier',
    'JsonDataRepository',
    'DataLoadError',
    'ServiceFactory'
]
