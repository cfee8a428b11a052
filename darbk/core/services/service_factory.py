"""
Service Factory

Factory for creating and wiring the routing services from configuration.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ...managers.config_manager import ConfigData
from ..interfaces.i_data_repository import IDataRepository
from ..interfaces.i_notifier import INotifier
from ..interfaces.i_position_source import IPositionSource
from .json_data_repository import JsonDataRepository
from .network_graph_builder import NetworkGraphBuilder
from .route_service import RouteService
from .trip_tracker import TripTracker


class ServiceFactory:
    """Factory for creating and managing service instances for one session."""

    def __init__(self, config: Optional[ConfigData] = None,
                 data_directory: Optional[Union[str, Path]] = None):
        """
        Initialize the service factory.

        Args:
            config: Configuration; defaults are used when omitted
            data_directory: Overrides the configured data directory
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or ConfigData()
        self.data_directory = Path(data_directory or self.config.data.data_directory)

        self._data_repository: Optional[IDataRepository] = None
        self._graph_builder: Optional[NetworkGraphBuilder] = None
        self._route_service: Optional[RouteService] = None

        self.logger.info(f"Initialized ServiceFactory with data directory: {self.data_directory}")

    def get_data_repository(self) -> IDataRepository:
        """Get or create the data repository instance."""
        if self._data_repository is None:
            self._data_repository = JsonDataRepository(
                self.data_directory,
                stations_file=self.config.data.stations_file,
                lines_file=self.config.data.lines_file,
            )
            self.logger.info("Created JsonDataRepository instance")

        return self._data_repository

    def get_graph_builder(self) -> NetworkGraphBuilder:
        """Get or create the graph builder caching the repository's station graph."""
        if self._graph_builder is None:
            self._graph_builder = NetworkGraphBuilder(self.get_data_repository())
            self.logger.info("Created NetworkGraphBuilder instance")

        return self._graph_builder

    def get_route_service(self) -> RouteService:
        """Get or create the route service, loaded from the repository."""
        if self._route_service is None:
            repository = self.get_data_repository()
            self._route_service = RouteService(
                repository.load_stations(),
                repository.load_lines(),
                upcoming_stops_limit=self.config.tracking.upcoming_stops_limit,
                station_number_start=self.config.tracking.station_number_start,
                graph=self.get_graph_builder().build_network_graph(),
            )
            self.logger.info("Created RouteService instance")

        return self._route_service

    def create_trip_tracker(self, position_source: Optional[IPositionSource] = None,
                            notifier: Optional[INotifier] = None) -> TripTracker:
        """Create a tracker for the session's route with explicit collaborators."""
        return TripTracker(self.get_route_service(), position_source, notifier)

    async def load_from_api(self) -> RouteService:
        """Replace the route service snapshot with data fetched from the open data portal."""
        from ...api.open_data_client import OpenDataClient

        async with OpenDataClient(self.config) as client:
            stations = await client.fetch_stations()
            lines = await client.fetch_lines()

        route_service = self.get_route_service()
        route_service.load(stations, lines)
        return route_service

    def refresh_all_services(self) -> bool:
        """Reload the repository and rebuild the route service snapshot."""
        repository = self.get_data_repository()
        if not repository.refresh_data():
            self.logger.error("Failed to refresh data repository")
            return False

        graph_builder = self.get_graph_builder()
        graph_builder.clear_cache()
        if self._route_service is not None:
            self._route_service.load(
                repository.load_stations(),
                repository.load_lines(),
                graph=graph_builder.build_network_graph(),
            )

        self.logger.info("All services refreshed successfully")
        return True
