"""
Network Graph Builder

Builds the undirected station graph from line adjacency and interchanges.
"""

import logging
from itertools import combinations
from typing import Dict, Iterable, Optional, Set, Union

from ..interfaces.i_data_repository import IDataRepository
from ..models.graph import MetroGraph
from ..models.station import StationRecord
from .station_catalog import StationCatalog


logger = logging.getLogger(__name__)


def _add_edge(adjacency: Dict[str, Set[str]], a: str, b: str) -> None:
    """Register an undirected edge in both directions."""
    if a == b:
        return
    adjacency[a].add(b)
    adjacency[b].add(a)


def build_graph(stations: Union[StationCatalog, Iterable[StationRecord]]) -> MetroGraph:
    """
    Build the station graph.

    Two kinds of edges are added:

    1. Along each line, stations sorted by sequence number (ties broken by
       code) are chained to their successor.
    2. Stations sharing a localized name are all connected pairwise,
       whether or not the platforms are actually walkable from each other.

    Args:
        stations: A catalog, or raw records (deduplicated by code, first wins)

    Returns:
        MetroGraph: a new snapshot; empty input gives an empty graph
    """
    catalog = stations if isinstance(stations, StationCatalog) else StationCatalog(stations)

    # Every station is a node, isolated ones included
    adjacency: Dict[str, Set[str]] = {station.code: set() for station in catalog}

    # Line adjacency
    line_edges = 0
    for line_code in catalog.line_codes():
        ordered = catalog.stations_on_line(line_code)
        for current, following in zip(ordered, ordered[1:]):
            _add_edge(adjacency, current.code, following.code)
            line_edges += 1

    # Interchanges: a complete subgraph among same-named stations
    interchange_edges = 0
    seen_names: Set[str] = set()
    for station in catalog:
        if station.name_ar in seen_names:
            continue
        seen_names.add(station.name_ar)

        group = catalog.stations_named(station.name_ar)
        if len(group) < 2:
            continue
        for a, b in combinations(group, 2):
            _add_edge(adjacency, a.code, b.code)
            interchange_edges += 1

    graph = MetroGraph(
        adjacency={code: frozenset(neighbors) for code, neighbors in adjacency.items()},
        station_by_code={station.code: station for station in catalog},
    )
    logger.info(f"Built station graph with {len(graph)} stations "
                f"({line_edges} line links, {interchange_edges} interchange links)")
    return graph


class NetworkGraphBuilder:
    """Builds the station graph from a repository and caches the snapshot."""

    def __init__(self, data_repository: IDataRepository):
        """
        Initialize the network graph builder.

        Args:
            data_repository: Data repository for accessing station data
        """
        self.data_repository = data_repository
        self.logger = logging.getLogger(__name__)
        self._network_graph: Optional[MetroGraph] = None

    def build_network_graph(self) -> MetroGraph:
        """Build the graph on first use and return the cached snapshot afterwards."""
        if self._network_graph is not None:
            return self._network_graph

        stations = self.data_repository.load_stations()
        self.logger.info(f"Building station graph from {len(stations)} station records")
        self._network_graph = build_graph(stations)
        return self._network_graph

    def get_network_graph(self) -> Optional[MetroGraph]:
        """Get the cached network graph or None if not built yet."""
        return self._network_graph

    def clear_cache(self) -> None:
        """Discard the cached graph; the next build starts from scratch."""
        self._network_graph = None
        self.logger.info("Network graph cache cleared")
