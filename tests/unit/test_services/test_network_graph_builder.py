"""
Unit tests for the station graph builder.
"""

import random
from unittest.mock import Mock

import pytest

from darbk.core.interfaces.i_data_repository import IDataRepository
from darbk.core.models.graph import MetroGraph
from darbk.core.services.network_graph_builder import NetworkGraphBuilder, build_graph


class TestBuildGraph:
    """Test build_graph adjacency rules."""

    def test_single_line_chain(self, abc_stations):
        """Test stations on one line are chained in sequence order."""
        graph = build_graph(abc_stations)

        assert graph.neighbors("A") == frozenset({"B"})
        assert graph.neighbors("B") == frozenset({"A", "C"})
        assert graph.neighbors("C") == frozenset({"B"})

    def test_interchange_links_same_named_stations(self, interchange_stations):
        """Test stations sharing a localized name are connected."""
        graph = build_graph(interchange_stations)

        assert graph.neighbors("B") == frozenset({"A", "C", "D"})
        assert graph.neighbors("D") == frozenset({"B"})

    def test_graph_is_symmetric(self, network_stations):
        """Test every edge is registered in both directions."""
        graph = build_graph(network_stations)

        assert graph.is_symmetric()
        for code in graph:
            assert code not in graph.neighbors(code)

    def test_chain_edge_count(self, station_factory):
        """Test a line of N uniquely named stations yields N-1 edges."""
        stations = [station_factory(f"X{i}", sequence=i, name_ar=f"اسم {i}") for i in range(8)]

        graph = build_graph(stations)

        assert graph.edge_count == 7

    def test_input_order_does_not_matter(self, network_stations):
        """Test shuffled input produces the same graph."""
        shuffled = list(network_stations)
        random.Random(7).shuffle(shuffled)

        assert build_graph(shuffled).adjacency == build_graph(network_stations).adjacency

    def test_sequence_ties_broken_by_code(self, station_factory):
        """Test stations with equal sequence numbers are ordered by code."""
        stations = [
            station_factory("Z", sequence=1, name_ar="ز"),
            station_factory("M", sequence=1, name_ar="م"),
            station_factory("A", sequence=0, name_ar="أ"),
        ]

        graph = build_graph(stations)

        assert graph.edges() == [("A", "M"), ("M", "Z")]

    def test_three_way_interchange_is_complete(self, station_factory):
        """Test three same-named stations on three lines are all connected pairwise."""
        stations = [
            station_factory("L1", "Line1", name_ar="قصر الحكم"),
            station_factory("L2", "Line2", name_ar="قصر الحكم"),
            station_factory("L3", "Line3", name_ar="قصر الحكم"),
        ]

        graph = build_graph(stations)

        assert graph.edges() == [("L1", "L2"), ("L1", "L3"), ("L2", "L3")]

    def test_build_is_idempotent(self, network_stations):
        """Test rebuilding from the same input gives an equal graph."""
        assert build_graph(network_stations).adjacency == build_graph(network_stations).adjacency

    def test_empty_input(self):
        """Test no stations gives an empty graph."""
        graph = build_graph([])

        assert graph.is_empty
        assert graph.edges() == []

    def test_duplicate_codes_first_wins(self, station_factory):
        """Test a repeated code is collapsed to its first record."""
        stations = [
            station_factory("A", sequence=0, name_ar="أ"),
            station_factory("B", sequence=1, name_ar="ب"),
            station_factory("A", "Line2", sequence=5, name_ar="ب"),
        ]

        graph = build_graph(stations)

        assert len(graph) == 2
        assert graph.station("A").line_code == "Line1"
        assert graph.edges() == [("A", "B")]

    def test_isolated_station_is_a_node(self, station_factory):
        """Test a lone station still appears with no neighbors."""
        graph = build_graph([station_factory("SOLO", name_ar="وحيدة")])

        assert "SOLO" in graph
        assert graph.neighbors("SOLO") == frozenset()

    def test_disjoint_lines_stay_apart(self, disjoint_stations):
        """Test lines without shared names are separate components."""
        graph = build_graph(disjoint_stations)

        assert graph.edges() == [("L1A", "L1B"), ("L2A", "L2B")]


class TestNetworkGraphBuilder:
    """Test NetworkGraphBuilder caching."""

    @pytest.fixture
    def mock_repository(self, network_stations):
        """Provide a repository returning the two-line network."""
        repository = Mock(spec=IDataRepository)
        repository.load_stations.return_value = network_stations
        return repository

    def test_builds_once(self, mock_repository):
        """Test the graph is cached after the first build."""
        builder = NetworkGraphBuilder(mock_repository)

        assert builder.get_network_graph() is None
        first = builder.build_network_graph()
        second = builder.build_network_graph()

        assert isinstance(first, MetroGraph)
        assert first is second
        mock_repository.load_stations.assert_called_once()

    def test_clear_cache(self, mock_repository):
        """Test clearing the cache forces a rebuild."""
        builder = NetworkGraphBuilder(mock_repository)
        builder.build_network_graph()

        builder.clear_cache()

        assert builder.get_network_graph() is None
        builder.build_network_graph()
        assert mock_repository.load_stations.call_count == 2
