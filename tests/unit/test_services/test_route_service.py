"""
Unit tests for the route session service.
"""

import pytest

from darbk.core.models.station import GeoPoint
from darbk.core.services.network_graph_builder import build_graph
from darbk.core.services.route_projector import raw_coordinates
from darbk.core.services.route_service import RouteService


@pytest.fixture
def service(network_stations, network_lines):
    return RouteService(network_stations, network_lines)


def _select(service, origin_code, destination_code):
    service.origin = service.catalog.get(origin_code)
    service.destination = service.catalog.get(destination_code)
    return service.update_route()


class TestRouteServiceLoading:
    """Test snapshot loading."""

    def test_initial_snapshot(self, service):
        """Test catalog, graph and projector are built together."""
        assert len(service.catalog) == 7
        assert len(service.graph) == 7
        assert service.projector.line_names == ["Blue Line", "Red Line"]
        assert service.route is None

    def test_prebuilt_graph_is_used(self, network_stations, network_lines):
        """Test a graph built elsewhere is adopted instead of rebuilt."""
        graph = build_graph(network_stations)

        service = RouteService(network_stations, network_lines, upcoming_stops_limit=3, graph=graph)

        assert service.graph is graph
        assert service.upcoming_stops_limit == 3
        assert service.find_route("S1", "T3").codes == ["S1", "S2", "T2", "T3"]

    def test_load_clears_route(self, service, abc_stations):
        """Test reloading replaces the snapshot and drops the current route."""
        _select(service, "S1", "S4")

        service.load(abc_stations)

        assert service.route is None
        assert service.origin is None
        assert service.destination is None
        assert service.catalog.codes() == ["A", "B", "C"]
        assert service.graph.neighbors("B") == frozenset({"A", "C"})


class TestRouteSelection:
    """Test origin and destination selection."""

    def test_find_route(self, service):
        """Test a route across the interchange."""
        route = service.find_route("S1", "T3")

        assert route.codes == ["S1", "S2", "T2", "T3"]
        assert route.changes == 1
        assert service.route is None

    def test_find_route_degenerate(self, service):
        """Test same-station, unknown and unreachable pairs give no route."""
        assert service.find_route("S1", "S1") is None
        assert service.find_route("S1", "nope") is None

    def test_set_destination_with_location(self, service):
        """Test the origin is the station nearest the user."""
        route = service.set_destination(service.catalog.get("T3"), GeoPoint(24.601, 46.70))

        assert service.origin.code == "S1"
        assert route.codes == ["S1", "S2", "T2", "T3"]
        assert service.route is route

    def test_set_destination_without_location(self, service):
        """Test without a location the origin equals the destination and the selection clears."""
        assert service.set_destination(service.catalog.get("T3")) is None
        assert service.origin is None
        assert service.destination is None
        assert service.route is None

    def test_set_origin(self, service):
        """Test changing the origin recomputes the route."""
        service.set_destination(service.catalog.get("S4"), GeoPoint(24.601, 46.70))

        route = service.set_origin(service.catalog.get("T1"))

        assert route.codes == ["T1", "T2", "S2", "S3", "S4"]

    def test_unreachable_clears_selection(self, disjoint_stations):
        """Test an unreachable destination clears origin, destination and route."""
        service = RouteService(disjoint_stations)

        assert _select(service, "L1A", "L2B") is None
        assert service.origin is None
        assert service.destination is None

    def test_update_without_selection(self, service):
        """Test nothing is routed until both ends are chosen."""
        service.origin = service.catalog.get("S1")

        assert service.update_route() is None


class TestRouteDerivedValues:
    """Test values derived from the current route."""

    def test_polyline_single_line(self, service, network_lines):
        """Test a single-line route is snapped to its track."""
        _select(service, "S1", "S4")

        assert service.route_polyline() == list(network_lines[0].points[1:14])

    def test_polyline_multi_line(self, service):
        """Test a multi-line route is drawn through its stations."""
        _select(service, "S1", "T3")

        assert service.route_polyline() == raw_coordinates(service.route_stations)

    def test_polyline_without_route(self, service):
        """Test no route draws nothing."""
        assert service.route_polyline() == []

    def test_progress(self, service):
        """Test progress at the interchange."""
        _select(service, "S1", "T3")

        assert service.route_progress(service.catalog.get("S2").location) == pytest.approx(1 / 3)
        assert service.route_progress(None) == 0.0

    @pytest.mark.parametrize("value,expected", [(None, 3), (0.0, 3), (1 / 3, 2), (2 / 3, 1), (1.0, 0), (2.0, 0), (-1.0, 3)])
    def test_remaining_stops(self, service, value, expected):
        """Test remaining stops for progress values, clamped to [0, 1]."""
        _select(service, "S1", "T3")

        assert service.remaining_stops(value) == expected

    def test_remaining_stops_on_long_route(self, station_factory):
        """Test progress from every station of a 23-station line maps back to the exact stops left."""
        stations = [
            station_factory(f"L{i:02d}", sequence=i, lat=24.5 + 0.01 * i, lon=46.7, name_ar=f"محطة {i}")
            for i in range(23)
        ]
        service = RouteService(stations)
        _select(service, "L00", "L22")

        for index, station in enumerate(stations):
            value = service.route_progress(station.location)
            assert service.remaining_stops(value) == 22 - index

        assert service.remaining_stops(service.route_progress(stations[15].location)) == 7

    def test_remaining_stops_without_route(self, service):
        """Test no route has no stops left."""
        assert service.remaining_stops(0.5) == 0

    def test_station_numbers_start(self, network_stations):
        """Test display numbering follows the configured start."""
        service = RouteService(network_stations, station_number_start=1)

        numbers = service.station_numbers()

        assert numbers["S1"] == 1
        assert numbers["S4"] == 4
        assert numbers["T2"] == 2
        assert RouteService(network_stations).station_numbers()["S1"] == 11

    def test_next_station(self, service):
        """Test the station after the origin."""
        assert service.next_station() is None
        _select(service, "S1", "T3")

        assert service.next_station().code == "S2"

    def test_current_line_code(self, service):
        """Test the line in use changes after the interchange."""
        assert service.current_line_code(0.5) is None
        _select(service, "S1", "T3")

        assert service.current_line_code(0.0) == "Line1"
        assert service.current_line_code(1.0) == "Line2"

    def test_upcoming_stops(self, service):
        """Test the upcoming stop preview marks interchanges."""
        _select(service, "S1", "T3")

        stops = service.upcoming_stops()

        assert [stop.name_ar for stop in stops] == ["الأولى", "المركز", "المركز", "الشرقية"]
        assert not stops[0].is_interchange
        assert stops[1].line_codes == ("Line1", "Line2")
        assert stops[1].is_interchange
        assert len(service.upcoming_stops(limit=2)) == 2

    def test_upcoming_stops_default_limit(self, network_stations):
        """Test the configured limit caps the preview."""
        service = RouteService(network_stations, upcoming_stops_limit=2)
        _select(service, "S1", "S4")

        assert len(service.upcoming_stops()) == 2
