"""
Global pytest configuration and fixtures.
"""

import json

import pytest

from darbk.core.models.metro_line import MetroLine
from darbk.core.models.station import GeoPoint, StationRecord


def _make_station(code, line_code="Line1", sequence=0, lat=24.7, lon=46.6,
                  name=None, name_ar=None, line_name=None):
    return StationRecord(
        code=code,
        name=name or f"Station {code}",
        name_ar=name_ar or f"محطة {code}",
        line_code=line_code,
        line_name=line_name or f"{line_code} Name",
        sequence=sequence,
        location=GeoPoint(latitude=lat, longitude=lon),
    )


@pytest.fixture
def station_factory():
    """Provide a factory building StationRecord objects with sensible defaults."""
    return _make_station


@pytest.fixture
def abc_stations():
    """Three stations on one line, no interchanges."""
    return [
        _make_station("A", "Line1", 0, 24.700, 46.600, name_ar="أ"),
        _make_station("B", "Line1", 1, 24.710, 46.610, name_ar="ب"),
        _make_station("C", "Line1", 2, 24.720, 46.620, name_ar="ج"),
    ]


@pytest.fixture
def interchange_stations(abc_stations):
    """The A-B-C line plus D on another line sharing B's localized name."""
    return abc_stations + [
        _make_station("D", "Line2", 0, 24.7101, 46.6101, name_ar="ب"),
    ]


@pytest.fixture
def disjoint_stations():
    """Two lines that share no station name."""
    return [
        _make_station("L1A", "Line1", 0, 24.70, 46.60),
        _make_station("L1B", "Line1", 1, 24.71, 46.60),
        _make_station("L2A", "Line2", 0, 24.80, 46.70),
        _make_station("L2B", "Line2", 1, 24.81, 46.70),
    ]


@pytest.fixture
def network_stations():
    """A small two-line network with one interchange ("المركز")."""
    return [
        _make_station("S1", "Line1", 1, 24.60, 46.70, name="First", name_ar="الأولى", line_name="Blue Line"),
        _make_station("S2", "Line1", 2, 24.62, 46.70, name="Center", name_ar="المركز", line_name="Blue Line"),
        _make_station("S3", "Line1", 3, 24.64, 46.70, name="Third", name_ar="الثالثة", line_name="Blue Line"),
        _make_station("S4", "Line1", 4, 24.66, 46.70, name="Fourth", name_ar="الرابعة", line_name="Blue Line"),
        _make_station("T1", "Line2", 1, 24.62, 46.66, name="West", name_ar="الغربية", line_name="Red Line"),
        _make_station("T2", "Line2", 2, 24.6201, 46.7001, name="Center", name_ar="المركز", line_name="Red Line"),
        _make_station("T3", "Line2", 3, 24.62, 46.74, name="East", name_ar="الشرقية", line_name="Red Line"),
    ]


@pytest.fixture
def network_lines():
    """Track geometry for the two-line network, denser than the stations."""
    blue = MetroLine(
        name="Blue Line",
        points=tuple(GeoPoint(latitude=round(24.595 + 0.005 * i, 3), longitude=46.701) for i in range(15)),
        name_ar="المسار الأزرق",
        color="#00ade5",
    )
    red = MetroLine(
        name="Red Line",
        points=tuple(GeoPoint(latitude=24.621, longitude=round(46.655 + 0.01 * i, 3)) for i in range(10)),
        name_ar="المسار الأحمر",
        color="#f0493a",
    )
    return [blue, red]


@pytest.fixture
def stations_payload():
    """Provide a stations payload in the open data format."""
    return {
        "total_count": 6,
        "results": [
            {
                "metrostationcode": "S2",
                "metrostationname": "Center",
                "metrostationnamear": "المركز",
                "metroline": "Line1",
                "metrolinename": "Blue Line",
                "stationseq": 2,
                "geo_point_2d": {"lon": 46.70, "lat": 24.62},
            },
            {
                "metrostationcode": "S1",
                "metrostationname": "First",
                "metrostationnamear": "الأولى",
                "metroline": "Line1",
                "metrolinename": "Blue Line",
                "stationseq": 1,
                "geo_point_2d": {"lon": 46.70, "lat": 24.60},
            },
            {
                "metrostationcode": "S1",
                "metrostationname": "First (duplicate)",
                "metrostationnamear": "الأولى",
                "metroline": "Line1",
                "metrolinename": "Blue Line",
                "stationseq": 1,
                "geo_point_2d": {"lon": 46.70, "lat": 24.60},
            },
            {
                "metrostationcode": "S3",
                "metroline": "Line1",
                "metrolinename": "Blue Line",
                "stationseq": "not a number",
                "geo_point_2d": {"lon": 46.70, "lat": 24.64},
            },
            {
                "metrostationcode": "T2",
                "metrostationname": "Center",
                "metrostationnamear": "المركز",
                "metroline": "Line2",
                "metrolinename": "Red Line",
                "stationseq": 2,
                "geo_point_2d": {"lon": 46.7001, "lat": 24.6201},
            },
            {
                "metrostationname": "No code",
                "geo_point_2d": {"lon": 46.71, "lat": 24.61},
            },
        ],
    }


@pytest.fixture
def lines_payload():
    """Provide a lines GeoJSON payload with [lon, lat] positions."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[46.701, 24.595], [46.701, 24.61], [46.701, 24.63], [46.701, 24.65]],
                },
                "properties": {
                    "metrolinename": "Blue Line",
                    "metrolinenamear": "المسار الأزرق",
                    "m_linecolorcode": "#00ade5",
                },
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "MultiLineString",
                    "coordinates": [
                        [[46.66, 24.621], [46.68, 24.621]],
                        [[46.70, 24.621], [46.74, 24.621]],
                    ],
                },
                "properties": {
                    "metrolinename": "Red Line",
                    "metrolinenamear": "المسار الأحمر",
                    "m_linecolorcode": "#f0493a",
                },
            },
        ],
    }


@pytest.fixture
def data_dir(tmp_path, stations_payload, lines_payload):
    """Provide a data directory holding both payload files."""
    (tmp_path / "metro-stations.json").write_text(
        json.dumps(stations_payload, ensure_ascii=False), encoding="utf-8"
    )
    (tmp_path / "metro-lines.geojson").write_text(
        json.dumps(lines_payload, ensure_ascii=False), encoding="utf-8"
    )
    return tmp_path
