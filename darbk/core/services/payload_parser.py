"""
Payload Parser

Two-stage decoding of the station and line payloads. Raw records are first
validated into permissive pydantic models where every field is optional and
an invalid field degrades to None; defaults are then substituted while
building the immutable core models. One bad record never fails a load.
"""

import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..models.metro_line import MetroLine
from ..models.station import GeoPoint, StationRecord


logger = logging.getLogger(__name__)

DEFAULT_NAME = "Unknown"
DEFAULT_NAME_AR = "غير معروف"
DEFAULT_LINE = "Unknown"
DEFAULT_SEQUENCE = 0


class _LenientModel(BaseModel):
    """Base for raw payload models: unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class RawGeoPoint(_LenientModel):
    lat: Optional[float] = None
    lon: Optional[float] = None


class RawStation(_LenientModel):
    """A station record exactly as it appears in the open data payload."""

    metrostationcode: Optional[str] = None
    metrostationname: Optional[str] = None
    metrostationnamear: Optional[str] = None
    metroline: Optional[str] = None
    metrolinename: Optional[str] = None
    stationseq: Optional[int] = None
    geo_point_2d: Optional[RawGeoPoint] = None

    @field_validator("*", mode="wrap")
    @classmethod
    def _invalid_to_none(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            return None


class RawLineProperties(_LenientModel):
    metrolinename: Optional[str] = None
    metrolinenamear: Optional[str] = None
    m_linecolorcode: Optional[str] = None

    @field_validator("*", mode="wrap")
    @classmethod
    def _invalid_to_none(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            return None


class RawGeometry(_LenientModel):
    type: Optional[str] = None
    coordinates: Any = None


class RawLineFeature(_LenientModel):
    properties: RawLineProperties = RawLineProperties()
    geometry: Optional[RawGeometry] = None


def _text_or_default(value: Optional[str], default: str) -> str:
    if value is None or not value.strip():
        return default
    return value


def station_from_raw(raw: RawStation) -> Optional[StationRecord]:
    """
    Build a StationRecord from a raw record, substituting defaults.

    Returns:
        The record, or None when the code or the location is unusable
    """
    code = (raw.metrostationcode or "").strip()
    if not code:
        logger.warning("Skipping station record without metrostationcode")
        return None

    geo = raw.geo_point_2d
    if geo is None or geo.lat is None or geo.lon is None:
        logger.warning(f"Skipping station '{code}': missing geo_point_2d")
        return None

    try:
        location = GeoPoint(latitude=geo.lat, longitude=geo.lon)
    except ValueError as e:
        logger.warning(f"Skipping station '{code}': {e}")
        return None

    sequence = raw.stationseq
    if sequence is None or sequence < 0:
        sequence = DEFAULT_SEQUENCE

    return StationRecord(
        code=code,
        name=_text_or_default(raw.metrostationname, DEFAULT_NAME),
        name_ar=_text_or_default(raw.metrostationnamear, DEFAULT_NAME_AR),
        line_code=_text_or_default(raw.metroline, DEFAULT_LINE),
        line_name=_text_or_default(raw.metrolinename, DEFAULT_LINE),
        sequence=sequence,
        location=location,
    )


def parse_stations_payload(payload: Any) -> List[StationRecord]:
    """
    Parse a stations payload of the form ``{"results": [...]}``.

    Args:
        payload: Decoded JSON document

    Returns:
        Station records in payload order (codes may repeat)
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("results"), list):
        logger.warning("Stations payload has no 'results' array")
        return []

    stations = []
    for index, item in enumerate(payload["results"]):
        if not isinstance(item, dict):
            logger.warning(f"Skipping station entry {index}: not an object")
            continue
        station = station_from_raw(RawStation.model_validate(item))
        if station is not None:
            stations.append(station)

    logger.info(f"Parsed {len(stations)} of {len(payload['results'])} station records")
    return stations


def _parse_positions(positions: Any) -> List[GeoPoint]:
    """Convert a list of GeoJSON [lon, lat] positions, raising ValueError if malformed."""
    if not isinstance(positions, list):
        raise ValueError("coordinates must be a list")
    points = []
    for position in positions:
        if not isinstance(position, (list, tuple)):
            raise ValueError(f"position must be a list, got {type(position).__name__}")
        points.append(GeoPoint.from_lon_lat(position))
    return points


def line_from_feature(feature: RawLineFeature) -> Optional[MetroLine]:
    """Build a MetroLine from a GeoJSON feature, or None when it is unusable."""
    name = (feature.properties.metrolinename or "").strip()
    if not name:
        logger.warning("Skipping line feature without metrolinename")
        return None

    geometry = feature.geometry
    if geometry is None:
        logger.warning(f"Skipping line '{name}': missing geometry")
        return None

    try:
        if geometry.type == "MultiLineString":
            points = []
            for part in geometry.coordinates or []:
                points.extend(_parse_positions(part))
        else:
            points = _parse_positions(geometry.coordinates)
    except (TypeError, ValueError) as e:
        logger.warning(f"Skipping line '{name}': malformed coordinates ({e})")
        return None

    return MetroLine(
        name=name,
        points=tuple(points),
        name_ar=feature.properties.metrolinenamear,
        color=feature.properties.m_linecolorcode,
    )


def parse_lines_payload(payload: Any) -> List[MetroLine]:
    """
    Parse a GeoJSON FeatureCollection of line geometries.

    Positions arrive as [lon, lat] and are normalized to (lat, lon) here.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("features"), list):
        logger.warning("Lines payload has no 'features' array")
        return []

    lines = []
    for index, item in enumerate(payload["features"]):
        if not isinstance(item, dict):
            logger.warning(f"Skipping line feature {index}: not an object")
            continue
        try:
            feature = RawLineFeature.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Skipping line feature {index}: {e.error_count()} validation errors")
            continue
        line = line_from_feature(feature)
        if line is not None:
            lines.append(line)

    logger.info(f"Parsed {len(lines)} line geometries")
    return lines
