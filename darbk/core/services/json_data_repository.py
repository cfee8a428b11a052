"""
JSON Data Repository Implementation

Repository implementation for loading the station catalog and line
geometry from local JSON / GeoJSON files.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Union

from ..interfaces.i_data_repository import IDataRepository
from ..models.metro_line import MetroLine
from ..models.station import StationRecord
from .payload_parser import parse_lines_payload, parse_stations_payload


DEFAULT_STATIONS_FILE = "metro-stations.json"
DEFAULT_LINES_FILE = "metro-lines.geojson"


class DataLoadError(Exception):
    """Exception raised when a data file exists but cannot be decoded."""

    pass


class JsonDataRepository(IDataRepository):
    """Repository implementation for file-based metro data."""

    def __init__(self, data_directory: Optional[Union[str, Path]] = None,
                 stations_file: str = DEFAULT_STATIONS_FILE,
                 lines_file: str = DEFAULT_LINES_FILE):
        """
        Initialize the JSON data repository.

        Args:
            data_directory: Directory holding the data files, defaults to ./data
            stations_file: File name of the stations payload
            lines_file: File name of the lines GeoJSON
        """
        self.data_directory = Path(data_directory) if data_directory is not None else Path("data")
        self.stations_path = self.data_directory / stations_file
        self.lines_path = self.data_directory / lines_file
        self.logger = logging.getLogger(__name__)

        # Cache for loaded data
        self._stations_cache: Optional[List[StationRecord]] = None
        self._lines_cache: Optional[List[MetroLine]] = None
        self._last_loaded: Optional[datetime] = None

        self.logger.info(f"Initialized JsonDataRepository with data directory: {self.data_directory}")

    def _read_json(self, path: Path) -> Optional[Any]:
        """
        Read and decode a JSON file.

        Returns:
            The decoded document, or None if the file does not exist

        Raises:
            DataLoadError: If the file cannot be read or is not valid JSON
        """
        if not path.exists():
            self.logger.error(f"Data file not found: {path}")
            return None

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"MALFORMED JSON in {path.name} at line {e.lineno}, column {e.colno}")
            raise DataLoadError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise DataLoadError(f"Failed to read {path}: {e}") from e

    def load_stations(self) -> List[StationRecord]:
        """Load station records, reading the file on first use."""
        if self._stations_cache is None:
            payload = self._read_json(self.stations_path)
            self._stations_cache = parse_stations_payload(payload) if payload is not None else []
            self._last_loaded = datetime.now()
            self.logger.info(f"Loaded {len(self._stations_cache)} station records from {self.stations_path.name}")
        return list(self._stations_cache)

    def load_lines(self) -> List[MetroLine]:
        """Load line geometries, reading the file on first use."""
        if self._lines_cache is None:
            payload = self._read_json(self.lines_path)
            self._lines_cache = parse_lines_payload(payload) if payload is not None else []
            self._last_loaded = datetime.now()
            self.logger.info(f"Loaded {len(self._lines_cache)} line geometries from {self.lines_path.name}")
        return list(self._lines_cache)

    def refresh_data(self) -> bool:
        """Drop the caches and reload both files."""
        self._stations_cache = None
        self._lines_cache = None
        try:
            self.load_stations()
            self.load_lines()
        except DataLoadError as e:
            self.logger.error(f"Failed to refresh data: {e}")
            self._stations_cache = None
            self._lines_cache = None
            return False

        self.logger.info("Data refreshed successfully")
        return True

    @property
    def last_loaded(self) -> Optional[datetime]:
        return self._last_loaded
