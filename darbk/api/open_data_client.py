"""
Open data client for fetching metro data over HTTP.

This module downloads the stations payload and the lines GeoJSON from the
configured endpoints, with retries and error handling, and decodes them
with the same permissive parser used for local files.
"""

import asyncio
import logging
from typing import Any, List, Optional

import aiohttp

from ..core.models.metro_line import MetroLine
from ..core.models.station import StationRecord
from ..core.services.payload_parser import parse_lines_payload, parse_stations_payload
from ..managers.config_manager import ConfigData

logger = logging.getLogger(__name__)


class APIException(Exception):
    """Base exception for API-related errors."""

    pass


class NetworkException(APIException):
    """Exception for network-related errors."""

    pass


class OpenDataClient:
    """
    Fetches station and line payloads from the open data portal.

    Use as an async context manager so the HTTP session is opened and
    closed around the requests.
    """

    def __init__(self, config: ConfigData):
        """
        Initialize the client.

        Args:
            config: Configuration holding the endpoints and retry policy
        """
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry."""
        timeout = aiohttp.ClientTimeout(total=self.config.api.timeout_seconds)
        self.session = aiohttp.ClientSession(
            timeout=timeout, headers={"User-Agent": "Darbk/1.0"}
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.session:
            await self.session.close()

    async def fetch_stations(self) -> List[StationRecord]:
        """
        Download and parse the stations payload.

        Raises:
            APIException: For non-success responses
            NetworkException: When every attempt fails at the network level
        """
        payload = await self._fetch_json(self.config.api.stations_url)
        return parse_stations_payload(payload)

    async def fetch_lines(self) -> List[MetroLine]:
        """Download and parse the lines GeoJSON."""
        payload = await self._fetch_json(self.config.api.lines_url)
        return parse_lines_payload(payload)

    async def _fetch_json(self, url: str) -> Any:
        max_retries = self.config.api.max_retries

        for attempt in range(max_retries):
            if not self.session:
                raise NetworkException("Session not initialized")

            try:
                logger.info(f"Fetching {url} (attempt {attempt + 1}/{max_retries})")

                async with self.session.get(url) as response:
                    if response.status == 200:
                        # GeoJSON is often served as application/geo+json
                        return await response.json(content_type=None)

                    error_text = await response.text()
                    raise APIException(f"API error {response.status}: {error_text}")

            except aiohttp.ClientError as e:
                if attempt == max_retries - 1:
                    raise NetworkException(f"Network error: {str(e)}")

                wait_time = 2**attempt  # Exponential backoff
                logger.warning(
                    f"Network error on attempt {attempt + 1}, retrying in {wait_time}s: {e}"
                )
                await asyncio.sleep(wait_time)

        raise NetworkException(f"No response from {url}")
