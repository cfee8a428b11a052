"""
Configuration management for Darbk.

This module handles loading, saving, and validating configuration using
Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class DataConfig(BaseModel):
    """Configuration for the local data files."""

    data_directory: str = "data"
    stations_file: str = "metro-stations.json"
    lines_file: str = "metro-lines.geojson"


class APIConfig(BaseModel):
    """Configuration for fetching data from the open data portal."""

    stations_url: str = Field(
        "https://data.riyadh.gov.sa/api/explore/v2.1/catalog/datasets/metro-stations/records?limit=100",
        description="Endpoint returning the stations payload",
    )
    lines_url: str = Field(
        "https://data.riyadh.gov.sa/api/explore/v2.1/catalog/datasets/metro-lines/exports/geojson",
        description="Endpoint returning the lines GeoJSON",
    )
    timeout_seconds: int = Field(10, gt=0)
    max_retries: int = Field(3, ge=1)


class TrackingConfig(BaseModel):
    """Configuration for route presentation and trip tracking."""

    upcoming_stops_limit: int = Field(6, ge=1)
    station_number_start: int = 11


class ConfigData(BaseModel):
    """Main configuration data model."""

    data: DataConfig = DataConfig()
    api: APIConfig = APIConfig()
    tracking: TrackingConfig = TrackingConfig()


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the user config directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        Uses XDG_CONFIG_HOME/Darbk/config.json when set, otherwise
        ~/.config/Darbk/config.json (APPDATA/Darbk/config.json on Windows).

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / "Darbk" / "config.json"

        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / "Darbk" / "config.json"
        return Path.home() / ".config" / "Darbk" / "config.json"

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")
        except (OSError, TypeError) as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
            self.config = config
            return True
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        self.save_config(ConfigData())

    def get_config_summary(self) -> dict:
        """
        Get a summary of current configuration for display.

        Returns:
            dict: Configuration summary
        """
        if self.config is None:
            self.load_config()

        return {
            "data_directory": self.config.data.data_directory,
            "stations_file": self.config.data.stations_file,
            "lines_file": self.config.data.lines_file,
            "timeout": f"{self.config.api.timeout_seconds} seconds",
            "max_retries": self.config.api.max_retries,
            "upcoming_stops_limit": self.config.tracking.upcoming_stops_limit,
        }
