"""
Configuration management for Weather Locator.
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

import lib.utils as utils

logger = logging.getLogger(__name__)

DEFAULT_CITY = "Berlin"
DEFAULT_LATITUDE = 52.52
DEFAULT_LONGITUDE = 13.41


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholders with actual values.

    Args:
        match: A regex match object containing the environment variable name.

    Returns:
        str: The value of the environment variable or the original placeholder
             if the variable is not set.
    """
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ${VAR_NAME} placeholders in strings, dicts and lists."""
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


class ConfigManager:
    """Manages configuration loading and validation for Weather Locator."""

    def __init__(
        self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None, dotEnvFile: str = ".env"
    ):
        """Initialize ConfigManager with config file path and optional config directories."""
        self.config_path = configPath
        self.config_dirs = configDirs or []
        utils.load_dotenv(path=dotEnvFile)
        self.config = substituteEnvVars(self._loadConfig())
        self._validateConfig()

    def _findTomlFilesRecursive(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory."""
        tomlFiles: List[Path] = []
        dirPath = Path(directory)

        if not dirPath.exists():
            logger.warning(f"Config directory {directory} does not exist, skipping")
            return tomlFiles

        if not dirPath.is_dir():
            logger.warning(f"Config path {directory} is not a directory, skipping")
            return tomlFiles

        for tomlFile in dirPath.rglob("*.toml"):
            if tomlFile.is_file():
                tomlFiles.append(tomlFile)
                logger.debug(f"Found config file: {tomlFile}")

        return sorted(tomlFiles)

    def _mergeConfigs(self, baseConfig: Dict[str, Any], newConfig: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge two configuration dictionaries, newConfig wins."""
        merged = baseConfig.copy()

        for key, value in newConfig.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._mergeConfigs(merged[key], value)
            else:
                merged[key] = value

        return merged

    def _loadConfig(self) -> Dict[str, Any]:
        """Load configuration from TOML file and optional config directories.

        Directory configs are merged over the main file in sorted path order.
        Broken files inside config directories are skipped, a broken main file
        or no config at all terminates the process.
        """
        configFile = Path(self.config_path)
        hasConfigFile = configFile.exists()
        if not hasConfigFile and not self.config_dirs:
            logger.error(f"Configuration file {self.config_path} not found!")
            sys.exit(1)

        config: Dict[str, Any] = {}
        if hasConfigFile:
            try:
                with open(configFile, "rb") as f:
                    config = tomli.load(f)
            except (OSError, tomli.TOMLDecodeError) as e:
                logger.error(f"Failed to load configuration {self.config_path}: {e}")
                sys.exit(1)
            logger.info(f"Loaded main config from {self.config_path}")

        if self.config_dirs:
            logger.info(f"Scanning {len(self.config_dirs)} config directories for .toml files")

            for configDir in self.config_dirs:
                tomlFiles = self._findTomlFilesRecursive(configDir)
                logger.info(f"Found {len(tomlFiles)} .toml files in {configDir}")

                for tomlFile in tomlFiles:
                    try:
                        with open(tomlFile, "rb") as f:
                            dirConfig = tomli.load(f)
                    except (OSError, tomli.TOMLDecodeError) as e:
                        logger.error(f"Failed to load config file {tomlFile}: {e}")
                        continue

                    config = self._mergeConfigs(config, dirConfig)
                    logger.info(f"Merged config from {tomlFile}")

        logger.info("Configuration loaded and merged successfully")
        return config

    def _validateConfig(self) -> None:
        """Reject coordinates that are not numbers.

        Range is not checked: the forecast API decides what it accepts.
        """
        checks = [
            ("weather", "default-latitude"),
            ("weather", "default-longitude"),
            ("location", "latitude"),
            ("location", "longitude"),
        ]
        for section, key in checks:
            value = self.get(section, {}).get(key)
            if value is not None and utils.parseFloat(value) is None:
                logger.error(f"Invalid value for {section}.{key}: {value!r}, number expected")
                sys.exit(1)

        permission = self.getLocationConfig().get("permission")
        if permission is not None and permission not in ("granted", "denied"):
            logger.error(f"Invalid value for location.permission: {permission!r}, 'granted' or 'denied' expected")
            sys.exit(1)

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})

    def getOpenMeteoConfig(self) -> Dict[str, Any]:
        """
        Get Open-Meteo configuration

        Returns:
            Dict with Open-Meteo settings (geocoding-url, forecast-url, request-timeout, language)
        """
        return self.get("open-meteo", {})

    def getGeocodeMapsConfig(self) -> Dict[str, Any]:
        """Get geocode maps configuration."""
        return self.get("geocode-maps", {})

    def getLocationConfig(self) -> Dict[str, Any]:
        """Get device location configuration (permission and position)."""
        return self.get("location", {})

    def getWeatherConfig(self) -> Dict[str, Any]:
        """
        Get weather flow configuration with defaults applied

        Returns:
            Dict with default-city, default-latitude, default-longitude
            and discard-stale-results keys always present
        """
        weatherConfig = self.get("weather", {})
        return {
            "default-city": str(weatherConfig.get("default-city", DEFAULT_CITY)),
            "default-latitude": utils.parseFloat(weatherConfig.get("default-latitude", DEFAULT_LATITUDE)),
            "default-longitude": utils.parseFloat(weatherConfig.get("default-longitude", DEFAULT_LONGITUDE)),
            "discard-stale-results": bool(weatherConfig.get("discard-stale-results", True)),
        }
