"""Configuration loader for YAML files.

This module provides configuration loading with support for nested access,
built-in defaults, and merging of user overrides.

Typical usage example:
    from flightcalc.core.config import ConfigLoader

    config = ConfigLoader.defaults()
    config.merge(ConfigLoader.load("flightcalc.yaml"))
    glide_ratio = config.get("flight.glide_ratio", default=12.0)
"""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "logging": {
        "console": {"level": "WARNING"},
        "combined_log": {"enabled": False},
    },
    "density_altitude": {
        # Inputs outside these ranges are still computed, only flagged.
        "warning_range": {
            "min_altitude_ft": -2000.0,
            "max_altitude_ft": 60000.0,
            "min_temperature_c": -60.0,
            "max_temperature_c": 60.0,
        },
    },
    "flight": {
        "glide_ratio": 12.0,
        "best_glide_multiplier": 1.3,
        "typical_stall_speed_kts": 60.0,
        # Demonstration IAS feed used when no --ias samples are given:
        # base_kts + (i % period) - offset_kts for i in range(count)
        "synthetic_history": {
            "count": 30,
            "base_kts": 150.0,
            "period": 7,
            "offset_kts": 3.0,
        },
        "alternate_airports": [[5, 2], [10, 3]],
    },
}


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access, and default values for configuration.

    Examples:
        >>> config = ConfigLoader.load("flightcalc.yaml")
        >>> ratio = config.get("flight.glide_ratio", default=12.0)
    """

    def __init__(self, data: dict[str, Any]) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
        """
        self._data = data

    @classmethod
    def defaults(cls) -> "ConfigLoader":
        """Create a loader holding a private copy of the built-in settings.

        Returns:
            ConfigLoader with DEFAULT_SETTINGS.
        """
        return cls(copy.deepcopy(DEFAULT_SETTINGS))

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If file cannot be loaded or is not a mapping.

        Examples:
            >>> config = ConfigLoader.load("flightcalc.yaml")
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except Exception as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Supports nested access like "flight.synthetic_history.count".

        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.

        Returns:
            Configuration value or default.

        Examples:
            >>> ratio = config.get("flight.glide_ratio", default=12.0)
        """
        keys = key.split(".")
        value = self._data

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_float(self, key: str, default: float) -> float:
        """Get a numeric configuration value as a float.

        Args:
            key: Configuration key (supports dot notation).
            default: Value used when the key is missing.

        Returns:
            The value converted to float.

        Raises:
            ConfigError: If the value is present but not numeric.
        """
        value = self.get(key, default)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"Configuration value for {key} must be a number: {value!r}")
        return float(value)

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Configuration section as dictionary.

        Raises:
            ConfigError: If section not found or not a dict.

        Examples:
            >>> logging_config = config.get_section("logging")
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one.

        Args:
            other: ConfigLoader to merge from.

        Note:
            Other config values override existing ones.
        """
        self._data = self._merge_dicts(self._data, other._data)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        """Recursively merge two dictionaries.

        Args:
            base: Base dictionary.
            override: Override dictionary.

        Returns:
            Merged dictionary.
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result
