"""Logging system for the calculators and the command-line front end.

This module configures stdlib logging from a YAML-shaped dictionary, with
per-module level overrides, an optional combined log file in a
platform-aware location, and startup-based rotation of that file.

Diagnostics go to stderr through the console handler; stdout is reserved for
calculation results.

Platform-specific log locations (when file logging is enabled):
    - macOS: ~/Library/Logs/FlightCalc/flightcalc.log
    - Linux: ~/.flightcalc/logs/flightcalc.log
    - Windows: %AppData%/FlightCalc/Logs/flightcalc.log

Typical usage example:
    from flightcalc.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.debug("Turn radius: %.2f NM", radius_nm)
"""

import logging
import os
import platform
import sys
import time
from pathlib import Path
from typing import Any

import yaml

# Global configuration
_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/FlightCalc
        - Linux: ~/.flightcalc/logs
        - Windows: %AppData%/FlightCalc/Logs
    """
    system = platform.system()

    if system == "Darwin":  # macOS
        return Path.home() / "Library" / "Logs" / "FlightCalc"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "FlightCalc" / "Logs"
    else:  # Linux and other Unix-like systems
        return Path.home() / ".flightcalc" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "flightcalc.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames current log to flightcalc.log.1, shifts older logs, and deletes
    logs beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file (default: "flightcalc.log").
        keep_count: Number of old logs to keep (default: 5).

    Examples:
        >>> rotate_logs(Path("logs"), "flightcalc.log", 5)
        # flightcalc.log -> flightcalc.log.1
        # flightcalc.log.1 -> flightcalc.log.2
        # ...
        # flightcalc.log.5 -> deleted
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        new_log = log_dir / f"{log_filename}.{i + 1}"
        if old_log.exists():
            old_log.rename(new_log)

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
    use_platform_dir: bool = False,
) -> None:
    """Initialize the logging system.

    Can be called again to reconfigure (the CLI does so once it has read
    its settings and command-line flags).

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses default configuration.
        overrides: Optional dictionary merged over the loaded configuration,
            typically the "logging" section of the application settings.
        use_platform_dir: If True, write the combined log to the
            platform-specific directory instead of the configured log_dir.

    Raises:
        LoggingError: If the configuration file cannot be loaded.

    Examples:
        >>> initialize_logging(overrides={"console": {"level": "DEBUG"}})
        >>> log = get_logger("flightcalc.cli")
    """
    global _logging_config, _initialized

    if config_path:
        try:
            config_path = Path(config_path)
            if not config_path.exists():
                raise LoggingError(f"Logging config file not found: {config_path}")

            with config_path.open("r", encoding="utf-8") as f:
                _logging_config = yaml.safe_load(f) or {}

        except Exception as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
    else:
        _logging_config = _get_default_config()

    if overrides:
        _logging_config = _merge_dicts(_logging_config, overrides)

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", False):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        rotate_logs(
            log_dir,
            combined.get("filename", "flightcalc.log"),
            combined.get("backup_count", 5),
        )

    _loggers_cache.clear()
    _configure_root_logger()

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Returns:
        Default logging configuration dictionary.
    """
    return {
        "version": 1,
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": False,
            "filename": "flightcalc.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
            "format": "%(levelname)s: %(message)s",
        },
        "loggers": {},
    }


def _merge_dicts(base: dict, override: dict) -> dict:
    """Recursively merge two dictionaries, override wins."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def _level(name: str) -> int:
    """Resolve a level name such as "INFO" to its numeric value."""
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


def _configure_root_logger() -> None:
    """Configure the root logger with handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter in handlers

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console = _logging_config.get("console", {})
    if console.get("enabled", True):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(_level(console.get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter(console.get("format")))
        root_logger.addHandler(console_handler)

    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", False):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / combined.get("filename", "flightcalc.log")

        # Plain FileHandler: rotation already happened at startup
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Custom formatter that shows milliseconds with dot separator."""

    def formatTime(self, record, datefmt=None):
        """Format time with milliseconds using dot separator."""
        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt, ct)
        else:
            s = time.strftime("%Y-%m-%d %H:%M:%S", ct)
        s = f"{s}.{int(record.msecs):03d}"
        return s


def _get_formatter(fmt: str | None = None) -> logging.Formatter:
    """Get the configured log formatter.

    Args:
        fmt: Format string; the configured file format when None.

    Returns:
        Configured logging.Formatter instance.
    """
    if fmt is None:
        fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Loggers are cached and reused. A logger can have its own level set in
    the configuration under the 'loggers' section.

    Args:
        name: Logger name (typically the module's __name__).

    Returns:
        Configured logger instance.

    Examples:
        >>> log = get_logger("flightcalc.calculators.turn")
        >>> log.debug("Bank: %.1f deg", bank_deg)

    Note:
        Use lazy formatting (%) instead of f-strings for better performance.
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)

    logger_config = _logging_config.get("loggers", {}).get(name, {})
    if logger_config.get("enabled", True):
        logger.disabled = False
        if "level" in logger_config:
            logger.setLevel(_level(logger_config["level"]))
    else:
        logger.disabled = True

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Shutdown the logging system gracefully.

    Flushes and closes all handlers. Should be called at application exit.
    """
    global _initialized

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        # The stream may already be closed by its owner (e.g. a test capture)
        try:
            handler.flush()
            handler.close()
        except (OSError, ValueError):
            pass

    _loggers_cache.clear()
    _initialized = False
