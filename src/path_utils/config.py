"""
Configuration file support for path-utils.

Provides:
- Config dataclass for holding configuration values
- TOML config file loading (path_utils.toml)
- Applying the logging section and building component Options
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Type

from .constants import DEFAULT_DISPLAY_INFO
from .diagnostics import DiagnosticSink, Options
from .logging_config import configure_logging, get_log_level_from_name

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "path_utils.toml"


@dataclass
class DisplayConfig:
    """Diagnostic output configuration."""

    enabled: bool = DEFAULT_DISPLAY_INFO


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete configuration for path-utils."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    config_path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], config_path: Optional[Path] = None) -> "Config":
        """Create Config from a dictionary (parsed TOML)."""
        display_data = data.get("display", {})
        logging_data = data.get("logging", {})

        return cls(
            display=DisplayConfig(
                enabled=bool(display_data.get("enabled", DEFAULT_DISPLAY_INFO)),
            ),
            logging=LoggingConfig(
                level=logging_data.get("level", "WARNING"),
                log_file=logging_data.get("log_file"),
            ),
            config_path=config_path,
        )

    def options(
        self,
        options_class: Type[Options] = Options,
        sink: Optional[DiagnosticSink] = None,
        **values: Any,
    ) -> Options:
        """
        Build component options honoring the display setting.

        Example:
            config.options(JsonFileOptions, initial_value={"items": []})
        """
        return options_class(sink=sink, display=self.display.enabled, **values)


class ConfigError(Exception):
    """Error loading or parsing configuration."""

    pass


def find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find the configuration file.

    Search order:
    1. Explicit path if provided
    2. path_utils.toml in current directory

    Args:
        config_path: Explicit path to config file.

    Returns:
        Path to config file, or None if not found.

    Raises:
        ConfigError: If an explicit path was given and does not exist.
    """
    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            return config_path
        raise ConfigError(f"Config file not found: {config_path}")

    cwd_config = Path.cwd() / DEFAULT_CONFIG_NAME
    if cwd_config.exists():
        return cwd_config

    return None


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from a TOML file.

    If no config file is found, returns default configuration.

    Raises:
        ConfigError: If the config file exists but cannot be parsed.
    """
    config_file = find_config_file(config_path)

    if config_file is None:
        logger.debug("No config file found, using defaults")
        return Config()

    logger.debug(f"Loading config from: {config_file}")

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_file}: {e}")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_file}: {e}")

    config = Config.from_dict(data, config_path=config_file)
    logger.info(f"Loaded config from: {config_file}")
    return config


def apply_config(config: Config) -> None:
    """Configure the path_utils logger from the [logging] section."""
    log_file = Path(config.logging.log_file) if config.logging.log_file else None
    configure_logging(level=get_log_level_from_name(config.logging.level), log_file=log_file)
