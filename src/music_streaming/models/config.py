"""Configuration model for music streaming."""

import json
import logging
from dataclasses import asdict, dataclass, field, fields, is_dataclass
from pathlib import Path

from ..exceptions import ConfigurationError


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class DisplayConfig:
    """Configuration for CLI summary output."""
    show_tables: bool = True
    top_n: int = 10  # rows per summary table


@dataclass
class Config:
    """Main configuration model."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def default(cls) -> "Config":
        return cls()


def _dict_to_dataclass(data, dataclass_type):
    """Convert dict to dataclass recursively, ignoring unknown keys."""
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected an object for {dataclass_type.__name__}, got {type(data).__name__}"
        )

    kwargs = {}
    for f in fields(dataclass_type):
        if f.name not in data:
            continue
        value = data[f.name]
        if is_dataclass(f.type):
            value = _dict_to_dataclass(value, f.type)
        elif not isinstance(value, f.type) or (f.type is int and isinstance(value, bool)):
            raise ConfigurationError(
                f"{dataclass_type.__name__}.{f.name} must be {f.type.__name__}, got {value!r}"
            )
        kwargs[f.name] = value

    return dataclass_type(**kwargs)


def load_config(config_path: Path) -> Config:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Invalid configuration file {config_path}: {e}") from e

    config = _dict_to_dataclass(config_data, Config)
    if config.display.top_n < 0:
        raise ConfigurationError(f"DisplayConfig.top_n must not be negative, got {config.display.top_n}")
    return config


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(asdict(config), f, indent=2)


def configure_logging(config: Config) -> None:
    """Install a root handler with the configured level and format."""
    if not isinstance(config.logging.level, str):
        raise ConfigurationError(f"Log level must be a name, got {config.logging.level!r}")

    level = logging.getLevelName(config.logging.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {config.logging.level}")

    logging.basicConfig(level=level, format=config.logging.format, force=True)
