"""Data models for music streaming."""

from .config import Config, DisplayConfig, LoggingConfig, configure_logging, load_config, save_config

__all__ = [
    "Config",
    "DisplayConfig",
    "LoggingConfig",
    "configure_logging",
    "load_config",
    "save_config",
]
