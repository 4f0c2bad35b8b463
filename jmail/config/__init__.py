"""Configuration management"""

from .config_loader import ConfigError, ConfigLoader
from .decoder_config import AppConfig, CharsetConfig, DecoderConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "CharsetConfig",
    "ConfigError",
    "ConfigLoader",
    "DecoderConfig",
    "LoggingConfig",
]
