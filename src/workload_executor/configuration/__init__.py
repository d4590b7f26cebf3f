"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    ClientSettings,
    Configuration,
    LoggingSettings,
    OutputSettings,
    RunSettings,
    default_configuration,
)

__all__ = [
    "ClientSettings",
    "Configuration",
    "LoggingSettings",
    "OutputSettings",
    "RunSettings",
    "ConfigurationError",
    "load_configuration",
    "default_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
