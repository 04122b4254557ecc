"""Core infrastructure modules."""

from .global_paths import GlobalPath
from .config_schema import LoggingConfig, PluginSettings

__all__ = ["GlobalPath", "LoggingConfig", "PluginSettings"]

# Log is exported separately from util to avoid circular imports
# To use: from emmet_volt.util.log import Log
