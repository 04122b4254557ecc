"""Configuration management.

Plugin settings and logging options come from ``EMMET_VOLT_*`` environment
variables set by whoever launches the plugin. Per-session options come from
the host's ``initializationOptions`` and are handled in ``emmet_volt.lsp.config``.
"""

import os
from typing import Any, Dict, Mapping, Optional

from .config_schema import LoggingConfig, PluginSettings
from ..util.log import Log, LogFormat, LogLevel

ENV_PREFIX = "EMMET_VOLT_"

__all__ = [
    "LoggingConfig",
    "PluginSettings",
    "apply_logging",
    "load_logging_config",
    "load_settings",
]


def _truthy(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = environ.get(ENV_PREFIX + key, "").strip()
    return value or None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> PluginSettings:
    """Build plugin settings from defaults plus environment overrides."""
    environ = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    npm = _env(environ, "NPM")
    if npm:
        overrides["npm"] = npm
    package = _env(environ, "PACKAGE")
    if package:
        overrides["package"] = package
    return PluginSettings.model_validate(overrides)


def load_logging_config(environ: Optional[Mapping[str, str]] = None) -> LoggingConfig:
    """Read logging options from the environment."""
    environ = os.environ if environ is None else environ
    data: Dict[str, Any] = {}
    level = _env(environ, "LOG_LEVEL")
    if level:
        data["level"] = level
    fmt = _env(environ, "LOG_FORMAT")
    if fmt:
        data["format"] = fmt.lower()
    for key, field in (("LOG_CONSOLE", "console"), ("LOG_FILE", "file"), ("LOG_DEV", "dev_file")):
        value = _env(environ, key)
        if value is not None:
            data[field] = _truthy(value)
    return LoggingConfig.model_validate(data)


def apply_logging(config: LoggingConfig, *, default_file: bool = False) -> None:
    """Configure the global logger from a LoggingConfig."""
    Log.configure(
        level=LogLevel.parse(config.level) if config.level else None,
        format=LogFormat.parse(config.format) if config.format else None,
        console=config.console if config.console is not None else False,
        file=config.file if config.file is not None else default_file,
        dev=bool(config.dev_file),
    )
