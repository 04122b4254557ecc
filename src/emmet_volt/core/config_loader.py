"""Configuration file loading utilities: JSONC parsing and env substitution."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict

import commentjson

from ..util.log import Log

log = Log.create({"service": "config.loader"})


class ConfigFileError(Exception):
    """An options file exists but could not be read or parsed."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Config error in {path}: {message}")


def substitute_env_vars(text: str) -> str:
    """Replace ``{env:VAR}`` patterns with environment variable values."""
    def replacer(match: re.Match[str]) -> str:
        return os.environ.get(match.group(1), "")

    return re.sub(r'\{env:([^}]+)\}', replacer, text)


def load_json_file(filepath: str) -> Dict[str, Any]:
    """Load a JSON or JSONC document.

    Raises:
        ConfigFileError: If the file is missing, unreadable, not valid JSONC,
            or does not contain an object.
    """
    path = Path(filepath)
    try:
        text = path.read_text(encoding="utf-8")
        data = commentjson.loads(substitute_env_vars(text))
    except (OSError, ValueError, UnicodeDecodeError) as e:
        log.error("failed to load config file", {"path": filepath, "error": str(e)})
        raise ConfigFileError(filepath, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigFileError(filepath, "expected a JSON object")
    return data
