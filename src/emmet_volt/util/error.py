"""Error formatting utilities.

Turns pipeline failures into the one-line text shown in the host's
notification area.
"""

import json
from typing import Any

from pydantic import ValidationError


def format_error(error: Any) -> str | None:
    """Format known plugin errors into user-facing messages.

    Returns None if the error type is not recognized, allowing
    fallback to format_unknown_error.
    """
    # Imported here: the lsp package imports this module.
    from ..lsp.errors import HostError, PluginError

    if isinstance(error, ValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in item['loc']) or '<root>'}: {item['msg']}"
            for item in error.errors()
        )
        return f"invalid initialize params: {problems}"
    if isinstance(error, HostError):
        return f"host query failed ({error})"
    if isinstance(error, PluginError):
        return str(error)
    return None


def format_unknown_error(error: Any) -> str:
    """Format any error into a single-line string."""
    if isinstance(error, BaseException):
        text = str(error)
        if text:
            return f"{error.__class__.__name__}: {text}"
        return error.__class__.__name__

    if isinstance(error, (dict, list)):
        try:
            return json.dumps(error)
        except (TypeError, ValueError):
            return "Unexpected error (unserializable)"

    return str(error)


def describe_error(error: Any) -> str:
    """Known formatting first, generic formatting otherwise."""
    return format_error(error) or format_unknown_error(error)
