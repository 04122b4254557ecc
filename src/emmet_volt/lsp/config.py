"""User override of the server location.

Users point the plugin at their own server in the editor settings::

    [emmet-volt.lsp]
    serverPath = "/path/to/emmet-ls"   # or a bare name looked up on PATH
    serverArgs = ["--stdio"]

which the host forwards as ``initializationOptions.lsp``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional

from ..util.log import Log
from .types import InitializeParams, ServerOverride

log = Log.create({"service": "lsp.config"})


def _server_args(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [arg for arg in value if isinstance(arg, str)]


def resolve_override(params: InitializeParams) -> Optional[ServerOverride]:
    """Return the user's server override, or None to use the bundled server."""
    options = params.initialization_options
    if not isinstance(options, Mapping):
        return None

    lsp = options.get("lsp")
    if not isinstance(lsp, Mapping):
        return None

    args = _server_args(lsp.get("serverArgs"))
    path = lsp.get("serverPath")
    if not isinstance(path, str) or not path:
        return None

    log.debug("server override found", {"path": path, "args": args})
    return ServerOverride(path=path, args=args)
