"""emmet-ls bootstrap for the editor host.

Example:
    from emmet_volt.lsp import EmmetPlugin

    plugin = EmmetPlugin(host)
    plugin.handle_request(0, "initialize", {"initializationOptions": {}})
"""

from .errors import (
    CommandStartError,
    HostError,
    InstallError,
    InstallFailedError,
    InvalidURIError,
    PluginError,
    ToolMissingError,
)
from .plugin import EmmetPlugin, Method
from .types import (
    DocumentFilter,
    InitializeParams,
    InstallOutcome,
    MessageType,
    PlatformInfo,
    ResolvedServer,
    ServerOverride,
    emmet_document_selector,
)

__all__ = [
    "CommandStartError",
    "DocumentFilter",
    "EmmetPlugin",
    "HostError",
    "InitializeParams",
    "InstallError",
    "InstallFailedError",
    "InstallOutcome",
    "InvalidURIError",
    "MessageType",
    "Method",
    "PlatformInfo",
    "PluginError",
    "ResolvedServer",
    "ServerOverride",
    "ToolMissingError",
    "emmet_document_selector",
]
