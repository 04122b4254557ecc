"""emmet-volt - emmet-ls language server plugin for volt-based editors.

Decides where the emmet-ls binary comes from, installs it through npm when
needed, and asks the editor to start it for JSX/TSX buffers.
"""

__version__ = "0.1.0"


# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    """Lazy import package components."""
    if name in ("EmmetPlugin", "ResolvedServer", "InitializeParams"):
        from . import lsp
        return getattr(lsp, name)
    if name in ("ConsoleHost", "StdioHost", "VoltEnvironment"):
        from . import host
        return getattr(host, name)
    if name == "Log":
        from .util.log import Log
        return Log
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    "EmmetPlugin",
    "ResolvedServer",
    "InitializeParams",
    "ConsoleHost",
    "StdioHost",
    "VoltEnvironment",
    "Log",
]
