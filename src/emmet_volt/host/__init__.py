"""Editor host adapters."""

from .base import Host
from .console import ConsoleHost
from .stdio import StdioHost, serve
from .volt import VoltEnvironment

__all__ = ["ConsoleHost", "Host", "StdioHost", "VoltEnvironment", "serve"]
