"""Errors raised while resolving the emmet-ls launch description."""

from typing import List

from .types import InstallOutcome


class PluginError(Exception):
    """Base class for failures of the resolution pipeline."""


class HostError(PluginError):
    """A host capability query failed."""

    def __init__(self, capability: str, message: str):
        self.capability = capability
        super().__init__(f"{capability}: {message}")


class InvalidURIError(PluginError):
    """A server location could not be turned into a URI."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"invalid URI {value!r}: {reason}")


class CommandStartError(PluginError):
    """A subprocess could not be started at all."""

    def __init__(self, cmd: List[str], cause: str):
        self.cmd = list(cmd)
        super().__init__(f"failed to start {' '.join(cmd)}: {cause}")


class InstallError(PluginError):
    """The language server could not be made available."""

    outcome: InstallOutcome


class ToolMissingError(InstallError):
    """The package manager needed to download the server is unavailable."""

    outcome = InstallOutcome.TOOL_MISSING

    def __init__(self, tool: str, detail: str):
        self.tool = tool
        super().__init__(f"{tool} is not available: {detail}")


class InstallFailedError(InstallError):
    """The package manager ran but the install did not succeed."""

    outcome = InstallOutcome.INSTALL_FAILED

    def __init__(self, package: str, detail: str):
        self.package = package
        super().__init__(f"failed to install {package}: {detail}")
