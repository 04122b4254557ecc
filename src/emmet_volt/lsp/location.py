"""Where the server executable lives."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.config_schema import PluginSettings
from ..util.log import Log
from .types import OperatingSystem, PlatformInfo, ServerOverride
from .uri import join_uri, urn

if TYPE_CHECKING:
    from ..host.base import Host

log = Log.create({"service": "lsp.location"})


def executable_name(system: OperatingSystem, binary_name: str = "emmet-ls") -> str:
    if system is OperatingSystem.WINDOWS and not binary_name.endswith(".exe"):
        return f"{binary_name}.exe"
    return binary_name


def build_override_location(override: ServerOverride) -> str:
    """Location of a user supplied server.

    A bare name is looked up on PATH by the host, anything else is taken
    as the host's own path syntax.
    """
    return urn(override.path)


def build_install_location(
    host: "Host",
    platform: PlatformInfo,
    settings: Optional[PluginSettings] = None,
) -> str:
    """Server location inside the plugin's install directory.

    Raises:
        HostError: If the host cannot report the install directory.
        InvalidURIError: If the reported directory is not a URI.
    """
    settings = settings or PluginSettings()
    # Not part of the URI: the server is addressed by its directory segment.
    binary = executable_name(platform.os, settings.binary_name)
    base = host.install_directory_uri()
    uri = join_uri(base, settings.server_segment)
    log.debug("server location", {"base": base, "uri": uri, "binary": binary})
    return uri
