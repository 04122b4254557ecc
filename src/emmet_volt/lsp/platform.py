"""Supported-platform gate."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..util.log import Log
from .errors import HostError
from .types import Arch, OperatingSystem, PlatformInfo

if TYPE_CHECKING:
    from ..host.base import Host

log = Log.create({"service": "lsp.platform"})


def probe_platform(host: "Host") -> Optional[PlatformInfo]:
    """Query the host platform.

    Returns None when either query fails or reports something other than
    x86_64/aarch64 on macos/linux/windows. The caller does nothing in that
    case; the user is not told.
    """
    try:
        arch = Arch(host.architecture())
    except (HostError, ValueError) as e:
        log.debug("unsupported architecture", {"error": e})
        return None

    try:
        system = OperatingSystem(host.operating_system())
    except (HostError, ValueError) as e:
        log.debug("unsupported operating system", {"error": e})
        return None

    return PlatformInfo(arch=arch, os=system)
