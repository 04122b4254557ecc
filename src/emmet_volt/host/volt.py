"""Host environment queries.

The editor starts the plugin with its platform and install directory in
the process environment.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from ..lsp.errors import HostError

VOLT_ARCH = "VOLT_ARCH"
VOLT_OS = "VOLT_OS"
VOLT_URI = "VOLT_URI"


class VoltEnvironment:
    """Platform and install-directory accessors backed by environment variables."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    def _get(self, key: str) -> str:
        environ = os.environ if self._environ is None else self._environ
        value = environ.get(key)
        if not value:
            raise HostError(key, "environment variable not present")
        return value

    def architecture(self) -> str:
        return self._get(VOLT_ARCH)

    def operating_system(self) -> str:
        return self._get(VOLT_OS)

    def install_directory_uri(self) -> str:
        return self._get(VOLT_URI)
