"""Plugin entry point: turns the host's ``initialize`` request into one server launch.

Resolution order:

1. A ``lsp.serverPath`` override in ``initializationOptions`` is launched as-is.
2. On an unsupported platform nothing happens.
3. Otherwise emmet-ls is installed through npm and the bundled location is
   launched.

Every failure ends in exactly one error notification to the host.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from ..core.config_schema import PluginSettings
from ..util.error import describe_error
from ..util.log import Log
from .config import resolve_override
from .errors import InstallError
from .installer import CommandRunner, DependencyInstaller, run_command
from .location import build_install_location, build_override_location
from .platform import probe_platform
from .types import InitializeParams, MessageType, ResolvedServer, emmet_document_selector

if TYPE_CHECKING:
    from ..host.base import Host

log = Log.create({"service": "lsp.plugin"})


class Method(str, Enum):
    """Requests the plugin acts on."""
    INITIALIZE = "initialize"

    @classmethod
    def parse(cls, value: str) -> Optional["Method"]:
        try:
            return cls(value)
        except ValueError:
            return None


class EmmetPlugin:
    """Resolves and launches emmet-ls for one host.

    Holds no state between requests; each ``initialize`` re-runs the full
    resolution, including the npm install.
    """

    def __init__(
        self,
        host: "Host",
        runner: CommandRunner = run_command,
        settings: Optional[PluginSettings] = None,
    ):
        self.host = host
        self.runner = runner
        self.settings = settings or PluginSettings()

    def handle_request(self, request_id: Any, method: str, params: Any) -> Optional[ResolvedServer]:
        """Dispatch a host request.

        Errors never escape: each failure reaches the user as exactly one
        error ``window/showMessage`` (install failures are reported by the
        installer itself) and the request is considered handled.
        """
        kind = Method.parse(method)
        if kind is None:
            log.debug("ignoring request", {"id": request_id, "method": method})
            return None

        try:
            if kind is Method.INITIALIZE:
                return self.initialize(InitializeParams.model_validate(params or {}))
        except InstallError as e:
            log.error("server install failed", {"id": request_id, "outcome": e.outcome.value, "error": e})
        except Exception as e:
            log.error("request failed", {"id": request_id, "method": method, "error": e})
            self.host.show_message(
                MessageType.ERROR,
                f"plugin returned with error: {describe_error(e)}",
            )
        return None

    def handle_notification(self, method: str, params: Any) -> None:
        log.debug("ignoring notification", {"method": method})

    def initialize(self, params: InitializeParams) -> Optional[ResolvedServer]:
        """Run the resolution pipeline.

        Returns the launched server, or None when the platform is unsupported.

        Raises:
            InstallError: npm is missing or the install failed.
            InvalidURIError: The server location is not a valid URI.
            HostError: The host could not report its install directory.
        """
        selector = emmet_document_selector()
        options = params.initialization_options

        override = resolve_override(params)
        if override is not None:
            server = ResolvedServer(
                uri=build_override_location(override),
                args=override.args,
                selector=selector,
                options=options,
            )
            return self._launch(server, source="override")

        platform = probe_platform(self.host)
        if platform is None:
            return None

        DependencyInstaller(self.host, self.runner, self.settings).ensure_server_installed()

        server = ResolvedServer(
            uri=build_install_location(self.host, platform, self.settings),
            args=[],
            selector=selector,
            options=options,
        )
        return self._launch(server, source="bundled")

    def _launch(self, server: ResolvedServer, source: str) -> ResolvedServer:
        log.info("starting language server", {"uri": server.uri, "args": server.args, "source": source})
        self.host.start_lsp(server.uri, list(server.args), list(server.selector), server.options)
        return server
