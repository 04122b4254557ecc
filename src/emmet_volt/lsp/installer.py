"""On-demand install of the emmet-ls package through npm."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

from ..core.config_schema import PluginSettings
from ..util.log import Log
from .errors import CommandStartError, InstallFailedError, ToolMissingError
from .types import InstallOutcome, MessageType

if TYPE_CHECKING:
    from ..host.base import Host

log = Log.create({"service": "lsp.installer"})

TOOL_MISSING_MESSAGE = "Could not find npm. Npm must be available to download emmet-ls."
INSTALL_FAILED_MESSAGE = "Emmet-ls failed to install."
INSTALLED_MESSAGE = "Emmet-ls installed successfully!"


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


CommandRunner = Callable[[List[str]], CommandResult]


def run_command(cmd: List[str]) -> CommandResult:
    """Run ``cmd`` to completion, blocking, with no timeout.

    Raises:
        CommandStartError: If the process could not be started.
    """
    try:
        completed = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
            text=True,
        )
    except OSError as e:
        raise CommandStartError(cmd, str(e)) from e
    return CommandResult(completed.returncode, completed.stdout or "", completed.stderr or "")


def _which(cmd: str) -> str:
    return shutil.which(cmd) or cmd


def _failure_detail(result: CommandResult) -> str:
    tail = (result.stderr or result.stdout).strip().splitlines()
    if tail:
        return f"exit code {result.returncode}: {tail[-1]}"
    return f"exit code {result.returncode}"


class DependencyInstaller:
    """Checks for npm and installs the server package globally.

    The install command runs on every call; npm itself treats an already
    installed package as a no-op.
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

    def _run(self, cmd: List[str]) -> tuple[bool, str]:
        try:
            result = self.runner(cmd)
        except CommandStartError as e:
            return False, str(e)
        if not result.ok:
            return False, _failure_detail(result)
        return True, result.stdout.strip()

    def check_tool(self) -> None:
        npm = _which(self.settings.npm)
        ok, detail = self._run([npm, "--version"])
        if not ok:
            log.error("npm unavailable", {"npm": npm, "error": detail})
            self.host.show_message(MessageType.ERROR, TOOL_MISSING_MESSAGE)
            raise ToolMissingError(self.settings.npm, detail)
        log.info("npm available", {"npm": npm, "version": detail})

    def install(self) -> None:
        npm = _which(self.settings.npm)
        package = self.settings.package
        with log.time("installing npm package for LSP", {"package": package}):
            ok, detail = self._run([npm, "install", "-g", package])
        if not ok:
            log.error("npm install failed", {"package": package, "error": detail})
            self.host.show_message(MessageType.ERROR, INSTALL_FAILED_MESSAGE)
            raise InstallFailedError(package, detail)

    def ensure_server_installed(self) -> InstallOutcome:
        """Make sure the server package is installed.

        Raises:
            ToolMissingError: npm cannot be run; the user has been notified.
            InstallFailedError: ``npm install -g`` failed; the user has been notified.
        """
        self.check_tool()
        self.install()
        self.host.show_message(MessageType.INFO, INSTALLED_MESSAGE)
        return InstallOutcome.INSTALLED
