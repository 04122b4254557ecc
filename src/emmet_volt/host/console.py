"""Terminal stand-in for the editor host, used by ``emmet-volt resolve``."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from ..lsp.types import DocumentSelector, MessageType, ResolvedServer
from .volt import VoltEnvironment

_STYLES = {
    MessageType.ERROR: "red",
    MessageType.WARNING: "yellow",
    MessageType.INFO: "green",
    MessageType.LOG: "dim",
}


class ConsoleHost(VoltEnvironment):
    """Prints messages and records the launch instead of starting a process."""

    def __init__(
        self,
        console: Optional[Console] = None,
        environ: Optional[Mapping[str, str]] = None,
        install_dir: Optional[str] = None,
    ):
        super().__init__(environ)
        self.console = console or Console(stderr=True)
        self.install_dir = install_dir
        self.messages: List[Tuple[MessageType, str]] = []
        self.launches: List[ResolvedServer] = []

    def install_directory_uri(self) -> str:
        if self.install_dir:
            return self.install_dir
        return super().install_directory_uri()

    def start_lsp(
        self,
        uri: str,
        args: list[str],
        selector: DocumentSelector,
        options: Optional[Any],
    ) -> None:
        self.launches.append(ResolvedServer(uri=uri, args=args, selector=selector, options=options))

    def show_message(self, type: MessageType, message: str) -> None:
        self.messages.append((type, message))
        style = _STYLES.get(type, "")
        self.console.print(f"[{style}]{type.name.lower()}:[/{style}] {escape(message)}", highlight=False)

    @property
    def failed(self) -> bool:
        return any(kind is MessageType.ERROR for kind, _ in self.messages)
