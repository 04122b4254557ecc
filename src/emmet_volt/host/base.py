"""Host capabilities the resolution pipeline depends on."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from ..lsp.types import DocumentSelector, MessageType


class Host(Protocol):
    """Editor host as seen from the plugin.

    The three queries may raise ``HostError``. ``start_lsp`` and
    ``show_message`` are fire-and-forget.
    """

    def architecture(self) -> str: ...

    def operating_system(self) -> str: ...

    def install_directory_uri(self) -> str: ...

    def start_lsp(
        self,
        uri: str,
        args: list[str],
        selector: DocumentSelector,
        options: Optional[Any],
    ) -> None: ...

    def show_message(self, type: MessageType, message: str) -> None: ...
