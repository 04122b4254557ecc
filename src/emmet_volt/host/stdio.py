"""JSON-RPC over stdio between the plugin and the editor host.

Requests from the host are read from stdin one at a time; launch requests
and user messages go back to the host as notifications on stdout.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Mapping, Optional

from pylsp_jsonrpc.streams import JsonRpcStreamReader, JsonRpcStreamWriter

from ..lsp.plugin import EmmetPlugin
from ..lsp.types import DocumentSelector, MessageType
from ..util.log import Log
from .volt import VoltEnvironment

log = Log.create({"service": "host.stdio"})

START_LSP_METHOD = "host/startLsp"
SHOW_MESSAGE_METHOD = "window/showMessage"
EXIT_METHOD = "exit"


class StdioHost(VoltEnvironment):
    """Host whose capabilities are JSON-RPC notifications written to ``wfile``."""

    def __init__(self, wfile: BinaryIO, environ: Optional[Mapping[str, str]] = None):
        super().__init__(environ)
        self._writer = JsonRpcStreamWriter(wfile)

    def _notify(self, method: str, params: Dict[str, Any]) -> None:
        self._writer.write({"jsonrpc": "2.0", "method": method, "params": params})

    def start_lsp(
        self,
        uri: str,
        args: list[str],
        selector: DocumentSelector,
        options: Optional[Any],
    ) -> None:
        self._notify(START_LSP_METHOD, {
            "server_uri": uri,
            "server_args": list(args),
            "document_selector": [item.model_dump(mode="json") for item in selector],
            "options": options,
        })

    def show_message(self, type: MessageType, message: str) -> None:
        self._notify(SHOW_MESSAGE_METHOD, {"type": int(type), "message": message})


def serve(plugin: EmmetPlugin, rfile: BinaryIO) -> None:
    """Feed host messages from ``rfile`` to ``plugin`` until EOF or ``exit``."""
    reader = JsonRpcStreamReader(rfile)

    def consume(message: Dict[str, Any]) -> None:
        method = message.get("method")
        if not isinstance(method, str):
            log.debug("ignoring message without method", {"id": message.get("id")})
            return

        if "id" in message:
            plugin.handle_request(message["id"], method, message.get("params"))
            return

        if method == EXIT_METHOD:
            log.info("exit requested")
            reader.close()
            return
        plugin.handle_notification(method, message.get("params"))

    log.info("listening for host messages")
    reader.listen(consume)
    log.info("host stream closed")
