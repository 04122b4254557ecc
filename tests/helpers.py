"""Shared test helpers."""

from __future__ import annotations

import json
from io import BytesIO
from typing import Any, Dict, List, Optional, Union

from pylsp_jsonrpc.streams import JsonRpcStreamReader

from emmet_volt.lsp.errors import CommandStartError
from emmet_volt.lsp.installer import CommandResult
from emmet_volt.lsp.types import DocumentSelector, MessageType

Answer = Union[str, Exception]

PLUGIN_DIR = "file:///home/user/.local/share/lapce/plugins/emmet-volt/"


class FakeHost:
    """Scripted host that records every capability call in order."""

    def __init__(
        self,
        arch: Answer = "x86_64",
        os: Answer = "linux",
        install_dir: Answer = PLUGIN_DIR,
    ):
        self.answers = {"architecture": arch, "operating_system": os, "install_directory_uri": install_dir}
        self.events: List[tuple] = []

    def _answer(self, name: str) -> str:
        self.events.append(("query", name))
        value = self.answers[name]
        if isinstance(value, Exception):
            raise value
        return value

    def architecture(self) -> str:
        return self._answer("architecture")

    def operating_system(self) -> str:
        return self._answer("operating_system")

    def install_directory_uri(self) -> str:
        return self._answer("install_directory_uri")

    def start_lsp(self, uri: str, args: list[str], selector: DocumentSelector, options: Optional[Any]) -> None:
        self.events.append(("start_lsp", (uri, args, selector, options)))

    def show_message(self, type: MessageType, message: str) -> None:
        self.events.append(("message", (type, message)))

    @property
    def queries(self) -> List[str]:
        return [name for kind, name in self.events if kind == "query"]

    @property
    def launches(self) -> List[tuple]:
        return [data for kind, data in self.events if kind == "start_lsp"]

    @property
    def messages(self) -> List[tuple]:
        return [data for kind, data in self.events if kind == "message"]


class FakeRunner:
    """Command runner returning scripted results in call order.

    An int is an exit code; an exception is raised from the call.
    """

    def __init__(self, *results: Union[int, Exception]):
        self.results = list(results)
        self.commands: List[List[str]] = []

    def __call__(self, cmd: List[str]) -> CommandResult:
        self.commands.append(list(cmd))
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        stdout = "10.8.2\n" if cmd[1:] == ["--version"] and result == 0 else ""
        stderr = "" if result == 0 else "npm ERR! code E404\n"
        return CommandResult(result, stdout, stderr)


def not_found(cmd: List[str]) -> CommandStartError:
    return CommandStartError(cmd, "[Errno 2] No such file or directory")


def frame(message: Dict[str, Any]) -> bytes:
    body = json.dumps(message).encode("utf-8")
    return b"Content-Length: %d\r\n\r\n" % len(body) + body


def read_frames(data: bytes) -> List[Dict[str, Any]]:
    messages: List[Dict[str, Any]] = []
    JsonRpcStreamReader(BytesIO(data)).listen(messages.append)
    return messages
