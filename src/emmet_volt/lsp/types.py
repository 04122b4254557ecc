"""Data model shared by the resolution pipeline and the host boundary."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class InitializeParams(BaseModel):
    """The subset of LSP ``InitializeParams`` the plugin reads.

    Everything else the host sends is kept as extra fields and ignored.
    """
    process_id: Optional[int] = Field(None, alias="processId")
    root_uri: Optional[str] = Field(None, alias="rootUri")
    capabilities: Dict[str, Any] = Field(default_factory=dict)
    initialization_options: Optional[Any] = Field(None, alias="initializationOptions")

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)


class ServerOverride(BaseModel):
    """User supplied server location and arguments."""
    path: str
    args: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Arch(str, Enum):
    """CPU architectures the plugin supports."""
    X86_64 = "x86_64"
    AARCH64 = "aarch64"


class OperatingSystem(str, Enum):
    """Operating systems the plugin supports."""
    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"


class PlatformInfo(BaseModel):
    arch: Arch
    os: OperatingSystem

    model_config = ConfigDict(frozen=True)


class DocumentFilter(BaseModel):
    """LSP document filter; serialized with the protocol's field names."""
    language: Optional[str] = None
    pattern: Optional[str] = None
    scheme: Optional[str] = None

    model_config = ConfigDict(frozen=True)


DocumentSelector = List[DocumentFilter]


def emmet_document_selector() -> DocumentSelector:
    """Return the fixed selector routing JSX/TSX buffers to emmet-ls."""
    return [DocumentFilter(language="html", pattern="**/*.{jsx,tsx}", scheme=None)]


class ResolvedServer(BaseModel):
    """Launch description handed to the host exactly once per initialize."""
    uri: str
    args: List[str] = Field(default_factory=list)
    selector: DocumentSelector
    options: Optional[Any] = None

    model_config = ConfigDict(frozen=True)


class InstallOutcome(str, Enum):
    """Result of an install attempt. Failures are raised, carrying theirs as ``InstallError.outcome``."""
    TOOL_MISSING = "tool_missing"
    INSTALL_FAILED = "install_failed"
    INSTALLED = "installed"


class MessageType(IntEnum):
    """Severity of a ``window/showMessage`` notification."""
    ERROR = 1
    WARNING = 2
    INFO = 3
    LOG = 4
