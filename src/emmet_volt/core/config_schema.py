"""Configuration schema: Pydantic models for plugin settings."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: Optional[str] = None
    format: Optional[Literal["kv", "json", "pretty"]] = None
    console: Optional[bool] = None
    file: Optional[bool] = None
    dev_file: Optional[bool] = Field(None, alias="devFile")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class PluginSettings(BaseModel):
    """How the emmet-ls server is obtained and located.

    Attributes:
        npm: Package manager executable used to check for and install the server
        package: Package installed globally with ``npm install -g``
        server_segment: Path, relative to the plugin directory URI, of the server
        binary_name: Base name of the server executable
    """
    npm: str = "npm"
    package: str = "emmet-ls"
    server_segment: str = Field("emmet", alias="serverSegment")
    binary_name: str = Field("emmet-ls", alias="binaryName")

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)
