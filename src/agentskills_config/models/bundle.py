"""Input and output records for agent-config generators."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .skill import WILDCARD

Scope = Literal["local", "global"]
ConfigMode = Literal["agent-config", "mcp-json"]

# Permission level for a tool, or a per-command mapping of levels.
ToolPermission = Literal["allow", "ask", "deny"]


class BundleServerConfig(BaseModel):
    """An MCP server as seen by generators (stdio command or HTTP url, plus allow-list)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    type: Literal["stdio", "http", "sse"] | None = None
    command: str | None = None
    args: list[str] | None = None
    url: str | None = None
    headers: dict[str, str] | None = None
    env: dict[str, str] | None = None
    cwd: str | None = None
    tools: list[str] | None = None

    @property
    def allows_all_tools(self) -> bool:
        return not self.tools or WILDCARD in self.tools


class BundleConfig(BaseModel):
    """The bundled skills agent: servers, capability map and permissions."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    id: str
    description: str
    mcp_servers: dict[str, BundleServerConfig] = {}
    tools: dict[str, bool] = {}
    permissions: dict[str, ToolPermission | dict[str, ToolPermission]] = {}
    model: str | None = None
    temperature: float | None = None


@dataclass(frozen=True)
class GeneratorOptions:
    base_dir: Path
    agent_id: str = "skills-mcp"
    scope: Scope = "local"
    environ: Mapping[str, str] | None = None
    platform: str | None = None

    @property
    def is_global(self) -> bool:
        return self.scope == "global"


@dataclass(frozen=True)
class GeneratorMetadata:
    name: str
    description: str
    agent_types: tuple[str, ...]
    docs_url: str | None = None
    version: str = "1.0.0"


@dataclass(frozen=True)
class GeneratedConfig:
    """A serialized file produced by a generator.

    Attributes:
        file_path: Target file (never a directory).
        content: Serialized file content.
        format: "json" or "markdown".
        merge: When True the JSON content is merged into an existing file at the top
            level instead of replacing it.
        keep_existing: Top-level sections of a merge target whose existing entries
            are kept; only entries missing from them are added.
    """

    file_path: Path
    content: str
    format: Literal["json", "markdown"]
    merge: bool = False
    keep_existing: tuple[str, ...] = ()
