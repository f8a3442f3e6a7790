from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

WILDCARD = "*"

_TOOLS_SPLIT = re.compile(r"[,\s]+")


class ParameterSpec(BaseModel):
    """Declaration of a ``{{NAME}}`` placeholder used by an MCP server template.

    ``default`` may be the sentinel ``{{ENV:VAR}}``, resolved from the environment
    when parameters are resolved.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)
    description: str = ""
    required: bool = False
    default: str | None = None
    sensitive: bool = False
    example: str | None = None


class McpServerSpec(BaseModel):
    """An MCP server a skill depends on (one entry of ``requires-mcp-servers``)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)
    name: str
    description: str | None = None
    package: str | None = None
    command: str = ""
    args: list[str] = []
    env: dict[str, str] = {}
    cwd: str | None = None
    tools: list[str] | None = None
    parameters: dict[str, ParameterSpec] = {}

    @property
    def allows_all_tools(self) -> bool:
        return not self.tools or WILDCARD in self.tools


class SkillMetadata(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)
    name: str
    description: str = ""
    requires_mcp_servers: list[McpServerSpec] = Field(
        default_factory=list, alias="requires-mcp-servers"
    )
    allowed_tools: list[str] | None = Field(None, alias="allowed-tools")

    @field_validator("allowed_tools", mode="before")
    @classmethod
    def _parse_tools_string(cls, v: object) -> object:
        if isinstance(v, str):
            return [t for t in _TOOLS_SPLIT.split(v) if t]
        return v


class Skill(BaseModel):
    """A parsed skill: frontmatter metadata plus markdown body."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)
    metadata: SkillMetadata
    body: str = ""

    @property
    def name(self) -> str:
        return self.metadata.name
