from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class McpServerEntry(BaseModel):
    """A single server registration as written to an agent's config (command, args, env, cwd).

    Unknown per-server fields (``type``, ``url``, ``disabled``, ...) are kept as extras.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    command: str | None = None
    args: list[str] = []
    env: dict[str, str] = {}
    cwd: str | None = None


class AgentConfig(BaseModel):
    """Canonical in-memory form of an agent's MCP config file.

    Every top-level field other than the server mapping is preserved as an extra.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    mcp_servers: dict[str, McpServerEntry] = Field(default_factory=dict, alias="mcpServers")

    def to_json_dict(self) -> dict[str, Any]:
        data = self.model_dump(by_alias=True, exclude_unset=True)
        data["mcpServers"] = {
            name: entry.model_dump(by_alias=True, exclude_unset=True)
            for name, entry in self.mcp_servers.items()
        }
        return data
