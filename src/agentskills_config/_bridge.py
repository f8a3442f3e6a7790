"""The tool's own bridge server and the bundled skills agent built around it."""

from __future__ import annotations

from .models.bundle import BundleConfig, BundleServerConfig
from .models.mcp import McpServerEntry
from .models.skill import WILDCARD

BRIDGE_SERVER_NAME = "agentskills"
BRIDGE_COMMAND = "npx"
BRIDGE_ARGS = ("-y", "@codemcp/agentskills-mcp")

AGENT_ID = "skills-mcp"
AGENT_DESCRIPTION = "Agent with access to installed skills through the agentskills MCP server"


def bridge_server_entry() -> McpServerEntry:
    return McpServerEntry(command=BRIDGE_COMMAND, args=list(BRIDGE_ARGS))


def build_bundle_config(
    extra_servers: dict[str, BundleServerConfig] | None = None,
) -> BundleConfig:
    """Bundle the bridge server with any extra servers; extras never replace the bridge."""
    servers = {
        BRIDGE_SERVER_NAME: BundleServerConfig(
            type="stdio",
            command=BRIDGE_COMMAND,
            args=list(BRIDGE_ARGS),
            tools=[WILDCARD],
        )
    }
    for name, server in (extra_servers or {}).items():
        servers.setdefault(name, server)
    return BundleConfig(
        id=AGENT_ID,
        description=AGENT_DESCRIPTION,
        mcp_servers=servers,
        tools={"use_skill": True},
        permissions={"use_skill": "allow"},
    )
