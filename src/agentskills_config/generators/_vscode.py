"""``.vscode/mcp.json`` server file (``servers`` key) for VS Code and GitHub Copilot."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..agents import get_agent_config_path
from ..config._io import dump_json
from ..models.bundle import BundleConfig, GeneratedConfig, GeneratorMetadata, GeneratorOptions
from ._common import server_fields
from ._github_copilot import COPILOT_AGENT_TYPES


class VsCodeGenerator:
    agent_types = COPILOT_AGENT_TYPES

    def generate(self, config: BundleConfig, options: GeneratorOptions) -> GeneratedConfig:
        servers: dict[str, Any] = {}
        for name, server in config.mcp_servers.items():
            if server.url:
                entry: dict[str, Any] = {"type": server.type or "http", "url": server.url}
                entry.update(server_fields(server, "headers"))
            else:
                entry = server_fields(server, "command", "args", "env")
            servers[name] = entry
        return GeneratedConfig(
            file_path=self.get_output_path(options),
            content=dump_json({"servers": servers}),
            format="json",
            merge=True,
            keep_existing=("servers",),
        )

    def supports(self, agent: str) -> bool:
        return agent in self.agent_types

    def get_output_path(self, options: GeneratorOptions) -> Path:
        return get_agent_config_path(
            "github-copilot",
            options.base_dir,
            options.scope,
            home=options.base_dir,
            platform=options.platform,
            environ=options.environ,
        )

    def get_metadata(self) -> GeneratorMetadata:
        return GeneratorMetadata(
            name="VS Code",
            description=(
                "Writes .vscode/mcp.json (servers format) so MCP servers are available "
                "to GitHub Copilot and other VS Code extensions"
            ),
            agent_types=self.agent_types,
            docs_url="https://code.visualstudio.com/docs/copilot/chat/mcp-servers",
        )
