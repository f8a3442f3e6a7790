"""JSON agent file for Kiro CLI (``.kiro/agents/<id>.json``)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config._io import dump_json
from ..models.bundle import BundleConfig, GeneratedConfig, GeneratorMetadata, GeneratorOptions
from ._common import server_fields, tool_patterns
from ._description import SKILLS_AGENT_DESCRIPTION_MARKDOWN

# Kiro's built-in tools, always listed before the MCP servers.
BUILTIN_TOOLS = (
    "execute_bash",
    "fs_read",
    "fs_write",
    "report_issue",
    "knowledge",
    "thinking",
    "use_aws",
)


class KiroGenerator:
    agent_types = ("kiro", "kiro-cli")

    def generate(self, config: BundleConfig, options: GeneratorOptions) -> GeneratedConfig:
        data: dict[str, Any] = {
            "name": config.id,
            "prompt": SKILLS_AGENT_DESCRIPTION_MARKDOWN,
            "mcpServers": {
                name: server_fields(server, "command", "args", "env")
                for name, server in config.mcp_servers.items()
            },
            "tools": [*BUILTIN_TOOLS, *(f"@{name}" for name in config.mcp_servers)],
            "allowedTools": self._allowed_tools(config),
        }
        return GeneratedConfig(
            file_path=self.get_output_path(options),
            content=dump_json(data),
            format="json",
        )

    def _allowed_tools(self, config: BundleConfig) -> list[str]:
        allowed = ["fs_read", "use_skill"]
        for name, server in config.mcp_servers.items():
            allowed.extend(tool_patterns(name, server, prefix="@"))
        return allowed

    def supports(self, agent: str) -> bool:
        return agent in self.agent_types

    def get_output_path(self, options: GeneratorOptions) -> Path:
        return options.base_dir / ".kiro" / "agents" / f"{options.agent_id}.json"

    def get_metadata(self) -> GeneratorMetadata:
        return GeneratorMetadata(
            name="Kiro",
            description="Generates JSON agent configs for Kiro CLI",
            agent_types=self.agent_types,
            docs_url="https://kiro.dev/docs/cli/custom-agents/",
        )
