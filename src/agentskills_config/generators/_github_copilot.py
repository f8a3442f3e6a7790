"""Markdown agent file for GitHub Copilot (``.github/agents/<id>.agent.md``)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..models.bundle import BundleConfig, GeneratedConfig, GeneratorMetadata, GeneratorOptions
from ._common import render_markdown, server_fields, tool_patterns
from ._description import SKILLS_AGENT_DESCRIPTION_MARKDOWN

COPILOT_AGENT_TYPES = ("github-copilot", "copilot-cli", "copilot-coding-agent")

# capability name -> Copilot tool alias
_BUILTIN_TOOL_ALIASES = {
    "write": "edit",
    "read": "read",
    "bash": "execute",
    "use_skill": "use_skill",
}


class GitHubCopilotGenerator:
    agent_types = COPILOT_AGENT_TYPES

    def generate(self, config: BundleConfig, options: GeneratorOptions) -> GeneratedConfig:
        metadata: dict[str, Any] = {"name": config.id, "description": config.description}
        metadata["tools"] = self._tools(config)
        if config.mcp_servers:
            metadata["mcp-servers"] = {
                name: server_fields(server, "type", "command", "args", "url", "headers", "env", "tools")
                for name, server in config.mcp_servers.items()
            }
        metadata["disable-model-invocation"] = False
        metadata["user-invocable"] = True
        return GeneratedConfig(
            file_path=self.get_output_path(options),
            content=render_markdown(metadata, SKILLS_AGENT_DESCRIPTION_MARKDOWN),
            format="markdown",
        )

    def _tools(self, config: BundleConfig) -> list[str]:
        tools = [alias for cap, alias in _BUILTIN_TOOL_ALIASES.items() if config.tools.get(cap)]
        for name, server in config.mcp_servers.items():
            tools.extend(tool_patterns(name, server))
        return tools or ["*"]

    def supports(self, agent: str) -> bool:
        return agent in self.agent_types

    def get_output_path(self, options: GeneratorOptions) -> Path:
        return options.base_dir / ".github" / "agents" / f"{options.agent_id}.agent.md"

    def get_metadata(self) -> GeneratorMetadata:
        return GeneratorMetadata(
            name="GitHub Copilot",
            description="Generates Markdown+YAML agent configs for GitHub Copilot CLI and coding agent",
            agent_types=self.agent_types,
            docs_url="https://docs.github.com/en/copilot/reference/custom-agents-configuration",
        )
