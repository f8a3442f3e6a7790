"""OpenCode: ``opencode.json`` server file and ``.opencode/agents/<id>.md`` agent file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..agents import get_agent_config_path
from ..config._adapters import OPENCODE_SCHEMA_URL
from ..config._io import dump_json
from ..models.bundle import BundleConfig, GeneratedConfig, GeneratorMetadata, GeneratorOptions
from ._common import render_markdown, server_fields
from ._description import SKILLS_AGENT_DESCRIPTION_MARKDOWN

OPENCODE_AGENT_TYPES = ("opencode", "opencode-cli")

DEFAULT_MODEL = "anthropic/claude-sonnet-4-20250514"
DEFAULT_TEMPERATURE = 0.1
DEFAULT_TOOLS = {"read": True, "write": False, "edit": False, "bash": False, "use_skill": True}
DEFAULT_PERMISSIONS = {"edit": "ask", "bash": "ask", "use_skill": "allow"}


def _opencode_dir(options: GeneratorOptions) -> Path:
    if options.is_global:
        return options.base_dir / ".config" / "opencode"
    return options.base_dir / ".opencode"


class OpenCodeMcpGenerator:
    """Writes the ``mcp`` section of opencode.json and denies OpenCode's native skill tool."""

    agent_types = OPENCODE_AGENT_TYPES

    def generate(self, config: BundleConfig, options: GeneratorOptions) -> GeneratedConfig:
        mcp: dict[str, Any] = {}
        for name, server in config.mcp_servers.items():
            entry: dict[str, Any] = {
                "type": "local",
                "enabled": True,
                "environment": dict(server.env or {}),
            }
            if server.command:
                entry["command"] = [server.command, *(server.args or [])]
            mcp[name] = entry
        data = {
            "$schema": OPENCODE_SCHEMA_URL,
            "permission": {"skill": "deny"},
            "mcp": mcp,
        }
        return GeneratedConfig(
            file_path=self.get_output_path(options),
            content=dump_json(data),
            format="json",
            merge=True,
            keep_existing=("mcp",),
        )

    def supports(self, agent: str) -> bool:
        return agent in self.agent_types

    def get_output_path(self, options: GeneratorOptions) -> Path:
        return get_agent_config_path(
            "opencode",
            options.base_dir,
            options.scope,
            home=options.base_dir,
            platform=options.platform,
            environ=options.environ,
        )

    def get_metadata(self) -> GeneratorMetadata:
        return GeneratorMetadata(
            name="OpenCode MCP",
            description="Writes opencode.json with MCP server configurations for OpenCode",
            agent_types=self.agent_types,
            docs_url="https://opencode.ai/docs/mcp-servers/",
        )


class OpenCodeAgentGenerator:
    """Markdown subagent whose frontmatter mirrors the bundle's tool and permission maps."""

    agent_types = OPENCODE_AGENT_TYPES

    def generate(self, config: BundleConfig, options: GeneratorOptions) -> GeneratedConfig:
        metadata: dict[str, Any] = {
            "name": config.id,
            "description": config.description,
            "mode": "subagent",
            "model": config.model or DEFAULT_MODEL,
            "temperature": (
                DEFAULT_TEMPERATURE if config.temperature is None else config.temperature
            ),
            "tools": {**DEFAULT_TOOLS, **config.tools},
            "permission": dict(config.permissions) if config.permissions else dict(DEFAULT_PERMISSIONS),
        }
        if config.mcp_servers:
            metadata["mcp"] = {
                name: server_fields(server, "type", "command", "args", "url", "env", "tools")
                for name, server in config.mcp_servers.items()
            }
        return GeneratedConfig(
            file_path=self.get_output_path(options),
            content=render_markdown(metadata, SKILLS_AGENT_DESCRIPTION_MARKDOWN),
            format="markdown",
        )

    def supports(self, agent: str) -> bool:
        return agent in self.agent_types

    def get_output_path(self, options: GeneratorOptions) -> Path:
        return _opencode_dir(options) / "agents" / f"{options.agent_id}.md"

    def get_metadata(self) -> GeneratorMetadata:
        return GeneratorMetadata(
            name="OpenCode Agent",
            description="Generates Markdown agent configs for OpenCode",
            agent_types=self.agent_types,
            docs_url="https://opencode.ai/docs/agents/",
        )
