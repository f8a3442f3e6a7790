"""Schema adapters: ``mcpServers`` (most agents), ``servers`` (VS Code), ``mcp`` (OpenCode)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ..agents import Schema, get_family
from ..models.mcp import AgentConfig, McpServerEntry
from ._protocols import SchemaAdapter

OPENCODE_SCHEMA_URL = "https://opencode.ai/config.json"


class StandardSchemaAdapter:
    """``{"mcpServers": {name: {command, args, env}}}`` used by Claude, Cursor, Cline, Kiro, ..."""

    def to_standard(self, raw: dict[str, Any]) -> AgentConfig:
        return AgentConfig.model_validate(raw)

    def to_client(self, config: AgentConfig, existing: dict[str, Any] | None) -> dict[str, Any]:
        data = config.to_json_dict()
        previous = (existing or {}).get("mcpServers")
        data["mcpServers"] = _keep_unchanged(
            data["mcpServers"], config, previous, McpServerEntry.model_validate
        )
        return data


class VsCodeSchemaAdapter:
    """``{"servers": {...}}`` used by VS Code and GitHub Copilot."""

    def to_standard(self, raw: dict[str, Any]) -> AgentConfig:
        data = dict(raw)
        servers = data.pop("servers", None) or {}
        stray = data.pop("mcpServers", None) or {}
        data["mcpServers"] = {**stray, **servers}
        return AgentConfig.model_validate(data)

    def to_client(self, config: AgentConfig, existing: dict[str, Any] | None) -> dict[str, Any]:
        data = config.to_json_dict()
        previous = (existing or {}).get("servers")
        servers = _keep_unchanged(
            data.pop("mcpServers"), config, previous, McpServerEntry.model_validate
        )
        return {"servers": servers, **data}


class OpenCodeSchemaAdapter:
    """``{"mcp": {name: {type: local, command: [cmd, *args], environment}}}`` used by OpenCode.

    Local entries map to command/args/env. Every other entry (remote servers, say) is
    carried as-is so its name still counts as configured. Entries that were not
    changed are written back exactly as they were read.
    """

    def to_standard(self, raw: dict[str, Any]) -> AgentConfig:
        data = dict(raw)
        mcp = data.pop("mcp", None) or {}
        data.pop("mcpServers", None)
        servers = {
            name: _opencode_entry(entry) for name, entry in mcp.items() if isinstance(entry, dict)
        }
        config = AgentConfig.model_validate(data)
        config.mcp_servers = servers
        return config

    def to_client(self, config: AgentConfig, existing: dict[str, Any] | None) -> dict[str, Any]:
        data = config.to_json_dict()
        data.pop("mcpServers")
        if existing is None and "$schema" not in data:
            data = {"$schema": OPENCODE_SCHEMA_URL, **data}

        permission = data.get("permission")
        data["permission"] = {**(permission if isinstance(permission, dict) else {}), "skill": "deny"}

        existing_mcp: dict[str, Any] = (existing or {}).get("mcp") or {}
        mcp: dict[str, Any] = {}
        for name in dict.fromkeys([*existing_mcp, *config.mcp_servers]):
            previous = existing_mcp.get(name)
            server = config.mcp_servers.get(name)
            if server is None:
                if previous is not None and not isinstance(previous, dict):
                    mcp[name] = previous
                continue
            if _unchanged(_opencode_entry, previous, server):
                mcp[name] = previous
            elif server.command is None:
                mcp[name] = server.model_dump(exclude_unset=True)
            else:
                out = dict(previous) if _is_local(previous) else {}
                out["type"] = "local"
                out["command"] = [server.command, *server.args]
                out.setdefault("enabled", True)
                out["environment"] = dict(server.env)
                mcp[name] = out
        data["mcp"] = mcp
        return data


def _opencode_entry(entry: dict[str, Any]) -> McpServerEntry:
    if not _is_local(entry):
        return McpServerEntry.model_validate(entry)
    command, *args = entry["command"]
    fields: dict[str, Any] = {"command": command}
    if args:
        fields["args"] = args
    if entry.get("environment"):
        fields["env"] = dict(entry["environment"])
    return McpServerEntry(**fields)


def _is_local(entry: object) -> bool:
    return (
        isinstance(entry, dict)
        and entry.get("type") == "local"
        and isinstance(entry.get("command"), list)
        and len(entry["command"]) > 0
    )


def _unchanged(
    parse: Callable[[dict[str, Any]], McpServerEntry],
    old: object,
    server: McpServerEntry,
) -> bool:
    if not isinstance(old, dict):
        return False
    try:
        return parse(old) == server
    except ValidationError:
        return False


def _keep_unchanged(
    rendered: dict[str, Any],
    config: AgentConfig,
    previous: object,
    parse: Callable[[dict[str, Any]], McpServerEntry],
) -> dict[str, Any]:
    """Swap in the previous raw entry for every server whose canonical form did not change."""
    if not isinstance(previous, dict):
        return rendered
    out: dict[str, Any] = {}
    for name, entry in rendered.items():
        old = previous.get(name)
        out[name] = old if _unchanged(parse, old, config.mcp_servers[name]) else entry
    return out


_ADAPTERS: dict[Schema, SchemaAdapter] = {
    "mcpServers": StandardSchemaAdapter(),
    "servers": VsCodeSchemaAdapter(),
    "mcp": OpenCodeSchemaAdapter(),
}


def get_schema_adapter(agent: str | None) -> SchemaAdapter:
    """Adapter for the agent's on-disk schema; the standard one for None or unknown agents."""
    family = get_family(agent) if agent else None
    return _ADAPTERS[family.schema if family else "mcpServers"]
