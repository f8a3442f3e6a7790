"""Aggregate the MCP servers required by a set of skills."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..models.skill import WILDCARD, McpServerSpec, Skill

_SERVER_TOOL = re.compile(r"^@([^/]+)/(.+)$")


@dataclass
class McpDependencyInfo:
    """One required server with the skills that need it.

    ``spec`` is the first declaration seen for ``server_name``.
    """

    server_name: str
    spec: McpServerSpec
    needed_by: list[str] = field(default_factory=list)


def collect_dependencies(skills: Sequence[Skill]) -> list[McpDependencyInfo]:
    """One entry per distinct server name, in first-seen order."""
    by_name: dict[str, McpDependencyInfo] = {}
    for skill in skills:
        for spec in skill.metadata.requires_mcp_servers:
            info = by_name.get(spec.name)
            if info is None:
                by_name[spec.name] = McpDependencyInfo(spec.name, spec, [skill.name])
            elif skill.name not in info.needed_by:
                info.needed_by.append(skill.name)
    return list(by_name.values())


def build_allowed_tools_by_server(skills: Sequence[Skill]) -> dict[str, list[str]]:
    """Per-server tool allow-list derived from the skills' ``allowed-tools``.

    A server maps to ``["*"]`` when any skill depending on it leaves it unrestricted:
    the skill has no ``allowed-tools`` at all, lists no ``@server/...`` entry for it,
    or lists ``@server/*``. Otherwise it maps to the union of named tools, in
    first-seen order.
    """
    result: dict[str, list[str]] = {}
    wildcard: set[str] = set()

    for skill in skills:
        scoped = _scoped_tools(skill.metadata.allowed_tools)
        for spec in skill.metadata.requires_mcp_servers:
            name = spec.name
            tools = scoped.get(name)
            if skill.metadata.allowed_tools is None or not tools or WILDCARD in tools:
                wildcard.add(name)
                result.setdefault(name, [])
                continue
            merged = result.setdefault(name, [])
            merged.extend(t for t in tools if t not in merged)

    for name in wildcard:
        result[name] = [WILDCARD]
    return result


def _scoped_tools(allowed_tools: list[str] | None) -> dict[str, list[str]]:
    scoped: dict[str, list[str]] = {}
    for entry in allowed_tools or []:
        m = _SERVER_TOOL.match(entry)
        if m:
            scoped.setdefault(m.group(1), []).append(m.group(2))
    return scoped
