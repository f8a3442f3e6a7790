"""Write the MCP servers required by installed skills into agent configs."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from ..agents import display_name, get_agent_config_path_lenient
from ..config import read_agent_config, write_agent_config
from ..dependencies import McpDependencyInfo
from ..errors import AgentSkillsError
from ..generators import (
    ConfigGeneratorRegistry,
    build_config_generator_registry,
    build_server_file_registry,
)
from ..models.bundle import BundleServerConfig, ConfigMode, Scope
from ..models.mcp import McpServerEntry
from ..params import Prompter, apply_params, resolve_parameters
from ._generate import generate_skills_mcp_agent
from ._summary import DependencySetupSummary

logger = logging.getLogger(__name__)


def configure_skill_mcp_deps_for_agents(
    deps: Sequence[McpDependencyInfo],
    agents: Sequence[str],
    base_dir: Path,
    scope: Scope = "local",
    config_mode: ConfigMode = "agent-config",
    allowed_tools_by_server: Mapping[str, list[str]] | None = None,
    *,
    prompter: Prompter,
    registry: ConfigGeneratorRegistry | None = None,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
    resolved: Mapping[str, McpServerEntry] | None = None,
) -> DependencySetupSummary:
    """Add the servers in ``deps`` to each agent, prompting for parameters once.

    Generator-backed agents in agent-config mode get their agent file regenerated
    with every dependency, and their server file gains the missing ones. All other
    agents get only the servers whose key is not yet in their config. Existing
    entries are never modified. A failing agent is
    logged and recorded, and the remaining agents are still attempted.

    ``resolved`` supplies already-rendered entries (see resolve_dependencies) so a
    caller splitting agents into several batches prompts only once.

    Raises:
        SetupCancelledError: If the user cancels a parameter prompt. Nothing has
            been written for the batch at that point.
    """
    summary = DependencySetupSummary()
    if not deps or not agents:
        return summary

    if resolved is None:
        resolved = resolve_dependencies(deps, prompter, environ)

    registry = registry or build_config_generator_registry()

    for agent in agents:
        try:
            if config_mode == "agent-config" and registry.supports(agent):
                added = _regenerate(
                    agent,
                    resolved,
                    base_dir,
                    scope,
                    allowed_tools_by_server,
                    registry,
                    home,
                    environ,
                )
                summary.regenerated[agent] = list(resolved)
            else:
                added = _add_missing(agent, resolved, base_dir, scope, home, environ)
        except (AgentSkillsError, OSError, ValueError) as e:
            logger.warning("Could not add skill MCP servers to %s: %s", display_name(agent), e)
            summary.failed[agent] = str(e)
            continue
        if added:
            summary.added[agent] = added
            for name in added:
                logger.info("Added %s to %s", name, display_name(agent))

    return summary


def _regenerate(
    agent: str,
    resolved: Mapping[str, McpServerEntry],
    base_dir: Path,
    scope: Scope,
    allowed_tools_by_server: Mapping[str, list[str]] | None,
    registry: ConfigGeneratorRegistry,
    home: Path | None,
    environ: Mapping[str, str] | None,
) -> list[str]:
    """Regenerate the agent file; return the servers new to the agent's server file."""
    allowed = allowed_tools_by_server or {}
    extra = {
        name: BundleServerConfig(
            type="stdio",
            command=entry.command,
            args=entry.args or None,
            env=entry.env or None,
            cwd=entry.cwd,
            tools=allowed.get(name),
        )
        for name, entry in resolved.items()
    }
    server_files = build_server_file_registry()
    has_server_file = server_files.supports(agent)
    before: set[str] = set()
    if has_server_file:
        path = get_agent_config_path_lenient(agent, base_dir, scope, home=home, environ=environ)
        before = set(read_agent_config(path, agent).mcp_servers)
    generate_skills_mcp_agent(
        agent,
        base_dir,
        scope,
        extra,
        True,
        home=home,
        registry=registry,
        server_files=server_files,
        environ=environ,
    )
    if not has_server_file:
        return []
    return [name for name in extra if name not in before]


def _add_missing(
    agent: str,
    resolved: Mapping[str, McpServerEntry],
    base_dir: Path,
    scope: Scope,
    home: Path | None,
    environ: Mapping[str, str] | None,
) -> list[str]:
    path = get_agent_config_path_lenient(agent, base_dir, scope, home=home, environ=environ)
    config = read_agent_config(path, agent)
    added: list[str] = []
    for name, entry in resolved.items():
        if name in config.mcp_servers:
            logger.debug("%s already configured for %s", name, agent)
            continue
        config.mcp_servers[name] = entry.model_copy(deep=True)
        added.append(name)
    if added:
        write_agent_config(path, config, agent)
    return added


def resolve_dependencies(
    deps: Sequence[McpDependencyInfo],
    prompter: Prompter,
    environ: Mapping[str, str] | None = None,
) -> dict[str, McpServerEntry]:
    """Resolve parameters and render each dependency's server entry, in ``deps`` order."""
    resolved: dict[str, McpServerEntry] = {}
    for dep in deps:
        params = resolve_parameters(dep.spec, prompter, environ)
        resolved[dep.server_name] = apply_params(dep.spec, params)
    return resolved
