"""The ``mcp setup`` flow: bridge server for every agent, then skill dependencies."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from ..agents import display_name
from ..config import configure_agent_mcp
from ..dependencies import build_allowed_tools_by_server, collect_dependencies
from ..errors import AgentSkillsError
from ..generators import (
    ConfigGeneratorRegistry,
    build_config_generator_registry,
    build_server_file_registry,
)
from ..loaders import load_installed_skills
from ..models.bundle import ConfigMode, Scope
from ..models.skill import Skill
from ..params import Prompter
from ._dependencies import configure_skill_mcp_deps_for_agents, resolve_dependencies
from ._generate import generate_skills_mcp_agent
from ._summary import SetupSummary

logger = logging.getLogger(__name__)


def configure_bridge(
    agent: str,
    base_dir: Path,
    scope: Scope,
    config_mode: ConfigMode,
    *,
    registry: ConfigGeneratorRegistry,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[Path]:
    """Register the bridge server for one agent in the form ``config_mode`` asks for."""
    server_files = build_server_file_registry()
    rich = config_mode == "agent-config" and registry.supports(agent)
    if rich or server_files.supports(agent):
        written = generate_skills_mcp_agent(
            agent,
            base_dir,
            scope,
            include_agent_config=rich,
            home=home,
            registry=registry,
            server_files=server_files,
            environ=environ,
        )
        if written:
            return written
    return [configure_agent_mcp(agent, base_dir, scope, home=home, environ=environ)]


def run_setup(
    agents: Sequence[str],
    base_dir: Path,
    scope: Scope = "local",
    config_mode: ConfigMode | None = None,
    *,
    prompter: Prompter,
    skills: Sequence[Skill] | None = None,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
    registry: ConfigGeneratorRegistry | None = None,
) -> SetupSummary:
    """Configure ``agents`` and then the MCP servers their installed skills require.

    Agents are split into generator-backed and plain ones. Each group uses
    ``config_mode`` when given; otherwise generator-backed agents default to
    agent-config and the rest to mcp-json. Per-agent failures are recorded in the
    summary without stopping the batch.

    Raises:
        SetupCancelledError: If the user cancels a parameter prompt.
    """
    registry = registry or build_config_generator_registry()
    generator_backed = [a for a in agents if registry.supports(a)]
    plain = [a for a in agents if not registry.supports(a)]
    groups: list[tuple[list[str], ConfigMode]] = [
        (generator_backed, config_mode or "agent-config"),
        (plain, config_mode or "mcp-json"),
    ]

    summary = SetupSummary()
    for group, mode in groups:
        for agent in group:
            try:
                summary.configured[agent] = configure_bridge(
                    agent, base_dir, scope, mode, registry=registry, home=home, environ=environ
                )
            except (AgentSkillsError, OSError, ValueError) as e:
                logger.warning("Failed to configure %s: %s", display_name(agent), e)
                summary.failed[agent] = str(e)

    if skills is None:
        skills = load_installed_skills(base_dir, scope, home=home)
    deps = collect_dependencies(skills)
    if not deps or not summary.configured:
        return summary

    allowed = build_allowed_tools_by_server(skills)
    resolved = resolve_dependencies(deps, prompter, environ)
    for group, mode in groups:
        targets = [a for a in group if a in summary.configured]
        result = configure_skill_mcp_deps_for_agents(
            deps,
            targets,
            base_dir,
            scope,
            mode,
            allowed,
            prompter=prompter,
            registry=registry,
            home=home,
            environ=environ,
            resolved=resolved,
        )
        summary.dependencies.merge(result)

    for agent, error in summary.dependencies.failed.items():
        summary.configured.pop(agent, None)
        summary.failed[agent] = error
    return summary
