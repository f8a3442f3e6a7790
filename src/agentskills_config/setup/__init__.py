"""Setup orchestration: bridge server, generated agent files and skill dependencies."""

from ._dependencies import configure_skill_mcp_deps_for_agents, resolve_dependencies
from ._generate import generate_skills_mcp_agent, scope_root
from ._run import configure_bridge, run_setup
from ._summary import DependencySetupSummary, SetupSummary

__all__ = [
    "DependencySetupSummary",
    "SetupSummary",
    "configure_bridge",
    "configure_skill_mcp_deps_for_agents",
    "generate_skills_mcp_agent",
    "resolve_dependencies",
    "run_setup",
    "scope_root",
]
