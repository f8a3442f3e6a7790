"""MCP server dependencies declared by skills."""

from ._check import McpDependencyCheckResult, check_dependencies
from ._collect import McpDependencyInfo, build_allowed_tools_by_server, collect_dependencies

__all__ = [
    "McpDependencyCheckResult",
    "McpDependencyInfo",
    "build_allowed_tools_by_server",
    "check_dependencies",
    "collect_dependencies",
]
