"""Agent families and config path resolution."""

from ._families import (
    AGENT_FAMILIES,
    AgentFamily,
    PlatformPath,
    ProjectPath,
    Schema,
    detect_installed_agents,
    display_name,
    get_family,
)
from ._paths import get_agent_config_path, get_agent_config_path_lenient

__all__ = [
    "AGENT_FAMILIES",
    "AgentFamily",
    "PlatformPath",
    "ProjectPath",
    "Schema",
    "detect_installed_agents",
    "display_name",
    "get_agent_config_path",
    "get_agent_config_path_lenient",
    "get_family",
]
