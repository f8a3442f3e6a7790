from .bundle import (
    BundleConfig,
    BundleServerConfig,
    ConfigMode,
    GeneratedConfig,
    GeneratorMetadata,
    GeneratorOptions,
    Scope,
    ToolPermission,
)
from .mcp import AgentConfig, McpServerEntry
from .skill import WILDCARD, McpServerSpec, ParameterSpec, Skill, SkillMetadata

__all__ = [
    "WILDCARD",
    "AgentConfig",
    "BundleConfig",
    "BundleServerConfig",
    "ConfigMode",
    "GeneratedConfig",
    "GeneratorMetadata",
    "GeneratorOptions",
    "McpServerEntry",
    "McpServerSpec",
    "ParameterSpec",
    "Scope",
    "Skill",
    "SkillMetadata",
    "ToolPermission",
]
