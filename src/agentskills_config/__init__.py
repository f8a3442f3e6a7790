from .agents import (
    AGENT_FAMILIES,
    AgentFamily,
    detect_installed_agents,
    get_agent_config_path,
    get_agent_config_path_lenient,
)
from .config import (
    McpConfigManager,
    configure_agent_mcp,
    make_config_manager,
    read_agent_config,
    write_agent_config,
)
from .dependencies import (
    McpDependencyCheckResult,
    McpDependencyInfo,
    build_allowed_tools_by_server,
    check_dependencies,
    collect_dependencies,
)
from .errors import (
    AgentSkillsError,
    ConfigReadError,
    DirectoryCollisionError,
    LoadError,
    ServerNotConfiguredError,
    SetupCancelledError,
    UnknownAgentError,
    UnsupportedPlatformError,
)
from .generators import (
    ConfigGeneratorRegistry,
    build_config_generator_registry,
    build_server_file_registry,
    write_generated_config,
)
from .loaders import discover_skills, load_installed_skills, load_skill
from .models import (
    AgentConfig,
    BundleConfig,
    BundleServerConfig,
    ConfigMode,
    GeneratedConfig,
    GeneratorOptions,
    McpServerEntry,
    McpServerSpec,
    ParameterSpec,
    Scope,
    Skill,
    SkillMetadata,
)
from .params import Prompter, ScriptedPrompter, apply_params, resolve_parameters
from .setup import (
    DependencySetupSummary,
    SetupSummary,
    configure_skill_mcp_deps_for_agents,
    generate_skills_mcp_agent,
    run_setup,
)
from .validation import ValidationIssue, ValidationResult, validate_mcp_dependencies

__all__ = [
    "AGENT_FAMILIES",
    "AgentConfig",
    "AgentFamily",
    "AgentSkillsError",
    "BundleConfig",
    "BundleServerConfig",
    "ConfigGeneratorRegistry",
    "ConfigMode",
    "ConfigReadError",
    "DependencySetupSummary",
    "DirectoryCollisionError",
    "GeneratedConfig",
    "GeneratorOptions",
    "LoadError",
    "McpConfigManager",
    "McpDependencyCheckResult",
    "McpDependencyInfo",
    "McpServerEntry",
    "McpServerSpec",
    "ParameterSpec",
    "Prompter",
    "Scope",
    "ScriptedPrompter",
    "ServerNotConfiguredError",
    "SetupCancelledError",
    "SetupSummary",
    "Skill",
    "SkillMetadata",
    "UnknownAgentError",
    "UnsupportedPlatformError",
    "ValidationIssue",
    "ValidationResult",
    "apply_params",
    "build_allowed_tools_by_server",
    "build_config_generator_registry",
    "build_server_file_registry",
    "check_dependencies",
    "collect_dependencies",
    "configure_agent_mcp",
    "configure_skill_mcp_deps_for_agents",
    "detect_installed_agents",
    "discover_skills",
    "generate_skills_mcp_agent",
    "get_agent_config_path",
    "get_agent_config_path_lenient",
    "load_installed_skills",
    "load_skill",
    "make_config_manager",
    "read_agent_config",
    "resolve_parameters",
    "run_setup",
    "validate_mcp_dependencies",
    "write_agent_config",
]
