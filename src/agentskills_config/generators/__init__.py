"""Agent-config generators and their registry."""

from ._description import SKILLS_AGENT_DESCRIPTION_MARKDOWN
from ._github_copilot import GitHubCopilotGenerator
from ._kiro import KiroGenerator
from ._opencode import OpenCodeAgentGenerator, OpenCodeMcpGenerator
from ._protocols import ConfigGenerator
from ._registry import (
    ConfigGeneratorRegistry,
    build_config_generator_registry,
    build_server_file_registry,
)
from ._vscode import VsCodeGenerator
from ._writer import write_generated_config

__all__ = [
    "SKILLS_AGENT_DESCRIPTION_MARKDOWN",
    "ConfigGenerator",
    "ConfigGeneratorRegistry",
    "GitHubCopilotGenerator",
    "KiroGenerator",
    "OpenCodeAgentGenerator",
    "OpenCodeMcpGenerator",
    "VsCodeGenerator",
    "build_config_generator_registry",
    "build_server_file_registry",
    "write_generated_config",
]
