from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class AgentSkillsError(Exception):
    """Base class for faults raised by the configuration engine."""


class LoadError(AgentSkillsError):
    """Raised when loading a SKILL.md file fails.

    Attributes:
        path: The file or directory path that could not be loaded, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ConfigReadError(AgentSkillsError):
    """Raised when an existing agent config file cannot be read or parsed.

    A missing file is not an error; this covers invalid JSON and unreadable files,
    where the current state is unknown and must not be overwritten.
    """

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class DirectoryCollisionError(AgentSkillsError):
    """Raised when a config or generated file path is an existing directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Refusing to write {path}: it is a directory path instead of a file path"
        )


class UnknownAgentError(AgentSkillsError):
    """Raised by strict entry points for an agent identifier with no known family."""

    def __init__(self, agent: str) -> None:
        self.agent = agent
        super().__init__(f"Unknown agent type: {agent}")


class UnsupportedPlatformError(AgentSkillsError):
    """Raised when an agent only has OS-specific config paths and the OS is not one of them."""

    def __init__(self, agent: str, platform: str) -> None:
        self.agent = agent
        self.platform = platform
        super().__init__(f"Agent {agent} is not supported on platform {platform}")


class ServerNotConfiguredError(AgentSkillsError):
    """Raised when removing a server that is not present in an agent's config."""

    def __init__(self, server: str, path: Path) -> None:
        self.server = server
        self.path = path
        super().__init__(f"Server {server} not found in {path}")


class SetupCancelledError(Exception):
    """Raised when the user cancels an interactive prompt.

    Not an AgentSkillsError, so batch loops that recover from per-agent failures
    let it through.
    """

    def __init__(self, message: str = "MCP server configuration cancelled") -> None:
        super().__init__(message)
