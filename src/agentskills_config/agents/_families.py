"""The closed table of supported agent families."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

# Top-level key holding the server mapping in an agent's on-disk config.
Schema = Literal["mcpServers", "servers", "mcp"]


@dataclass(frozen=True)
class ProjectPath:
    """A path relative to the scope root (project dir for local, home for global)."""

    parts: tuple[str, ...]


@dataclass(frozen=True)
class PlatformPath:
    """An OS-specific path.

    darwin parts are relative to the home directory, linux parts to XDG_CONFIG_HOME
    (default ~/.config), win32 parts to APPDATA (default ~/AppData/Roaming).
    A platform left as None is unsupported.
    """

    darwin: tuple[str, ...] | None = None
    linux: tuple[str, ...] | None = None
    win32: tuple[str, ...] | None = None


AgentPath = ProjectPath | PlatformPath


@dataclass(frozen=True)
class AgentFamily:
    name: str
    display_name: str
    local_path: AgentPath
    global_path: AgentPath
    schema: Schema = "mcpServers"
    aliases: tuple[str, ...] = ()
    detect_dirs: tuple[str, ...] = ()  # relative to home
    activation_hint: str | None = None

    @property
    def identifiers(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)


def _dot(agent: str, filename: str = "mcp.json") -> ProjectPath:
    return ProjectPath((f".{agent}", filename))


AGENT_FAMILIES: tuple[AgentFamily, ...] = (
    AgentFamily(
        name="claude-code",
        display_name="Claude Code",
        aliases=("claude",),
        local_path=_dot("claude"),
        global_path=_dot("claude"),
        detect_dirs=(".claude",),
    ),
    AgentFamily(
        name="claude-desktop",
        display_name="Claude Desktop",
        local_path=PlatformPath(
            darwin=("Library", "Application Support", "Claude", "claude_desktop_config.json"),
            linux=("Claude", "claude_desktop_config.json"),
            win32=("Claude", "claude_desktop_config.json"),
        ),
        global_path=PlatformPath(
            darwin=("Library", "Application Support", "Claude", "claude_desktop_config.json"),
            linux=("Claude", "claude_desktop_config.json"),
            win32=("Claude", "claude_desktop_config.json"),
        ),
        detect_dirs=("Library/Application Support/Claude", ".config/Claude"),
    ),
    AgentFamily(
        name="cline",
        display_name="Cline",
        local_path=_dot("cline"),
        global_path=_dot("cline"),
        detect_dirs=(".cline",),
    ),
    AgentFamily(
        name="cursor",
        display_name="Cursor",
        local_path=_dot("cursor"),
        global_path=_dot("cursor"),
        detect_dirs=(".cursor",),
    ),
    AgentFamily(
        name="continue",
        display_name="Continue",
        local_path=_dot("continue", "config.json"),
        global_path=_dot("continue", "config.json"),
        detect_dirs=(".continue",),
    ),
    AgentFamily(
        name="junie",
        display_name="Junie",
        local_path=_dot("junie"),
        global_path=_dot("junie"),
        detect_dirs=(".junie",),
    ),
    AgentFamily(
        name="kiro-cli",
        display_name="Kiro CLI",
        aliases=("kiro",),
        local_path=ProjectPath((".kiro", "settings", "mcp.json")),
        global_path=ProjectPath((".kiro", "settings", "mcp.json")),
        detect_dirs=(".kiro",),
        activation_hint="kiro-cli chat --agent skills-mcp",
    ),
    AgentFamily(
        name="zed",
        display_name="Zed",
        local_path=ProjectPath((".zed", "settings.json")),
        global_path=PlatformPath(
            darwin=(".config", "zed", "settings.json"),
            linux=("zed", "settings.json"),
            win32=("Zed", "settings.json"),
        ),
        detect_dirs=(".config/zed",),
    ),
    AgentFamily(
        name="opencode",
        display_name="OpenCode",
        schema="mcp",
        aliases=("opencode-cli",),
        local_path=ProjectPath(("opencode.json",)),
        global_path=ProjectPath((".config", "opencode", "opencode.json")),
        detect_dirs=(".config/opencode", ".opencode"),
        activation_hint="Switch to the skills-mcp agent with Tab in OpenCode",
    ),
    AgentFamily(
        name="github-copilot",
        display_name="GitHub Copilot",
        schema="servers",
        aliases=("copilot-cli", "copilot-coding-agent"),
        local_path=ProjectPath((".vscode", "mcp.json")),
        global_path=PlatformPath(
            darwin=("Library", "Application Support", "Code", "User", "mcp.json"),
            linux=("Code", "User", "mcp.json"),
            win32=("Code", "User", "mcp.json"),
        ),
        detect_dirs=(".copilot", ".vscode"),
        activation_hint="Pick the skills-mcp agent in the Copilot Chat agent dropdown",
    ),
    AgentFamily(
        name="windsurf",
        display_name="Windsurf",
        local_path=_dot("windsurf"),
        global_path=ProjectPath((".codeium", "windsurf", "mcp_config.json")),
        detect_dirs=(".codeium/windsurf",),
    ),
    AgentFamily(
        name="gemini-cli",
        display_name="Gemini CLI",
        aliases=("gemini",),
        local_path=_dot("gemini", "settings.json"),
        global_path=_dot("gemini", "settings.json"),
        detect_dirs=(".gemini",),
    ),
    AgentFamily(
        name="roo",
        display_name="Roo Code",
        local_path=_dot("roo"),
        global_path=_dot("roo"),
        detect_dirs=(".roo",),
    ),
)

_BY_IDENTIFIER: dict[str, AgentFamily] = {
    ident: family for family in AGENT_FAMILIES for ident in family.identifiers
}


def get_family(agent: str) -> AgentFamily | None:
    """Look up a family by name or alias; None for unknown identifiers."""
    return _BY_IDENTIFIER.get(agent)


def display_name(agent: str) -> str:
    family = get_family(agent)
    return family.display_name if family else agent


def detect_installed_agents(home: Path | None = None) -> list[str]:
    """Return the families whose detection directory exists under ``home``."""
    home = Path(home) if home is not None else Path.home()
    return [
        family.name
        for family in AGENT_FAMILIES
        if any((home / d).is_dir() for d in family.detect_dirs)
    ]
