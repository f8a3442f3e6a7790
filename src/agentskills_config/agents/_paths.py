"""Resolve an agent identifier and scope to its MCP config file path."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping
from pathlib import Path

from ..errors import UnknownAgentError, UnsupportedPlatformError
from ..models.bundle import Scope
from ._families import AgentFamily, AgentPath, PlatformPath, ProjectPath, get_family

_UNSAFE_CHARS = re.compile(r"[^a-z0-9-]")


def get_agent_config_path(
    agent: str,
    base_dir: Path,
    scope: Scope = "local",
    *,
    home: Path | None = None,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return the config path for a known agent.

    Raises:
        UnknownAgentError: If ``agent`` is not a known family name or alias.
        UnsupportedPlatformError: If the agent only has OS-specific paths and
            ``platform`` is not one of them.
    """
    family = get_family(agent)
    if family is None:
        raise UnknownAgentError(agent)
    return _resolve(family, agent, base_dir, scope, home, platform, environ)


def get_agent_config_path_lenient(
    agent: str,
    base_dir: Path,
    scope: Scope = "local",
    *,
    home: Path | None = None,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Like get_agent_config_path, but unknown agents get ``.<sanitized-name>/mcp.json``."""
    family = get_family(agent)
    if family is None:
        root = _scope_root(base_dir, scope, home)
        sanitized = _UNSAFE_CHARS.sub("_", agent.lower())
        return root / f".{sanitized}" / "mcp.json"
    return _resolve(family, agent, base_dir, scope, home, platform, environ)


def _scope_root(base_dir: Path, scope: Scope, home: Path | None) -> Path:
    if scope == "global":
        return Path(home) if home is not None else Path.home()
    return Path(base_dir)


def _resolve(
    family: AgentFamily,
    agent: str,
    base_dir: Path,
    scope: Scope,
    home: Path | None,
    platform: str | None,
    environ: Mapping[str, str] | None,
) -> Path:
    path: AgentPath = family.global_path if scope == "global" else family.local_path
    if isinstance(path, ProjectPath):
        return _scope_root(base_dir, scope, home).joinpath(*path.parts)
    if isinstance(path, PlatformPath):
        return _platform_path(path, agent, home, platform, environ)
    raise TypeError(f"Unsupported path variant: {type(path)}")


def _platform_path(
    path: PlatformPath,
    agent: str,
    home: Path | None,
    platform: str | None,
    environ: Mapping[str, str] | None,
) -> Path:
    home = Path(home) if home is not None else Path.home()
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ

    if platform == "darwin" and path.darwin is not None:
        return home.joinpath(*path.darwin)
    if platform.startswith("linux") and path.linux is not None:
        config_home = environ.get("XDG_CONFIG_HOME") or str(home / ".config")
        return Path(config_home).joinpath(*path.linux)
    if platform == "win32" and path.win32 is not None:
        appdata = environ.get("APPDATA") or str(home / "AppData" / "Roaming")
        return Path(appdata).joinpath(*path.win32)
    raise UnsupportedPlatformError(agent, platform)
