"""Read, write and upsert agent MCP config files."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .._bridge import BRIDGE_SERVER_NAME, bridge_server_entry
from ..agents import get_agent_config_path
from ..errors import ConfigReadError, DirectoryCollisionError
from ..models.bundle import Scope
from ..models.mcp import AgentConfig
from ._adapters import get_schema_adapter

logger = logging.getLogger(__name__)


def atomic_write(path: Path, data: str) -> None:
    """Write ``data`` to ``path`` via a sibling temp file, refusing directory targets."""
    if path.is_dir():
        raise DirectoryCollisionError(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(data, encoding="utf-8")
    tmp.replace(path)


def dump_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def load_json(path: Path) -> dict[str, Any] | None:
    """Return the parsed JSON object at ``path``, or None if the file does not exist.

    Raises:
        DirectoryCollisionError: If ``path`` is a directory.
        ConfigReadError: If the file exists but cannot be read or is not a JSON object.
    """
    if path.is_dir():
        raise DirectoryCollisionError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        raise ConfigReadError(f"Cannot read {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise ConfigReadError(f"{path} is not valid UTF-8: {e}", path=path) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigReadError(f"Invalid JSON in {path}: {e}", path=path) from e
    if not isinstance(data, dict):
        raise ConfigReadError(f"Expected a JSON object in {path}", path=path)
    return data


def read_agent_config(path: Path, agent: str | None = None) -> AgentConfig:
    """Load an agent config in canonical form; a missing file yields an empty config.

    When ``agent`` uses a ``servers`` or ``mcp`` key, it is normalized to ``mcpServers``.

    Raises:
        ConfigReadError: If the file cannot be read or its server entries are malformed.
    """
    path = Path(path)
    raw = load_json(path)
    if raw is None:
        return AgentConfig()
    try:
        return get_schema_adapter(agent).to_standard(raw)
    except ValidationError as e:
        raise ConfigReadError(f"Invalid MCP config in {path}: {e}", path=path) from e


def write_agent_config(path: Path, config: AgentConfig, agent: str | None = None) -> None:
    """Persist ``config`` in the agent's on-disk schema, 2-space indented with a trailing newline."""
    path = Path(path)
    if path.is_dir():
        raise DirectoryCollisionError(path)
    existing = load_json(path)
    data = get_schema_adapter(agent).to_client(config, existing)
    atomic_write(path, dump_json(data))


def configure_agent_mcp(
    agent: str,
    base_dir: Path,
    scope: Scope = "local",
    *,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Upsert the bridge server into an agent's config, leaving every other key alone.

    Raises:
        UnknownAgentError: If ``agent`` is not a known agent identifier.
    """
    path = get_agent_config_path(agent, Path(base_dir), scope, home=home, environ=environ)
    config = read_agent_config(path, agent)
    config.mcp_servers[BRIDGE_SERVER_NAME] = bridge_server_entry()
    write_agent_config(path, config, agent)
    logger.info("Configured %s server for %s in %s", BRIDGE_SERVER_NAME, agent, path)
    return path
