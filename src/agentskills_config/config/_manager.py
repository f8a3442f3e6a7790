"""McpConfigManager: per-client view of configured MCP servers."""

from __future__ import annotations

import logging
from pathlib import Path

from ..agents import get_agent_config_path
from ..errors import ServerNotConfiguredError
from ..models.bundle import Scope
from ..models.mcp import AgentConfig
from ._io import read_agent_config, write_agent_config

logger = logging.getLogger(__name__)


class McpConfigManager:
    def __init__(self, base_dir: Path, scope: Scope = "local", home: Path | None = None) -> None:
        self._base_dir = Path(base_dir)
        self._scope = scope
        self._home = home

    def get_config_path(self, client: str) -> Path:
        return get_agent_config_path(client, self._base_dir, self._scope, home=self._home)

    def read_config(self, client: str) -> AgentConfig:
        return read_agent_config(self.get_config_path(client), client)

    def is_server_configured(self, client: str, server_name: str) -> bool:
        """True if the server key is present; the entry's contents are not compared."""
        return server_name in self.read_config(client).mcp_servers

    def remove_server(self, client: str, server_name: str) -> None:
        path = self.get_config_path(client)
        config = read_agent_config(path, client)
        if server_name not in config.mcp_servers:
            raise ServerNotConfiguredError(server_name, path)
        del config.mcp_servers[server_name]
        write_agent_config(path, config, client)
        logger.info("Removed %s from %s", server_name, path)


def make_config_manager(
    base_dir: Path | None = None,
    scope: Scope = "local",
    home: Path | None = None,
) -> McpConfigManager:
    """Build a McpConfigManager.

    base_dir: defaults to the current working directory
    home: defaults to the user's home directory (used for global scope)
    """
    return McpConfigManager(base_dir or Path.cwd(), scope=scope, home=home)
