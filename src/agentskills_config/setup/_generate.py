from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from .._bridge import AGENT_ID, BRIDGE_SERVER_NAME, build_bundle_config
from ..generators import (
    ConfigGeneratorRegistry,
    build_config_generator_registry,
    build_server_file_registry,
    write_generated_config,
)
from ..models.bundle import BundleServerConfig, GeneratorOptions, Scope

logger = logging.getLogger(__name__)


def scope_root(base_dir: Path, scope: Scope, home: Path | None = None) -> Path:
    if scope == "global":
        return Path(home) if home is not None else Path.home()
    return Path(base_dir)


def generate_skills_mcp_agent(
    agent: str,
    base_dir: Path,
    scope: Scope = "local",
    extra_servers: dict[str, BundleServerConfig] | None = None,
    include_agent_config: bool = True,
    *,
    home: Path | None = None,
    registry: ConfigGeneratorRegistry | None = None,
    server_files: ConfigGeneratorRegistry | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[Path]:
    """Write the skills agent for ``agent``: bridge server plus ``extra_servers``.

    The family's server file (``.vscode/mcp.json``, ``opencode.json``) is always
    written. Servers it already lists are kept as they are, except the bridge server,
    which is replaced. The rich agent file is written only when
    ``include_agent_config`` is set, and is regenerated from scratch.

    Returns:
        The paths written, server file first. Empty if ``agent`` has no generator.
    """
    registry = registry or build_config_generator_registry()
    server_files = server_files or build_server_file_registry()
    options = GeneratorOptions(
        base_dir=scope_root(base_dir, scope, home), agent_id=AGENT_ID, scope=scope, environ=environ
    )
    config = build_bundle_config(extra_servers)

    written: list[Path] = []
    companion = server_files.generate(agent, config, options)
    if companion is not None:
        written.append(write_generated_config(companion, replace=(BRIDGE_SERVER_NAME,)))
    if include_agent_config:
        generated = registry.generate(agent, config, options)
        if generated is not None:
            written.append(write_generated_config(generated))

    for path in written:
        logger.info("Wrote %s config for %s", path.name, agent)
    return written
