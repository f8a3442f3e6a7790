from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._collect import McpDependencyInfo

if TYPE_CHECKING:
    from ..config import McpConfigManager

logger = logging.getLogger(__name__)


@dataclass
class McpDependencyCheckResult:
    """Which required servers a client already has.

    Attributes:
        missing: Dependencies whose server key is absent, in input order.
        configured: Names of servers already present.
    """

    missing: list[McpDependencyInfo] = field(default_factory=list)
    configured: list[str] = field(default_factory=list)

    @property
    def all_configured(self) -> bool:
        return not self.missing


def check_dependencies(
    client: str,
    dependencies: Sequence[McpDependencyInfo],
    manager: McpConfigManager,
) -> McpDependencyCheckResult:
    """Partition ``dependencies`` by presence of their server key in the client's config.

    Only presence is checked; an existing entry is never compared to the skill's declaration.
    Read errors on the client's config propagate.
    """
    result = McpDependencyCheckResult()
    if not dependencies:
        return result
    servers = manager.read_config(client).mcp_servers
    for dep in dependencies:
        if dep.server_name in servers:
            result.configured.append(dep.server_name)
        else:
            result.missing.append(dep)
    logger.debug(
        "%s: %d configured, %d missing", client, len(result.configured), len(result.missing)
    )
    return result
