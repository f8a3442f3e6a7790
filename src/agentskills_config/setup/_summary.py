from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class DependencySetupSummary:
    """Outcome of writing skill-required servers into a batch of agents.

    Attributes:
        added: Servers newly written into each agent's server config. Agents that
            needed nothing are absent.
        regenerated: Servers listed in each regenerated agent file, whether or
            not the previous file already had them.
        failed: Error message per agent that could not be updated.
    """

    added: dict[str, list[str]] = field(default_factory=dict)
    regenerated: dict[str, list[str]] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)

    def merge(self, other: DependencySetupSummary) -> None:
        for agent, servers in other.added.items():
            self.added.setdefault(agent, []).extend(servers)
        for agent, servers in other.regenerated.items():
            self.regenerated.setdefault(agent, []).extend(servers)
        self.failed.update(other.failed)


@dataclass
class SetupSummary:
    configured: dict[str, list[Path]] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)
    dependencies: DependencySetupSummary = field(default_factory=DependencySetupSummary)

    @property
    def any_configured(self) -> bool:
        return bool(self.configured)
