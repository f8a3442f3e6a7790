"""Registry of agent-config generators keyed by the agent types they support."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._github_copilot import GitHubCopilotGenerator
from ._kiro import KiroGenerator
from ._opencode import OpenCodeAgentGenerator, OpenCodeMcpGenerator
from ._vscode import VsCodeGenerator

if TYPE_CHECKING:
    from ..models.bundle import BundleConfig, GeneratedConfig, GeneratorMetadata, GeneratorOptions
    from ._protocols import ConfigGenerator

logger = logging.getLogger(__name__)


class ConfigGeneratorRegistry:
    """Generators in registration order; the first one supporting an agent wins."""

    def __init__(self) -> None:
        self._generators: list[ConfigGenerator] = []

    def register(self, generator: ConfigGenerator) -> None:
        self._generators.append(generator)
        logger.debug("Registered generator %s", generator.get_metadata().name)

    def get_generator(self, agent: str) -> ConfigGenerator | None:
        for generator in self._generators:
            if generator.supports(agent):
                return generator
        return None

    def supports(self, agent: str) -> bool:
        return self.get_generator(agent) is not None

    def generate(
        self, agent: str, config: BundleConfig, options: GeneratorOptions
    ) -> GeneratedConfig | None:
        """Run the generator for ``agent``; None means no generator supports it."""
        generator = self.get_generator(agent)
        if generator is None:
            return None
        return generator.generate(config, options)

    def list_generators(self) -> list[GeneratorMetadata]:
        seen: set[str] = set()
        result: list[GeneratorMetadata] = []
        for generator in self._generators:
            meta = generator.get_metadata()
            if meta.name in seen:
                continue
            seen.add(meta.name)
            result.append(meta)
        return result

    def get_supported_agent_types(self) -> list[str]:
        return sorted({t for g in self._generators for t in g.agent_types})

    def clear(self) -> None:
        self._generators.clear()


def build_config_generator_registry() -> ConfigGeneratorRegistry:
    """Registry of the rich agent-file generators (Kiro, GitHub Copilot, OpenCode)."""
    registry = ConfigGeneratorRegistry()
    registry.register(KiroGenerator())
    registry.register(GitHubCopilotGenerator())
    registry.register(OpenCodeAgentGenerator())
    return registry


def build_server_file_registry() -> ConfigGeneratorRegistry:
    """Registry of the plain server files written alongside rich agent files."""
    registry = ConfigGeneratorRegistry()
    registry.register(VsCodeGenerator())
    registry.register(OpenCodeMcpGenerator())
    return registry
