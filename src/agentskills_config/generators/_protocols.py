"""Protocols (ports) for agent-config generators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from ..models.bundle import BundleConfig, GeneratedConfig, GeneratorMetadata, GeneratorOptions


class ConfigGenerator(Protocol):
    """Serializes a bundle config into one agent family's file format."""

    agent_types: tuple[str, ...]

    def generate(self, config: BundleConfig, options: GeneratorOptions) -> GeneratedConfig: ...

    def supports(self, agent: str) -> bool: ...

    def get_output_path(self, options: GeneratorOptions) -> Path: ...

    def get_metadata(self) -> GeneratorMetadata: ...
