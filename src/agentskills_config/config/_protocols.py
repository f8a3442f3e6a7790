"""Protocols (ports) for on-disk config schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..models.mcp import AgentConfig


class SchemaAdapter(Protocol):
    """Converts one on-disk config schema to and from the canonical AgentConfig."""

    def to_standard(self, raw: dict[str, Any]) -> AgentConfig: ...

    def to_client(self, config: AgentConfig, existing: dict[str, Any] | None) -> dict[str, Any]:
        """Render ``config`` in the client's schema.

        ``existing`` is the raw file currently on disk (None if absent), for schemas
        that carry entries the canonical form cannot represent.
        """
        ...
