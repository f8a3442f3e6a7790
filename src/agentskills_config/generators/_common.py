"""Helpers shared by the generators."""

from __future__ import annotations

from typing import Any

import frontmatter

from ..models.bundle import BundleServerConfig
from ..models.skill import WILDCARD


def tool_patterns(name: str, server: BundleServerConfig, prefix: str = "") -> list[str]:
    """``server/*`` for an unrestricted server, else one ``server/tool`` per named tool."""
    if server.allows_all_tools:
        return [f"{prefix}{name}/{WILDCARD}"]
    return [f"{prefix}{name}/{tool}" for tool in server.tools or []]


def server_fields(server: BundleServerConfig, *keys: str) -> dict[str, Any]:
    """The subset of ``keys`` that are set (non-empty) on ``server``, in ``keys`` order."""
    entry: dict[str, Any] = {}
    for key in keys:
        value = getattr(server, key)
        if value:
            entry[key] = value
    return entry


def render_markdown(metadata: dict[str, Any], body: str) -> str:
    post = frontmatter.Post(body, **metadata)
    return frontmatter.dumps(post, sort_keys=False) + "\n"
