"""Resolve ``{{NAME}}`` placeholders in MCP server templates."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping

from ..models.mcp import McpServerEntry
from ..models.skill import McpServerSpec
from ._protocols import Prompter

logger = logging.getLogger(__name__)

_ENV_DEFAULT = re.compile(r"^\{\{ENV:([A-Za-z0-9_]+)\}\}$")
_PLACEHOLDER = re.compile(r"\{\{([A-Za-z0-9_-]+)\}\}")


def resolve_parameters(
    spec: McpServerSpec,
    prompter: Prompter,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Resolve a value for each declared parameter of ``spec``.

    A default of the form ``{{ENV:VAR}}`` is read from ``environ`` (an unset variable
    counts as no default). Parameters with a default are never prompted for. Optional
    parameters without a default are omitted, leaving their placeholder in place.
    Required parameters without a default are asked for through ``prompter``.

    Raises:
        SetupCancelledError: If the user cancels a prompt.
    """
    environ = os.environ if environ is None else environ
    result: dict[str, str] = {}

    for name, param in spec.parameters.items():
        resolved = param.default
        if resolved is not None:
            m = _ENV_DEFAULT.match(resolved)
            if m:
                resolved = environ.get(m.group(1))

        if resolved is not None:
            result[name] = resolved
            continue

        if not param.required:
            continue

        logger.debug("Prompting for parameter %s of server %s", name, spec.name)
        result[name] = prompter.ask(
            f"{spec.name} needs {name}",
            description=param.description,
            sensitive=param.sensitive,
            example=param.example,
        )

    return result


def substitute(value: str, params: Mapping[str, str]) -> str:
    """Replace ``{{KEY}}`` tokens with values from ``params``; unknown tokens are left as-is."""
    return _PLACEHOLDER.sub(lambda m: params.get(m.group(1), m.group(0)), value)


def placeholders(value: str) -> list[str]:
    return _PLACEHOLDER.findall(value)


def apply_params(spec: McpServerSpec, params: Mapping[str, str]) -> McpServerEntry:
    """Render ``spec`` into a server entry, substituting command, args and env values."""
    fields: dict[str, object] = {"command": substitute(spec.command, params)}
    if spec.args:
        fields["args"] = [substitute(a, params) for a in spec.args]
    if spec.env:
        fields["env"] = {k: substitute(v, params) for k, v in spec.env.items()}
    if spec.cwd:
        fields["cwd"] = spec.cwd
    return McpServerEntry(**fields)
