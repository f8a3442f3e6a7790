from __future__ import annotations

from collections.abc import Sequence

from ..models.skill import McpServerSpec, Skill
from ..params import placeholders
from ._result import ValidationResult


def validate_mcp_dependencies(skills: Sequence[Skill]) -> ValidationResult:
    """Check each skill's ``requires-mcp-servers`` entries.

    Errors: a server without a command, or a ``{{NAME}}`` placeholder with no
    matching parameter. Warnings: a server name declared with a different
    command, args or env than an earlier skill (the earlier declaration wins).
    """
    result = ValidationResult()
    first_spec: dict[str, tuple[str, McpServerSpec]] = {}

    for skill in skills:
        for spec in skill.metadata.requires_mcp_servers:
            path = f"{skill.name}.requires-mcp-servers.{spec.name}"

            if not spec.command.strip():
                result.error(f"{path}.command", f"{path}.command: Required")

            for token in _undeclared_placeholders(spec):
                result.error(
                    f"{path}.parameters",
                    f'Placeholder "{{{{{token}}}}}" has no parameter declaration',
                )

            seen = first_spec.setdefault(spec.name, (skill.name, spec))
            if seen[1] is not spec and _differs(seen[1], spec):
                result.warning(
                    path,
                    f'Server "{spec.name}" is declared differently by skills '
                    f'"{seen[0]}" and "{skill.name}"; the declaration from "{seen[0]}" is used',
                )

    return result


def _undeclared_placeholders(spec: McpServerSpec) -> list[str]:
    missing: list[str] = []
    for value in (spec.command, *spec.args, *spec.env.values()):
        for token in placeholders(value):
            if token not in spec.parameters and token not in missing:
                missing.append(token)
    return missing


def _differs(a: McpServerSpec, b: McpServerSpec) -> bool:
    return (a.command, a.args, a.env) != (b.command, b.args, b.env)
