from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass
class ValidationIssue:
    level: Literal["error", "warning"]
    path: str  # "<skill>.requires-mcp-servers.<server>[.<field>]"
    message: str


@dataclass
class ValidationResult:
    """Findings for the MCP server declarations of a set of skills.

    ``valid`` is False only when there are errors; warnings (such as two skills
    declaring one server differently) do not block setup.
    """

    issues: list[ValidationIssue] = field(default_factory=list)

    def error(self, path: str, message: str) -> None:
        self.issues.append(ValidationIssue("error", path, message))

    def warning(self, path: str, message: str) -> None:
        self.issues.append(ValidationIssue("warning", path, message))

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "warning"]
