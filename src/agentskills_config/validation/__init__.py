from ._dependencies import validate_mcp_dependencies
from ._result import ValidationIssue, ValidationResult

__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "validate_mcp_dependencies",
]
