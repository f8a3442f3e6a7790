"""Parameter substitution for MCP server templates."""

from ._engine import apply_params, placeholders, resolve_parameters, substitute
from ._in_memory import PromptCall, ScriptedPrompter
from ._protocols import Prompter

__all__ = [
    "PromptCall",
    "Prompter",
    "ScriptedPrompter",
    "apply_params",
    "placeholders",
    "resolve_parameters",
    "substitute",
]
