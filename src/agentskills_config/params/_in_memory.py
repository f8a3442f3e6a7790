"""Scripted prompter for tests and non-interactive runs (no terminal I/O)."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import SetupCancelledError


@dataclass
class PromptCall:
    message: str
    description: str
    sensitive: bool


class ScriptedPrompter:
    """Answers prompts from a fixed list, recording every call.

    Raises SetupCancelledError when the answers run out, or when the next answer is None.
    """

    def __init__(self, answers: list[str | None] | None = None) -> None:
        self._answers = list(answers or [])
        self.calls: list[PromptCall] = []

    def ask(
        self,
        message: str,
        *,
        description: str = "",
        sensitive: bool = False,
        default: str | None = None,
        example: str | None = None,
    ) -> str:
        self.calls.append(PromptCall(message, description, sensitive))
        if not self._answers:
            raise SetupCancelledError()
        answer = self._answers.pop(0)
        if answer is None:
            raise SetupCancelledError()
        return answer
