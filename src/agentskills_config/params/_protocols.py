"""Protocols (ports) for parameter resolution."""

from __future__ import annotations

from typing import Protocol


class Prompter(Protocol):
    """Asks the user for a parameter value.

    Implementations raise SetupCancelledError when the user cancels.
    """

    def ask(
        self,
        message: str,
        *,
        description: str = "",
        sensitive: bool = False,
        default: str | None = None,
        example: str | None = None,
    ) -> str: ...
