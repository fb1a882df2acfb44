"""Custom exception types used by the volt CLI."""

from __future__ import annotations


class VoltError(RuntimeError):
    """Base class for errors raised while collecting project options."""


class PromptCancelled(VoltError):
    """Raised when the user aborts an interactive prompt."""

    def __init__(self, question: str) -> None:
        super().__init__(f"prompt cancelled: {question}")
        self.question = question


__all__ = ["PromptCancelled", "VoltError"]
