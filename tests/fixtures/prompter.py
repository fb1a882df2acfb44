"""Scripted prompter used to drive the configuration questions offline."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Sequence

from volt.errors import PromptCancelled
from volt.prompts import Choice, Prompter

CANCEL = object()


class ScriptedPrompter(Prompter):
    """Replay pre-defined answers and record every question asked."""

    def __init__(self, answers: Iterable[Any] = ()) -> None:
        self._answers: Deque[Any] = deque(answers)
        self.asked: list[tuple[str, str, dict[str, Any]]] = []

    def _next(self, kind: str, message: str, **details: Any) -> Any:
        self.asked.append((kind, message, details))
        if not self._answers:
            raise AssertionError(f"unexpected {kind} prompt: {message}")
        answer = self._answers.popleft()
        if answer is CANCEL:
            raise PromptCancelled(message)
        return answer

    def text(
        self,
        message: str,
        *,
        default: str = "",
        validate: Callable[[str], bool | str] | None = None,
    ) -> str:
        answer = self._next("text", message, default=default)
        if validate is not None:
            outcome = validate(answer)
            if outcome is not True:
                raise AssertionError(f"scripted answer {answer!r} rejected: {outcome}")
        return answer

    def select(self, message: str, choices: Sequence[Choice], *, default: str) -> str:
        return self._next("select", message, choices=list(choices), default=default)

    def checkbox(
        self, message: str, choices: Sequence[Choice], *, checked: Sequence[str] = ()
    ) -> list[str]:
        return self._next("checkbox", message, choices=list(choices), checked=list(checked))

    @property
    def exhausted(self) -> bool:
        return not self._answers
