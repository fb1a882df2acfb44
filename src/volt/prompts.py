"""Interactive prompts used to fill in options that were not passed as flags."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

import questionary

from .errors import PromptCancelled
from .naming import validate_project_name

__all__ = ["Choice", "Prompter", "QuestionaryPrompter", "project_name_validator"]

LOGGER = logging.getLogger(__name__)

# ``(value, label)`` pairs shown by select and checkbox prompts.
Choice = tuple[str, str]


def project_name_validator(value: str) -> bool | str:
    """Adapt :func:`validate_project_name` to questionary's validator protocol."""

    result = validate_project_name(value)
    return True if result.accepted else result.message


class Prompter(ABC):
    """Source of answers for the configuration questions."""

    @abstractmethod
    def text(
        self,
        message: str,
        *,
        default: str = "",
        validate: Callable[[str], bool | str] | None = None,
    ) -> str:
        """Ask for free-form text."""

    @abstractmethod
    def select(self, message: str, choices: Sequence[Choice], *, default: str) -> str:
        """Ask for exactly one of ``choices`` and return its value."""

    @abstractmethod
    def checkbox(
        self, message: str, choices: Sequence[Choice], *, checked: Sequence[str] = ()
    ) -> list[str]:
        """Ask for any subset of ``choices`` and return the selected values."""


class QuestionaryPrompter(Prompter):
    """:class:`Prompter` backed by questionary terminal widgets."""

    def text(
        self,
        message: str,
        *,
        default: str = "",
        validate: Callable[[str], bool | str] | None = None,
    ) -> str:
        kwargs = {"default": default}
        if validate is not None:
            kwargs["validate"] = validate
        return _answer(message, questionary.text(message, **kwargs).ask())

    def select(self, message: str, choices: Sequence[Choice], *, default: str) -> str:
        options = [questionary.Choice(title=label, value=value) for value, label in choices]
        return _answer(message, questionary.select(message, choices=options, default=default).ask())

    def checkbox(
        self, message: str, choices: Sequence[Choice], *, checked: Sequence[str] = ()
    ) -> list[str]:
        options = [
            questionary.Choice(title=label, value=value, checked=value in checked)
            for value, label in choices
        ]
        return list(_answer(message, questionary.checkbox(message, choices=options).ask()))


def _answer(message: str, value: Any) -> Any:
    # questionary's ``ask`` swallows KeyboardInterrupt and returns ``None``.
    if value is None:
        LOGGER.debug("prompt %r cancelled", message)
        raise PromptCancelled(message)
    return value
