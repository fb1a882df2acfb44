"""Project name validation used by the CLI and the interactive prompts."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "INVALID_PROJECT_NAME",
    "ValidationResult",
    "effective_project_name",
    "strip_trailing_separator",
    "validate_project_name",
]


INVALID_PROJECT_NAME = (
    "Project name must only use lowercase alphanumeric characters, -, _, and may include a scope."
)

# Valid npm package name, optionally prefixed with an ``@scope/`` segment.
_PACKAGE_NAME = re.compile(r"(?:@[a-z0-9._-]+/)?[a-z0-9][a-z0-9._-]*")
_SEPARATOR = "/"
_BYPASS = frozenset({".", ""})


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of :func:`validate_project_name`.

    ``message`` is ``None`` for accepted names and carries the text shown to
    the user otherwise.
    """

    message: str | None = None

    @property
    def accepted(self) -> bool:
        return self.message is None

    def __bool__(self) -> bool:
        return self.accepted


_ACCEPTED = ValidationResult()
_REJECTED = ValidationResult(INVALID_PROJECT_NAME)


def strip_trailing_separator(value: str) -> str:
    """Remove a single trailing ``/`` from ``value``."""

    if value.endswith(_SEPARATOR):
        return value[: -len(_SEPARATOR)]
    return value


def effective_project_name(value: str) -> str:
    """Return the part of ``value`` that has to be a valid package name.

    The leftmost segment starting with ``@`` opens a scope and everything from
    there to the end is kept. Without a scope only the last path segment is
    used, so ``"apps/my-app"`` yields ``"my-app"``.

    Parameters
    ----------
    value:
        A directory path or package name as typed by the user. A single
        trailing ``/`` is ignored.
    """

    segments = strip_trailing_separator(value).split(_SEPARATOR)
    scope_index = next(
        (index for index, segment in enumerate(segments) if segment.startswith("@")),
        None,
    )
    if scope_index is None:
        return segments[-1]
    return _SEPARATOR.join(segments[scope_index:])


def validate_project_name(value: str) -> ValidationResult:
    """Check that ``value`` names a directory usable as an npm package.

    ``"."`` and the empty string are always accepted. Rejection is reported
    through the returned :class:`ValidationResult`, never by raising.

    Parameters
    ----------
    value:
        The raw answer from the command line or the interactive prompt. It may
        contain path separators and an ``@scope/`` segment.
    """

    if value in _BYPASS:
        return _ACCEPTED
    if _PACKAGE_NAME.fullmatch(effective_project_name(value)):
        return _ACCEPTED
    return _REJECTED
