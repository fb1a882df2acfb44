"""Configuration collected by the CLI and handed to the project generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import effective_project_name, strip_trailing_separator, validate_project_name
from .prompts import Prompter, project_name_validator

__all__ = [
    "DEFAULT_PROJECT_NAME",
    "CliResults",
    "ConfigOverrides",
    "Language",
    "Package",
    "resolve_config",
]

LOGGER = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "my-electron-app"


class Language(str, Enum):
    """Source language of the generated application."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"

    @property
    def label(self) -> str:
        return _LANGUAGE_LABELS[self]


class Package(str, Enum):
    """Optional packages that can be added to the generated application."""

    TAILWIND = "tailwind"
    ESLINT = "eslint"

    @property
    def label(self) -> str:
        return _PACKAGE_LABELS[self]


_LANGUAGE_LABELS = {Language.TYPESCRIPT: "TypeScript", Language.JAVASCRIPT: "JavaScript"}
_PACKAGE_LABELS = {Package.TAILWIND: "Tailwind CSS", Package.ESLINT: "ESLint"}

DEFAULT_LANGUAGE = Language.TYPESCRIPT
DEFAULT_PACKAGES: Tuple[Package, ...] = (Package.TAILWIND, Package.ESLINT)

PROJECT_NAME_QUESTION = "What would you like to name your project?"
LANGUAGE_QUESTION = "Will you be using TypeScript or JavaScript?"
PACKAGES_QUESTION = "Which packages would you like to enable?"


class CliResults(BaseModel):
    """Options for a new project, validated on construction."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(DEFAULT_PROJECT_NAME, description="Application name and target directory.")
    language: Language = Field(DEFAULT_LANGUAGE, description="Source language of the application.")
    packages: Tuple[Package, ...] = Field(DEFAULT_PACKAGES, description="Optional packages to install.")
    use_defaults: bool = Field(False, description="Whether the prompts were bypassed with --default.")

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        result = validate_project_name(value)
        if not result:
            raise ValueError(result.message)
        return value

    @field_validator("packages")
    @classmethod
    def _dedupe_packages(cls, value: Tuple[Package, ...]) -> Tuple[Package, ...]:
        # Keep the declaration order so the hand-off is stable.
        return tuple(package for package in Package if package in value)

    @property
    def directory(self) -> Path:
        """Path the generator should write the project to."""

        return Path(strip_trailing_separator(self.project_name) or ".")

    @property
    def app_name(self) -> str:
        """Package name of the application, scope included."""

        if self.project_name in (".", ""):
            return Path.cwd().name
        return effective_project_name(self.project_name)

    def has_package(self, package: Package) -> bool:
        return package in self.packages

    def context(self) -> Mapping[str, object]:
        """Return a JSON compatible mapping for the generator."""

        return {
            "project_name": self.project_name,
            "app_name": self.app_name,
            "directory": str(self.directory),
            "language": self.language.value,
            "packages": [package.value for package in self.packages],
            "use_defaults": self.use_defaults,
        }


@dataclass(slots=True)
class ConfigOverrides:
    """Values supplied on the command line. ``None`` means "not given"."""

    project_name: str | None = None
    language: Language | None = None
    tailwind: bool | None = None
    eslint: bool | None = None

    def toggles(self) -> Dict[Package, bool | None]:
        return {Package.TAILWIND: self.tailwind, Package.ESLINT: self.eslint}


def resolve_config(
    overrides: ConfigOverrides,
    prompter: Prompter | None = None,
    *,
    use_defaults: bool = False,
) -> CliResults:
    """Merge flags, prompt answers and defaults into :class:`CliResults`.

    Each option is taken from ``overrides`` when present. Otherwise the user
    is asked through ``prompter``, unless ``use_defaults`` is set or no
    prompter is available, in which case the default is used.
    """

    interactive = prompter is not None and not use_defaults

    project_name = overrides.project_name
    if project_name is None:
        if interactive:
            project_name = prompter.text(
                PROJECT_NAME_QUESTION,
                default=DEFAULT_PROJECT_NAME,
                validate=project_name_validator,
            )
            # An emptied answer falls back to the suggested name.
            project_name = project_name or DEFAULT_PROJECT_NAME
        else:
            project_name = DEFAULT_PROJECT_NAME
        LOGGER.debug("project name resolved to %r", project_name)

    language = overrides.language
    if language is None:
        if interactive:
            answer = prompter.select(
                LANGUAGE_QUESTION,
                [(item.value, item.label) for item in Language],
                default=DEFAULT_LANGUAGE.value,
            )
            language = Language(answer)
        else:
            language = DEFAULT_LANGUAGE
        LOGGER.debug("language resolved to %s", language.value)

    toggles = overrides.toggles()
    pending = [package for package, enabled in toggles.items() if enabled is None]
    if pending:
        if interactive:
            selected = set(
                prompter.checkbox(
                    PACKAGES_QUESTION,
                    [(package.value, package.label) for package in pending],
                    checked=[package.value for package in pending if package in DEFAULT_PACKAGES],
                )
            )
            answers = {package: package.value in selected for package in pending}
        else:
            answers = {package: package in DEFAULT_PACKAGES for package in pending}
        LOGGER.debug("package toggles resolved to %s", {p.value: v for p, v in answers.items()})
        toggles.update(answers)

    packages = tuple(package for package, enabled in toggles.items() if enabled)
    return CliResults(
        project_name=project_name,
        language=language,
        packages=packages,
        use_defaults=use_defaults,
    )
