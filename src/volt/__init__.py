"""Interactive front end for bootstrapping Electron applications.

The package validates project names the way npm expects them, merges command
line flags with answers to interactive prompts, and produces a
:class:`CliResults` model describing the project to generate.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import CliResults, ConfigOverrides, Language, Package, resolve_config
from .errors import PromptCancelled, VoltError
from .naming import INVALID_PROJECT_NAME, ValidationResult, validate_project_name

__all__ = [
    "CliResults",
    "ConfigOverrides",
    "INVALID_PROJECT_NAME",
    "Language",
    "Package",
    "PromptCancelled",
    "ValidationResult",
    "VoltError",
    "resolve_config",
    "validate_project_name",
]
