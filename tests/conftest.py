from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.fixtures.prompter import ScriptedPrompter  # noqa: E402


@pytest.fixture()
def prompter_factory():
    """Build a :class:`ScriptedPrompter` replaying the given answers."""

    return ScriptedPrompter
