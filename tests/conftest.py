from __future__ import annotations

import io

import pytest
from rich.console import Console

from restaurant.data import MENU_BY_KEY
from restaurant.models import MenuEntry


class ScriptedLines:
    """Answer prompts from a fixed script, then signal end of input."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


@pytest.fixture
def burger() -> MenuEntry:
    return MENU_BY_KEY["burger"]


@pytest.fixture
def pepsi() -> MenuEntry:
    return MENU_BY_KEY["pepsi"]


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def scripted():
    return ScriptedLines
