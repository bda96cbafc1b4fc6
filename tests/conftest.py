"""Pytest fixtures and utilities for ask tests."""

from typing import Generator
from unittest.mock import patch

import click
import pytest


class FakeTerminal:
    """Scripted stand-in for ask.terminal.Terminal.

    Keys and lines are consumed in order; everything written is captured.
    Reading past the script raises EOFError, like a closed terminal.
    """

    def __init__(
        self,
        keys=(),
        lines=(),
        interactive: bool = True,
        cursor: bool = True,
        keypress: bool = True,
        columns: int = 80,
    ):
        self.keys = list(keys)
        self.lines = list(lines)
        self.interactive = interactive
        self.cursor = cursor
        self.keypress_support = keypress
        self.columns = columns
        self.written: list[str] = []
        self.prompts: list[str] = []
        self.edit_calls: list[tuple[str, bool]] = []
        self.moves: list[int] = []

    def is_interactive(self) -> bool:
        return self.interactive

    def can_move_cursor(self) -> bool:
        return self.cursor

    def has_keypress_support(self) -> bool:
        return self.keypress_support

    def keypress(self) -> str:
        if not self.keys:
            raise EOFError("no more keys")
        return self.keys.pop(0)

    def prompt_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("no more lines")
        return self.lines.pop(0)

    def edit_line(self, prompt: str, multiline: bool = False) -> str:
        self.edit_calls.append((prompt, multiline))
        if not self.lines:
            raise EOFError("no more lines")
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.written.append(text)

    def width(self) -> int:
        return self.columns

    def cursor_up(self, rows: int) -> None:
        if rows > 0:
            self.moves.append(rows)
            self.written.append(f"\x1b[{rows}A")

    @property
    def output(self) -> str:
        """Everything written, with colors removed."""
        return click.unstyle("".join(self.written))

    @property
    def raw_output(self) -> str:
        return "".join(self.written)


@pytest.fixture
def fake_terminal():
    """Factory for scripted terminals."""

    def _create(**kwargs) -> FakeTerminal:
        return FakeTerminal(**kwargs)

    return _create


@pytest.fixture
def clean_env(monkeypatch) -> Generator[None, None, None]:
    """Remove ask environment variables for the duration of a test."""
    for name in ("ASK_STYLE", "ASK_DEBUG", "INSIDE_EMACS"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def mock_tty() -> Generator[None, None, None]:
    """Mock sys.stdin.isatty to return True."""
    with patch("sys.stdin.isatty", return_value=True):
        yield


@pytest.fixture
def mock_no_tty() -> Generator[None, None, None]:
    """Mock sys.stdin.isatty to return False."""
    with patch("sys.stdin.isatty", return_value=False):
        yield
