"""Terminal access for the question widgets.

Every read and write the widgets perform goes through a Terminal, so a
scripted stand-in can replace it in tests:
- click for single keypress reads, line prompts and output
- prompt_toolkit for the line editor used by the cursor-mode input widget
- ANSI escape sequences for moving the cursor up
"""

import logging
import os
import shutil
import sys
from typing import TextIO

import click
from prompt_toolkit import prompt as _toolkit_prompt
from prompt_toolkit.formatted_text import ANSI

_logging = logging.getLogger(__name__)

DEFAULT_WIDTH = 80

# Raw sequences as returned by click.getchar() on POSIX and Windows consoles
KEY_NAMES = {
    "\x1b[A": "up",
    "\x1bOA": "up",
    "\xe0H": "up",
    "\x00H": "up",
    "\x1b[B": "down",
    "\x1bOB": "down",
    "\xe0P": "down",
    "\x00P": "down",
    "\x1b[C": "right",
    "\x1bOC": "right",
    "\xe0M": "right",
    "\x00M": "right",
    "\x1b[D": "left",
    "\x1bOD": "left",
    "\xe0K": "left",
    "\x00K": "left",
    "\r": "enter",
    "\n": "enter",
    "\r\n": "enter",
    "\x1b": "escape",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\t": "tab",
}


def normalize_key(raw: str) -> str:
    """Translate a raw keypress into a key name.

    Arrow keys become 'up'/'down'/'left'/'right', Return becomes 'enter',
    and printable characters (including ' ') are returned unchanged.
    Unknown escape sequences are returned as-is so callers can ignore them.
    """
    return KEY_NAMES.get(raw, raw)


class Terminal:
    """Interactive terminal attached to the standard streams."""

    def __init__(self, input: TextIO | None = None, output: TextIO | None = None):
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def is_interactive(self) -> bool:
        """True when a user can answer, i.e. stdin is a TTY."""
        return _isatty(self.input)

    def can_move_cursor(self) -> bool:
        """True when cursor movement sequences will be honoured."""
        return _isatty(self.output) and os.environ.get("TERM", "") != "dumb"

    def has_keypress_support(self) -> bool:
        """True when single keypresses can be read without Enter."""
        return _isatty(self.input) and "INSIDE_EMACS" not in os.environ

    def keypress(self) -> str:
        """Block until a key is pressed and return its normalized name."""
        raw = click.getchar(echo=False)
        key = normalize_key(raw)
        _logging.debug(f"Key pressed: {key!r}")
        return key

    def prompt_line(self, prompt: str) -> str:
        """Read one line with a plain prompt. Empty input returns ''."""
        return click.prompt(
            prompt,
            default="",
            show_default=False,
            prompt_suffix="",
        )

    def edit_line(self, prompt: str, multiline: bool = False) -> str:
        """Read one line with the prompt_toolkit editor.

        With multiline set, long input soft-wraps onto further rows instead
        of scrolling horizontally.
        """
        return _toolkit_prompt(ANSI(prompt), wrap_lines=multiline)

    def write(self, text: str) -> None:
        click.echo(text, nl=False, file=self.output)

    def width(self) -> int:
        return shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns or DEFAULT_WIDTH

    def cursor_up(self, rows: int) -> None:
        """Move the cursor up by the given number of rows (no-op for 0)."""
        if rows > 0:
            self.write(f"\x1b[{rows}A")


def _isatty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        # Closed or stream-like objects without a file descriptor
        return False


__all__ = [
    "Terminal",
    "KEY_NAMES",
    "normalize_key",
]
