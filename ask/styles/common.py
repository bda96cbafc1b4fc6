"""Helpers shared by the plain and fancy question styles."""

import math
import sys
import textwrap
from dataclasses import dataclass, field

import click
from wcwidth import wcswidth

from ..errors import QuestionError


@dataclass(frozen=True)
class Symbols:
    pointer: str
    tick: str
    cross: str
    radio_on: str
    radio_off: str
    question_mark: str


UNICODE_SYMBOLS = Symbols(
    pointer="❯",
    tick="✔",
    cross="✖",
    radio_on="◉",
    radio_off="◯",
    question_mark="❓",
)

ASCII_SYMBOLS = Symbols(
    pointer=">",
    tick="v",
    cross="x",
    radio_on="(*)",
    radio_off="( )",
    question_mark="?",
)


def get_symbols(stream=None) -> Symbols:
    """Pick glyphs the output stream can encode."""
    stream = stream if stream is not None else sys.stdout
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        "".join(vars(UNICODE_SYMBOLS).values()).encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return ASCII_SYMBOLS
    return UNICODE_SYMBOLS


RESET = "\x1b[0m"


def start(**styles) -> str:
    """Opening escape codes of a click style, without the reset."""
    return click.style("", reset=False, **styles)


def finish() -> str:
    return RESET


def text_width(text: str) -> int:
    """Number of terminal columns the text occupies, ignoring escape codes."""
    plain = click.unstyle(text)
    width = wcswidth(plain)
    return width if width >= 0 else len(plain)


def make_spaces(count: int) -> str:
    return " " * max(count, 0)


def rows_needed(text: str, columns: int) -> int:
    """Terminal rows a single line of text wraps onto."""
    return max(1, math.ceil(text_width(text) / max(columns, 1)))


def wrap_text(text: str, columns: int) -> list[str]:
    """Word-wrap text into lines indented by two spaces."""
    lines = textwrap.wrap(
        text,
        width=max(columns - 1, 10),
        initial_indent="  ",
        subsequent_indent="  ",
    )
    return lines or ["  "]


def finalized(message: str, answer: str) -> str:
    """Join a message and its echoed answer on one line."""
    stripped = click.unstyle(message).rstrip()
    separator = " " if stripped[-1:] in ("?", "!", ":", ".") else ": "
    return message.rstrip() + separator + answer


def error_message(text) -> str:
    """A validation error line, prefixed with a red cross."""
    cross = click.style(get_symbols().cross, fg="red")
    return f"{finish()}{cross} {text}\n"


SORRY = "Sorry, I did not get that."


def check_choices(choices) -> list[str]:
    """Return the choices as a list of strings, rejecting empty lists."""
    if isinstance(choices, str) or not hasattr(choices, "__iter__"):
        raise QuestionError(
            f"choices must be a list of strings, got {type(choices).__name__}"
        )
    labels = [str(choice) for choice in choices]
    if not labels:
        raise QuestionError("choices must not be empty")
    return labels


def match_choice(choices: list[str], value: str) -> int | None:
    """1-based index of an exact or unambiguous prefix match, else None."""
    if value in choices:
        return choices.index(value) + 1
    matches = [i for i, choice in enumerate(choices, start=1) if choice.startswith(value)]
    if len(matches) == 1 and value:
        return matches[0]
    return None


def _index(choices: list[str], value) -> int | None:
    if isinstance(value, str):
        return match_choice(choices, value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise QuestionError(f"default must be an index or a string, got {value!r}")
    if isinstance(value, float) and math.isnan(value):
        return None
    if not math.isfinite(value) or value != int(value) or not 1 <= value <= len(choices):
        raise QuestionError(
            f"default index {value!r} is out of range 1..{len(choices)}"
        )
    return int(value)


def resolve_default(choices: list[str], default) -> int | None:
    """Resolve a choose() default to a 1-based index, or None for no default."""
    if default is None:
        return None
    return _index(choices, default)


def resolve_defaults(choices: list[str], default) -> set[int]:
    """Resolve checkbox() defaults to a set of 1-based indices.

    Strings that match no choice (or several) are dropped.
    """
    if default is None:
        return set()
    if isinstance(default, (str, int, float)):
        default = [default]
    indices = (_index(choices, value) for value in default)
    return {index for index in indices if index is not None}


def parse_index(token: str, count: int) -> int | None:
    """Parse a whole number in 1..count, or return None."""
    try:
        number = float(token.strip())
    except ValueError:
        return None
    if not number.is_integer() or not 1 <= number <= count:
        return None
    return int(number)


@dataclass
class RenderState:
    """Cursor position and selection of a list widget (1-based)."""
    choices: list[str]
    current: int = 1
    selected: set[int] = field(default_factory=set)

    def __post_init__(self):
        if not self.choices:
            raise QuestionError("choices must not be empty")
        if not 1 <= self.current <= len(self.choices):
            raise QuestionError(
                f"cursor position {self.current} is out of range 1..{len(self.choices)}"
            )

    def move_up(self) -> bool:
        if self.current == 1:
            return False
        self.current -= 1
        return True

    def move_down(self) -> bool:
        if self.current == len(self.choices):
            return False
        self.current += 1
        return True

    def toggle(self) -> None:
        if self.current in self.selected:
            self.selected.discard(self.current)
        else:
            self.selected.add(self.current)

    def selection(self) -> list[str]:
        return [self.choices[i - 1] for i in sorted(self.selected)]

    @property
    def label(self) -> str:
        return self.choices[self.current - 1]
