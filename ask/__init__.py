"""Ask questions to the user at the command line and get the answers.

    from ask import ask, input, confirm, choose, checkbox

    answers = ask(
        name=input("What is your name?"),
        cool=confirm("Are you cool?"),
        drink=choose("Select your poison!", ["Beer", "Wine"]),
        language=checkbox("Favorite languages?", ["C", "C++", "Python", "R"]),
    )

Question types:
- input: one line of text input
- confirm: a yes/no question
- choose: choose one item from a list
- checkbox: select any number of items from a list
- constant: not a question, a fixed value

Each builder accepts a 'when' function, called with the answers so far;
when it returns False the question is skipped and leaves no answer.
"""

import logging
import sys

from .config import ConfigError, Settings, load_settings
from .engine import ask, ask_, check_questions, default_prompt
from .errors import (
    AskError,
    NotInteractiveError,
    QuestionError,
    format_error,
    format_field_error,
    format_suggestion,
)
from .questions import (
    Lazy,
    QuestionSpec,
    QuestionType,
    Questions,
    checkbox,
    choose,
    confirm,
    constant,
    input,
    lazy,
    questions,
)
from .terminal import Terminal

__version__ = "1.0.0"


def setup_logging(debug: bool = False) -> None:
    """Send log records to stderr, at DEBUG level when debug is set."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


__all__ = [
    "AskError",
    "ConfigError",
    "Lazy",
    "NotInteractiveError",
    "QuestionError",
    "QuestionSpec",
    "QuestionType",
    "Questions",
    "Settings",
    "Terminal",
    "ask",
    "ask_",
    "check_questions",
    "checkbox",
    "choose",
    "confirm",
    "constant",
    "default_prompt",
    "format_error",
    "format_field_error",
    "format_suggestion",
    "input",
    "lazy",
    "load_settings",
    "questions",
    "setup_logging",
]
