"""Question evaluation: walk a question list and collect the answers.

Questions are asked strictly in declaration order. Before each one its
when() predicate sees a read-only copy of the answers collected so far;
a false result skips the question without any output or answer entry.
All checks on the question list run before the first prompt is written.
"""

import logging
from types import MappingProxyType
from typing import Any

import click

from .config import Settings, load_settings
from .errors import NotInteractiveError, QuestionError
from .questions import QUESTION_TYPES, QuestionSpec, QuestionType, Questions, questions
from .styles import QuestionStyle, get_style
from .styles.common import check_choices, get_symbols, resolve_default, resolve_defaults
from .terminal import Terminal

_logging = logging.getLogger(__name__)

_CALLABLE_ARGS = ("filter", "validate")


def default_prompt() -> str:
    """The marker prepended to every question: a yellow pointer and a space."""
    return click.style(get_symbols().pointer + " ", fg="yellow")


def _check_static_args(spec: QuestionSpec) -> None:
    """Check arguments that are known before evaluation starts."""
    entity = f"Question '{spec.name}'"

    if spec.when is not None and not callable(spec.when):
        raise QuestionError(f"{entity}: when must be a function")

    for arg in _CALLABLE_ARGS:
        value = spec.args.get(arg)
        if value is not None and not spec.is_lazy(arg) and not callable(value):
            raise QuestionError(f"{entity}: {arg} must be a function")

    if spec.type in (QuestionType.CHOOSE.value, QuestionType.CHECKBOX.value):
        if spec.is_lazy("choices"):
            return
        try:
            choices = check_choices(spec.args.get("choices", ()))
            if not spec.is_lazy("default"):
                if spec.type == QuestionType.CHOOSE.value:
                    resolve_default(choices, spec.args.get("default"))
                else:
                    resolve_defaults(choices, spec.args.get("default"))
        except QuestionError as e:
            raise QuestionError(f"{entity}: {e}") from e


def check_questions(qs: Questions) -> None:
    """Validate a question list without asking anything.

    Raises:
        QuestionError: On missing, empty or duplicate names, unknown
            question types, or malformed static arguments
    """
    specs = list(qs)

    for position, spec in enumerate(specs, start=1):
        if not isinstance(spec, QuestionSpec):
            raise QuestionError(
                f"Questions must be question declarations, "
                f"got {type(spec).__name__} at position {position}"
            )
        if not isinstance(spec.name, str) or not spec.name:
            raise QuestionError("Questions must have names")

    seen: set[str] = set()
    duplicates = []
    for spec in specs:
        if spec.name in seen and spec.name not in duplicates:
            duplicates.append(spec.name)
        seen.add(spec.name)
    if duplicates:
        raise QuestionError(f"Duplicate question names: {', '.join(duplicates)}")

    unknown = [spec.type for spec in specs if spec.type not in QUESTION_TYPES]
    if unknown:
        raise QuestionError(f"Unknown question types: {', '.join(dict.fromkeys(unknown))}")

    for spec in specs:
        _check_static_args(spec)


def ask_(
    qs: Questions,
    prompt: str | None = None,
    terminal: Terminal | None = None,
    style: QuestionStyle | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Ask a series of questions stored with questions().

    Args:
        qs: Questions stored with questions()
        prompt: Prepended to every message, defaults to default_prompt()
        terminal: Terminal to talk to, defaults to the standard streams
        style: Force a style instance instead of probing the terminal
        settings: Settings to use instead of the environment

    Returns:
        Dict of question name to answer, in the order questions were asked

    Raises:
        NotInteractiveError: If no user can answer (stdin is not a TTY)
        QuestionError: If the question list is malformed
        ConfigError: If the environment holds invalid settings
    """
    if terminal is None:
        terminal = Terminal()
    if prompt is None:
        prompt = default_prompt()

    if not terminal.is_interactive():
        raise NotInteractiveError("ask() can only be used in interactive mode")

    check_questions(qs)

    if style is None:
        style = get_style(terminal, settings if settings is not None else load_settings())
    handlers = style.handlers()

    answers: dict[str, Any] = {}

    for spec in qs:
        if spec.when is not None and not spec.when(MappingProxyType(dict(answers))):
            _logging.debug(f"Skipping question {spec.name!r}: when() is false")
            continue

        handler = handlers.get(spec.type)
        if handler is None:
            raise QuestionError(f"Unknown question type: {spec.type}")

        args = spec.resolve(MappingProxyType(dict(answers)))
        if spec.type != QuestionType.CONSTANT.value:
            args["message"] = prompt + str(args.get("message", ""))

        _logging.debug(f"Asking question {spec.name!r} ({spec.type})")
        answers[spec.name] = handler(**args)

    return answers


def ask(
    *specs: QuestionSpec,
    prompt: str | None = None,
    terminal: Terminal | None = None,
    **named: QuestionSpec,
) -> dict[str, Any]:
    """Ask questions at the command line and return all answers together.

    Each keyword argument is one question; its name is the key of the answer:

        ask(
            name=input("What is your name?"),
            cool=confirm("Are you cool?"),
            drink=choose("Select your poison!", ["Beer", "Wine"]),
            language=checkbox("Favorite languages?", ["C", "C++", "Python", "R"]),
        )

    'prompt' and 'terminal' are reserved and cannot be question names.
    """
    return ask_(questions(*specs, **named), prompt=prompt, terminal=terminal)


__all__ = [
    "ask",
    "ask_",
    "check_questions",
    "default_prompt",
]
