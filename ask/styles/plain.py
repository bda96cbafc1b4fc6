"""Plain question style: one prompt line per answer, no cursor movement.

Used when the terminal cannot move the cursor or read single keypresses.
Invalid answers print an apology and ask again, without limit.
"""

import logging

import click

from .base import QuestionStyle
from .common import (
    SORRY,
    check_choices,
    error_message,
    finish,
    get_symbols,
    parse_index,
    resolve_default,
    resolve_defaults,
    start,
)

_logging = logging.getLogger(__name__)

# Typed answers are shown in bold magenta
EMPH = {"fg": "magenta", "bold": True}


def _numbered(choices: list[str]) -> str:
    return "\n".join(f" {i}. {label}" for i, label in enumerate(choices, start=1))


class PlainStyle(QuestionStyle):
    name = "plain"

    def _read(self, prompt: str) -> str:
        try:
            return self.terminal.prompt_line(prompt)
        finally:
            self.terminal.write(finish())

    def _sorry(self, reply: str) -> None:
        _logging.debug(f"Rejected answer: {reply!r}")
        self.terminal.write(SORRY + "\n")

    def confirm(self, message, default=True):
        suffix = " (Y/n) " if default else " (y/N) "
        prompt = click.style(message, bold=True) + suffix + start(**EMPH)

        while True:
            reply = self._read(prompt)
            answer = reply.strip().lower()
            if answer == "":
                return bool(default)
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self._sorry(reply)

    def input(self, message, default="", filter=None, validate=None,
              nextline=True, wrap=True):
        if default:
            message = f"{message} ({default})"
        prompt = click.style(message, bold=True) + " " + start(**EMPH)

        while True:
            result = self._read(prompt)
            if result == "":
                result = default
            if validate is None:
                break
            outcome = validate(result)
            if outcome is True:
                break
            _logging.debug(f"Validation failed for {result!r}: {outcome}")
            self.terminal.write(error_message(outcome))

        if filter is not None:
            result = filter(result)
        return result

    def choose(self, message, choices, default=None):
        choices = check_choices(choices)
        default = resolve_default(choices, default)

        self.terminal.write(
            click.style(message, bold=True) + "\n" + _numbered(choices) + "\n"
        )

        hint = f" ({default}) " if default is not None else ""
        prompt = (
            click.style(get_symbols().question_mark, fg="green")
            + " "
            + hint
            + start(**EMPH)
        )

        while True:
            reply = self._read(prompt)
            if reply.strip() == "" and default is not None:
                return choices[default - 1]
            index = parse_index(reply, len(choices))
            if index is not None:
                return choices[index - 1]
            self._sorry(reply)

    def checkbox(self, message, choices, default=()):
        choices = check_choices(choices)
        defaults = resolve_defaults(choices, default)

        self.terminal.write(
            click.style(message, bold=True) + "\n" + _numbered(choices) + "\n"
        )

        prompt = (
            click.style(get_symbols().question_mark, fg="green")
            + " (Commas separated numbers, dash for nothing) "
            + start(**EMPH)
        )

        while True:
            reply = self._read(prompt)
            tokens = [token.strip() for token in reply.strip().split(",")]
            if len(tokens) > 1 and tokens[-1] == "":
                # "1,3," is read as "1,3"
                tokens.pop()
            if tokens == ["-"]:
                selected = set()
            elif tokens == [""]:
                selected = defaults
            else:
                parsed = [parse_index(token, len(choices)) for token in tokens]
                if None in parsed:
                    self._sorry(reply)
                    continue
                selected = set(parsed)
            return [choices[i - 1] for i in sorted(selected)]
