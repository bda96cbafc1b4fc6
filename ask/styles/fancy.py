"""Fancy question style: keypress-driven widgets redrawn in place.

Every widget leaves the cursor at a known row when it returns, so the next
question is printed directly below the previous answer:
- confirm and input end on the row after their finalized line
- choose and checkbox replace the message line with the answer, blank
  their list and move back up to where the list began
"""

import logging
from contextlib import contextmanager

import click

from .base import QuestionStyle
from .common import (
    RenderState,
    check_choices,
    error_message,
    finalized,
    finish,
    get_symbols,
    make_spaces,
    resolve_default,
    resolve_defaults,
    rows_needed,
    text_width,
    wrap_text,
)

_logging = logging.getLogger(__name__)

NAV_KEYS = ("up", "down", "n", "p", "enter", " ")
UP_KEYS = ("up", "p")
DOWN_KEYS = ("down", "n")


def _blue(text: str) -> str:
    return click.style(text, fg="blue")


def _green(text: str) -> str:
    return click.style(text, fg="green")


class FancyStyle(QuestionStyle):
    name = "fancy"

    @contextmanager
    def _reset_on_error(self):
        try:
            yield
        except BaseException:
            self.terminal.write(finish())
            raise

    def _wait_for(self, keys) -> str:
        # Anything else is ignored, not rejected
        while True:
            key = self.terminal.keypress()
            if key in keys:
                return key

    def _draw(self, lines: list[str], empty: bool = False) -> None:
        if empty:
            lines = [make_spaces(text_width(line)) for line in lines]
        self.terminal.write("\n".join(lines) + "\n")

    def _redraw(self, lines: list[str]) -> None:
        self.terminal.cursor_up(len(lines))
        self._draw(lines)

    def _finish_list(self, message: str, answer: str, lines: list[str]) -> None:
        self.terminal.cursor_up(len(lines) + 1)
        line = finalized(message, answer)
        padding = make_spaces(text_width(message) - text_width(line))
        self.terminal.write("\r" + line + padding + "\n")
        self._draw(lines, empty=True)
        self.terminal.cursor_up(len(lines))

    def confirm(self, message, default=True):
        suffix = " (Y/n) " if default else " (y/N) "
        with self._reset_on_error():
            self.terminal.write(message + suffix)
            while True:
                key = self.terminal.keypress().lower()
                if key in ("y", "n", "enter"):
                    break
        answer = key == "y" or (key == "enter" and bool(default))
        symbols = get_symbols()
        glyph = _green(symbols.tick) if answer else click.style(symbols.cross, fg="red")
        self.terminal.write(glyph + "\n")
        return answer

    def input(self, message, default="", filter=None, validate=None,
              nextline=True, wrap=True):
        columns = self.terminal.width()
        original = message
        if default:
            message = f"{message} ({default})"
        prompt = "  " if nextline else message + " "

        with self._reset_on_error():
            while True:
                if nextline:
                    self.terminal.write(message + "\n")
                typed = self.terminal.edit_line(prompt, multiline=nextline)
                result = typed if typed != "" else default
                if validate is None:
                    break
                outcome = validate(result)
                if outcome is True:
                    break
                _logging.debug(f"Validation failed for {result!r}: {outcome}")
                self.terminal.write(error_message(outcome))

            if nextline:
                self._echo_below(original, message, prompt + typed, result, wrap, columns)
            else:
                self._echo_inline(original, prompt + typed, result, columns)

        if filter is not None:
            result = filter(result)
        return result

    def _echo_below(self, original, message, entered, result, wrap, columns):
        """Replace the message and the typed rows with the accepted answer."""
        message_rows = rows_needed(message, columns)
        input_rows = rows_needed(entered, columns)

        self.terminal.cursor_up(message_rows + input_rows)
        padding = make_spaces(text_width(message) - text_width(original))
        self.terminal.write("\r" + original + padding + "\n")
        for _ in range(input_rows):
            self.terminal.write("\r" + make_spaces(columns - 1) + "\n")
        self.terminal.cursor_up(input_rows)

        lines = wrap_text(result, columns) if wrap else ["  " + result]
        self.terminal.write("\n".join(_green(line) for line in lines) + "\n")

        shown_rows = sum(rows_needed(line, columns) for line in lines)
        if shown_rows < input_rows:
            self.terminal.cursor_up(input_rows - shown_rows)

    def _echo_inline(self, original, entered, result, columns):
        """Rewrite the prompt line as 'message answer'.

        The inline editor scrolls long input sideways, so it always spans one row.
        """
        self.terminal.cursor_up(1)
        line = original + " " + _green(result)
        padding = make_spaces(min(text_width(entered), columns - 1) - text_width(line))
        self.terminal.write("\r" + line + padding + "\n")

    def _choose_lines(self, state: RenderState) -> list[str]:
        pointer = _blue(get_symbols().pointer)
        lines = []
        for index, label in enumerate(state.choices, start=1):
            if index == state.current:
                lines.append(f" {pointer} {_blue(label)}")
            else:
                lines.append(f"   {label}")
        return lines

    def choose(self, message, choices, default=None):
        choices = check_choices(choices)
        state = RenderState(choices, current=resolve_default(choices, default) or 1)

        with self._reset_on_error():
            self.terminal.write(message + "\n")
            self._draw(self._choose_lines(state))
            while True:
                key = self._wait_for(NAV_KEYS)
                if key in UP_KEYS:
                    moved = state.move_up()
                elif key in DOWN_KEYS:
                    moved = state.move_down()
                else:
                    break
                if moved:
                    self._redraw(self._choose_lines(state))

            self._finish_list(message, _green(state.label), self._choose_lines(state))

        return state.label

    def _checkbox_lines(self, state: RenderState) -> list[str]:
        symbols = get_symbols()
        pointer = _blue(symbols.pointer)
        lines = []
        for index, label in enumerate(state.choices, start=1):
            cursor = pointer if index == state.current else " "
            if index in state.selected:
                lines.append(f" {cursor} {_green(symbols.radio_on)} {_green(label)}")
            else:
                lines.append(f" {cursor} {symbols.radio_off} {label}")
        return lines

    def checkbox(self, message, choices, default=()):
        choices = check_choices(choices)
        state = RenderState(choices, selected=resolve_defaults(choices, default))

        with self._reset_on_error():
            self.terminal.write(message + "\n")
            self._draw(self._checkbox_lines(state))
            while True:
                key = self._wait_for(NAV_KEYS)
                if key in UP_KEYS:
                    moved = state.move_up()
                elif key in DOWN_KEYS:
                    moved = state.move_down()
                elif key == " ":
                    state.toggle()
                    moved = True
                else:
                    break
                if moved:
                    self._redraw(self._checkbox_lines(state))

            answer = ", ".join(_green(label) for label in state.selection())
            self._finish_list(message, answer, self._checkbox_lines(state))

        return state.selection()
