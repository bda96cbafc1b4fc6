"""Tests for the plain (line-mode) question style."""

import click
import pytest

from ask.errors import QuestionError
from ask.styles import PlainStyle
from ask.styles.common import SORRY


def _style(fake_terminal, lines):
    terminal = fake_terminal(lines=lines, cursor=False, keypress=False)
    return PlainStyle(terminal), terminal


class TestPlainConfirm:
    """Tests for PlainStyle.confirm."""

    @pytest.mark.parametrize("reply", ["y", "Y", "yes", "YES", "Yes"])
    def test_positive_answers(self, fake_terminal, reply):
        style, _ = _style(fake_terminal, [reply])
        assert style.confirm("Are you cool?") is True

    @pytest.mark.parametrize("reply", ["n", "N", "no", "NO"])
    def test_negative_answers(self, fake_terminal, reply):
        style, _ = _style(fake_terminal, [reply])
        assert style.confirm("Are you cool?") is False

    @pytest.mark.parametrize("default", [True, False])
    def test_empty_input_returns_default(self, fake_terminal, default):
        style, _ = _style(fake_terminal, [""])
        assert style.confirm("Are you cool?", default=default) is default

    def test_invalid_input_reprompts(self, fake_terminal):
        style, terminal = _style(fake_terminal, ["maybe", "sure", "y"])
        assert style.confirm("Are you cool?") is True
        assert len(terminal.prompts) == 3
        assert terminal.output.count(SORRY) == 2

    def test_suffix_shows_default(self, fake_terminal):
        style, terminal = _style(fake_terminal, ["", ""])
        style.confirm("Yes?", default=True)
        style.confirm("No?", default=False)
        assert "(Y/n)" in click.unstyle(terminal.prompts[0])
        assert "(y/N)" in click.unstyle(terminal.prompts[1])


class TestPlainInput:
    """Tests for PlainStyle.input."""

    def test_returns_typed_text(self, fake_terminal):
        style, _ = _style(fake_terminal, ["Alice"])
        assert style.input("What is your name?") == "Alice"

    def test_empty_input_returns_default(self, fake_terminal):
        style, terminal = _style(fake_terminal, [""])
        assert style.input("What is your name?", default="Bob") == "Bob"
        assert "What is your name? (Bob)" in click.unstyle(terminal.prompts[0])

    def test_no_default_in_prompt_when_empty(self, fake_terminal):
        style, terminal = _style(fake_terminal, ["x"])
        style.input("Name?")
        assert "()" not in click.unstyle(terminal.prompts[0])

    def test_validation_failure_reprompts_with_message(self, fake_terminal):
        style, terminal = _style(fake_terminal, ["", "abc", "42"])

        def validate(text):
            return True if text.isdigit() else "Please enter a number"

        assert style.input("Age?", validate=validate) == "42"
        assert terminal.output.count("Please enter a number") == 2
        assert len(terminal.prompts) == 3

    def test_validate_sees_default_for_empty_input(self, fake_terminal):
        seen = []
        style, _ = _style(fake_terminal, [""])

        def validate(text):
            seen.append(text)
            return True

        assert style.input("Name?", default="Bob", validate=validate) == "Bob"
        assert seen == ["Bob"]

    def test_validator_must_return_true_exactly(self, fake_terminal):
        style, terminal = _style(fake_terminal, ["a", "b"])
        answers = iter([1, True])
        assert style.input("Name?", validate=lambda text: next(answers)) == "b"
        assert "1" in terminal.output

    def test_filter_applied_after_validation(self, fake_terminal):
        style, _ = _style(fake_terminal, ["alice"])
        result = style.input(
            "Name?",
            validate=lambda text: text.islower() or "lower case only",
            filter=str.upper,
        )
        assert result == "ALICE"


class TestPlainChoose:
    """Tests for PlainStyle.choose."""

    def test_lists_numbered_choices(self, fake_terminal):
        style, terminal = _style(fake_terminal, ["1"])
        style.choose("Select your poison!", ["Beer", "Wine"])
        assert " 1. Beer\n 2. Wine\n" in terminal.output

    def test_empty_input_uses_default(self, fake_terminal):
        style, _ = _style(fake_terminal, [""])
        assert style.choose("Drink?", ["Beer", "Wine"], default=1) == "Beer"

    def test_number_selects_choice(self, fake_terminal):
        style, _ = _style(fake_terminal, ["2"])
        assert style.choose("Drink?", ["Beer", "Wine"], default=1) == "Wine"

    @pytest.mark.parametrize("bad", ["3", "x", "0", "-1", "1.5"])
    def test_invalid_input_reprompts(self, fake_terminal, bad):
        style, terminal = _style(fake_terminal, [bad, "2"])
        assert style.choose("Drink?", ["Beer", "Wine"], default=1) == "Wine"
        assert terminal.output.count(SORRY) == 1

    def test_whole_float_is_accepted(self, fake_terminal):
        style, _ = _style(fake_terminal, ["2.0"])
        assert style.choose("Drink?", ["Beer", "Wine"]) == "Wine"

    def test_empty_input_without_default_reprompts(self, fake_terminal):
        style, terminal = _style(fake_terminal, ["", "1"])
        assert style.choose("Drink?", ["Beer", "Wine"]) == "Beer"
        assert SORRY in terminal.output

    def test_default_shown_in_prompt(self, fake_terminal):
        style, terminal = _style(fake_terminal, [""])
        style.choose("Drink?", ["Beer", "Wine"], default=2)
        assert "(2)" in click.unstyle(terminal.prompts[0])

    def test_string_default_matches_prefix(self, fake_terminal):
        style, _ = _style(fake_terminal, [""])
        assert style.choose("Drink?", ["Beer", "Wine"], default="Wi") == "Wine"

    def test_ambiguous_string_default_means_no_default(self, fake_terminal):
        style, terminal = _style(fake_terminal, ["", "2"])
        assert style.choose("Lang?", ["Perl", "Python"], default="P") == "Python"
        assert SORRY in terminal.output

    def test_out_of_range_default_raises(self, fake_terminal):
        style, _ = _style(fake_terminal, [""])
        with pytest.raises(QuestionError):
            style.choose("Drink?", ["Beer", "Wine"], default=3)


class TestPlainCheckbox:
    """Tests for PlainStyle.checkbox."""

    CHOICES = ["C", "C++", "Python", "R"]

    def test_selects_in_choice_order(self, fake_terminal):
        style, _ = _style(fake_terminal, ["1,3"])
        assert style.checkbox("Languages?", self.CHOICES) == ["C", "Python"]

    def test_token_order_does_not_matter(self, fake_terminal):
        style, _ = _style(fake_terminal, ["3, 1"])
        assert style.checkbox("Languages?", self.CHOICES) == ["C", "Python"]

    def test_duplicates_are_removed(self, fake_terminal):
        style, _ = _style(fake_terminal, ["4,1,4"])
        assert style.checkbox("Languages?", self.CHOICES) == ["C", "R"]

    def test_trailing_comma_is_ignored(self, fake_terminal):
        style, terminal = _style(fake_terminal, ["1,3,"])
        assert style.checkbox("Languages?", self.CHOICES) == ["C", "Python"]
        assert SORRY not in terminal.output

    def test_dash_selects_nothing(self, fake_terminal):
        style, _ = _style(fake_terminal, ["-"])
        assert style.checkbox("Languages?", self.CHOICES, default=[1, 2]) == []

    def test_empty_input_uses_default(self, fake_terminal):
        style, _ = _style(fake_terminal, [""])
        assert style.checkbox("Languages?", self.CHOICES, default=[4, 1]) == ["C", "R"]

    def test_empty_input_without_default_selects_nothing(self, fake_terminal):
        style, _ = _style(fake_terminal, [""])
        assert style.checkbox("Languages?", self.CHOICES) == []

    def test_string_defaults(self, fake_terminal):
        style, _ = _style(fake_terminal, [""])
        result = style.checkbox("Languages?", self.CHOICES, default=["C", "Py"])
        assert result == ["C", "Python"]

    @pytest.mark.parametrize("bad", ["5", "0", "1,x", "1,,2", "2.5"])
    def test_invalid_tokens_reprompt(self, fake_terminal, bad):
        style, terminal = _style(fake_terminal, [bad, "2"])
        assert style.checkbox("Languages?", self.CHOICES) == ["C++"]
        assert terminal.output.count(SORRY) == 1

    def test_prompt_explains_format(self, fake_terminal):
        style, terminal = _style(fake_terminal, ["-"])
        style.checkbox("Languages?", self.CHOICES)
        assert "Commas separated numbers, dash for nothing" in click.unstyle(
            terminal.prompts[0]
        )


class TestPlainConstant:
    def test_returns_value_without_io(self, fake_terminal):
        style, terminal = _style(fake_terminal, [])
        assert style.constant(value=42) == 42
        assert terminal.written == []
        assert terminal.prompts == []
