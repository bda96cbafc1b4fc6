"""Base class of the question styles."""

from typing import Any, Callable

from ..questions import QuestionType
from ..terminal import Terminal


class QuestionStyle:
    """One rendering backend.

    Subclasses implement one method per question type; handlers() maps the
    type names onto them.
    """

    name = ""

    def __init__(self, terminal: Terminal):
        self.terminal = terminal

    def handlers(self) -> dict[str, Callable[..., Any]]:
        return {
            QuestionType.INPUT.value: self.input,
            QuestionType.CONFIRM.value: self.confirm,
            QuestionType.CHOOSE.value: self.choose,
            QuestionType.CHECKBOX.value: self.checkbox,
            QuestionType.CONSTANT.value: self.constant,
        }

    def input(self, message, default="", filter=None, validate=None,
              nextline=True, wrap=True):
        raise NotImplementedError

    def confirm(self, message, default=True):
        raise NotImplementedError

    def choose(self, message, choices, default=None):
        raise NotImplementedError

    def checkbox(self, message, choices, default=()):
        raise NotImplementedError

    def constant(self, value=None, message=""):
        return value
