"""Question declarations.

A question is declared with one of the builders below. Builders only
capture their arguments; nothing is read or printed until the question
list is evaluated by ask() or ask_().

Arguments wrapped in lazy() are evaluated at dispatch time, with the
answers collected so far, so a later question can depend on earlier ones:

    ask(
        name=input("What is your name?"),
        greeting=confirm(lazy(lambda answers: f"Hello {answers['name']}, ok?")),
    )
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Iterator, Mapping

Answers = Mapping[str, Any]
When = Callable[[Answers], bool]


class QuestionType(str, Enum):
    INPUT = "input"
    CONFIRM = "confirm"
    CHOOSE = "choose"
    CHECKBOX = "checkbox"
    CONSTANT = "constant"


QUESTION_TYPES = tuple(t.value for t in QuestionType)


@dataclass(frozen=True)
class Lazy:
    """An argument evaluated against the answers so far at dispatch time."""
    fn: Callable[[Answers], Any]

    def evaluate(self, answers: Answers) -> Any:
        return self.fn(answers)


def lazy(fn: Callable[[Answers], Any]) -> Lazy:
    """Defer a builder argument until the question is about to be asked."""
    if not callable(fn):
        raise TypeError(f"lazy() needs a callable, got {type(fn).__name__}")
    return Lazy(fn)


@dataclass(frozen=True)
class QuestionSpec:
    """A single declared question.

    Attributes:
        name: Key of the answer in the result mapping ('' until named)
        type: One of QUESTION_TYPES
        args: Builder arguments, possibly containing Lazy values
        when: Optional predicate over the answers so far
    """
    name: str
    type: str
    args: Mapping[str, Any] = field(default_factory=dict)
    when: When | None = None

    def named(self, name: str) -> "QuestionSpec":
        return replace(self, name=name)

    def is_lazy(self, arg: str) -> bool:
        return isinstance(self.args.get(arg), Lazy)

    def resolve(self, answers: Answers) -> dict[str, Any]:
        """Return the argument bundle with lazy arguments evaluated."""
        return {
            key: value.evaluate(answers) if isinstance(value, Lazy) else value
            for key, value in self.args.items()
        }


class Questions:
    """An ordered, immutable list of named questions for deferred asking."""

    def __init__(self, specs=()):
        self._specs: tuple[QuestionSpec, ...] = tuple(specs)

    def __iter__(self) -> Iterator[QuestionSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __getitem__(self, index: int) -> QuestionSpec:
        return self._specs[index]

    def __add__(self, other: "Questions") -> "Questions":
        if not isinstance(other, Questions):
            return NotImplemented
        return Questions(self._specs + other._specs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Questions):
            return NotImplemented
        return self._specs == other._specs

    def __repr__(self) -> str:
        return f"Questions({', '.join(self.names)})"

    @property
    def names(self) -> list[str]:
        return [getattr(spec, "name", "") for spec in self._specs]


def questions(*specs: QuestionSpec, **named: QuestionSpec) -> Questions:
    """Store a series of questions, to ask them later with ask_().

    Keyword arguments name their question; positional questions must
    already carry a name (see QuestionSpec.named). Nothing is validated
    here, problems are reported by ask_() before the first prompt.
    """
    items = list(specs)
    for name, spec in named.items():
        items.append(spec.named(name) if isinstance(spec, QuestionSpec) else spec)
    return Questions(items)


def _question(qtype: QuestionType, when: When | None, **args: Any) -> QuestionSpec:
    return QuestionSpec(name="", type=qtype.value, args=args, when=when)


def input(
    message: str | Lazy,
    default: str | Lazy = "",
    filter: Callable[[str], Any] | None = None,
    validate: Callable[[str], Any] | None = None,
    nextline: bool = True,
    wrap: bool = True,
    when: When | None = None,
) -> QuestionSpec:
    """One line of text input.

    Args:
        message: The message to print
        default: Returned when the user just presses enter ('' for none)
        filter: Called on the accepted text; its result is the answer
        validate: Returns True for valid input, an error message otherwise
        nextline: Cursor mode only, read the answer on its own line
        wrap: Cursor mode only, word-wrap the echoed answer
        when: Ask only if when(answers) is true
    """
    return _question(
        QuestionType.INPUT,
        when,
        message=message,
        default=default,
        filter=filter,
        validate=validate,
        nextline=nextline,
        wrap=wrap,
    )


def confirm(
    message: str | Lazy, default: bool | Lazy = True, when: When | None = None
) -> QuestionSpec:
    """A yes/no question. 'y'/'yes' and 'n'/'no' are accepted in any case."""
    return _question(QuestionType.CONFIRM, when, message=message, default=default)


def choose(
    message: str | Lazy,
    choices: list[str] | Lazy,
    default: int | str | None | Lazy = None,
    when: When | None = None,
) -> QuestionSpec:
    """Choose one item from a list.

    The default is a 1-based index or a string matched against the choices
    by unambiguous prefix; None means no default.
    """
    return _question(
        QuestionType.CHOOSE, when, message=message, choices=choices, default=default
    )


def checkbox(
    message: str | Lazy,
    choices: list[str] | Lazy,
    default: list[int | str] | int | str | Lazy = (),
    when: When | None = None,
) -> QuestionSpec:
    """Select any number of items from a list.

    Defaults are indices or strings, resolved like choose() defaults.
    """
    return _question(
        QuestionType.CHECKBOX, when, message=message, choices=choices, default=default
    )


def constant(value: Any, when: When | None = None) -> QuestionSpec:
    """Not a question: inject a fixed value into the answers."""
    return _question(QuestionType.CONSTANT, when, value=value)


__all__ = [
    "Answers",
    "Lazy",
    "QuestionSpec",
    "QuestionType",
    "QUESTION_TYPES",
    "Questions",
    "checkbox",
    "choose",
    "confirm",
    "constant",
    "input",
    "lazy",
    "questions",
]
