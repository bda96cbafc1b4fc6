"""Loading question lists from YAML or JSON files.

A question file holds a top-level 'questions' list. Each entry names its
question, its type and the builder arguments:

    questions:
      - name: cool
        type: confirm
        message: Are you cool?
      - name: drink
        type: choose
        message: Select your poison!
        choices: [Beer, Wine]
        default: 1
        when: {cool: true}

Functions cannot be written in a file, so three declarative forms replace
them:
- when: mapping of earlier question name to the answer it must have
- validate: {pattern: <regex>, message: <error text>} for input questions
- filter: one of FILTERS for input questions

JSON files are read by the same YAML parser.
"""

import re
from pathlib import Path
from typing import Any, Callable

import yaml

from .config import ConfigError
from .errors import format_field_error
from .questions import (
    QUESTION_TYPES,
    QuestionSpec,
    QuestionType,
    Questions,
    checkbox,
    choose,
    confirm,
    constant,
    input,
)

FILTERS: dict[str, Callable[[str], str]] = {
    "strip": str.strip,
    "lower": str.lower,
    "upper": str.upper,
    "title": str.title,
}

_COMMON_FIELDS = {"name", "type", "when"}

_TYPE_FIELDS = {
    QuestionType.INPUT.value: {"message", "default", "filter", "validate", "nextline", "wrap"},
    QuestionType.CONFIRM.value: {"message", "default"},
    QuestionType.CHOOSE.value: {"message", "choices", "default"},
    QuestionType.CHECKBOX.value: {"message", "choices", "default"},
    QuestionType.CONSTANT.value: {"value"},
}


def _format_syntax_error(original_text: str, error: yaml.MarkedYAMLError) -> str:
    """Format a YAML syntax error with line, caret, and context."""
    mark = error.problem_mark
    problem = error.problem or "invalid syntax"
    if mark is None:
        return f"Question file syntax error: {problem}"

    line_num = mark.line + 1
    col_num = mark.column + 1
    msg_parts = [f"Question file syntax error at line {line_num}, col {col_num}: {problem}"]

    lines = original_text.split("\n")
    if 1 <= line_num <= len(lines):
        msg_parts.append(lines[line_num - 1])
        msg_parts.append(" " * mark.column + "^")

    return "\n".join(msg_parts)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Question file not found: {path}")
    except PermissionError:
        raise ConfigError(f"Permission denied reading question file: {path}")
    except UnicodeDecodeError:
        raise ConfigError(f"Question file is not valid UTF-8: {path}")
    except IsADirectoryError:
        raise ConfigError(f"Question file path is not a file: {path}")
    except OSError as e:
        raise ConfigError(f"Error reading question file {path}: {e}")


def parse_question_file(path_or_text: Path | str) -> list[dict]:
    """Parse a question file into its raw list of question mappings.

    Args:
        path_or_text: Either a Path to a YAML/JSON file, or the file text

    Raises:
        ConfigError: If the file cannot be read, has syntax errors, or has
            no 'questions' list
        TypeError: If path_or_text is neither Path nor str
    """
    if isinstance(path_or_text, Path):
        text = _read_text(path_or_text)
    elif isinstance(path_or_text, str):
        text = path_or_text
    else:
        raise TypeError(f"path_or_text must be Path or str, got {type(path_or_text).__name__}")

    try:
        data = yaml.safe_load(text)
    except yaml.MarkedYAMLError as e:
        raise ConfigError(_format_syntax_error(text, e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Question file syntax error: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Question file must be a mapping, got {type(data).__name__}"
        )
    if "questions" not in data:
        raise ConfigError("Missing required field: questions")
    if not isinstance(data["questions"], list):
        raise ConfigError(
            f"questions must be a list, got {type(data['questions']).__name__}"
        )
    return data["questions"]


def _require_str_field(data: dict, field: str, entity: str) -> str:
    if field not in data:
        raise ConfigError(f"{entity} missing required field: {field}")
    if not isinstance(data[field], str) or not data[field].strip():
        raise ConfigError(format_field_error(entity, field, "must be a non-empty string"))
    return data[field]


def _optional_field(data: dict, field: str, entity: str, field_type: type | tuple) -> None:
    if field not in data or data[field] is None:
        return
    value = data[field]
    types = field_type if isinstance(field_type, tuple) else (field_type,)
    # YAML booleans are ints to isinstance()
    if (isinstance(value, bool) and bool not in types) or not isinstance(value, types):
        names = " or ".join(t.__name__ for t in types)
        raise ConfigError(format_field_error(entity, field, f"must be a {names} or null"))


def _require_choices(data: dict, entity: str) -> list[str]:
    if "choices" not in data:
        raise ConfigError(f"{entity} missing required field: choices")
    choices = data["choices"]
    if not isinstance(choices, list) or not choices:
        raise ConfigError(format_field_error(entity, "choices", "must be a non-empty list"))
    return [str(choice) for choice in choices]


def when_equals(conditions: dict[str, Any]) -> Callable[[Any], bool]:
    """A when() predicate requiring earlier answers to equal given values."""
    def predicate(answers) -> bool:
        return all(
            name in answers and answers[name] == expected
            for name, expected in conditions.items()
        )
    return predicate


def pattern_validator(pattern: str, message: str | None = None) -> Callable[[str], Any]:
    """A validate() function accepting text that fully matches a regex."""
    compiled = re.compile(pattern)
    error = message or f"Answer must match {pattern}"

    def validate(text: str):
        return True if compiled.fullmatch(text) else error
    return validate


def _build_when(data: dict, entity: str, earlier: list[str]):
    conditions = data.get("when")
    if conditions is None:
        return None
    if not isinstance(conditions, dict) or not conditions:
        raise ConfigError(format_field_error(entity, "when", "must be a non-empty mapping"))
    for name in conditions:
        if name not in earlier:
            raise ConfigError(
                format_field_error(entity, "when", f"refers to unknown question '{name}'")
            )
    return when_equals(conditions)


def _build_input(data: dict, entity: str, when) -> QuestionSpec:
    _optional_field(data, "default", entity, str)
    _optional_field(data, "nextline", entity, bool)
    _optional_field(data, "wrap", entity, bool)

    filter_fn = None
    if data.get("filter") is not None:
        if data["filter"] not in FILTERS:
            raise ConfigError(
                format_field_error(entity, "filter", f"must be one of {', '.join(FILTERS)}")
            )
        filter_fn = FILTERS[data["filter"]]

    validate_fn = None
    rule = data.get("validate")
    if rule is not None:
        if not isinstance(rule, dict) or not isinstance(rule.get("pattern"), str):
            raise ConfigError(
                format_field_error(entity, "validate", "must be a mapping with a 'pattern' string")
            )
        try:
            validate_fn = pattern_validator(rule["pattern"], rule.get("message"))
        except re.error as e:
            raise ConfigError(
                format_field_error(entity, "validate", f"has an invalid pattern: {e}")
            ) from e

    return input(
        data["message"],
        default=data.get("default") or "",
        filter=filter_fn,
        validate=validate_fn,
        nextline=data.get("nextline", True),
        wrap=data.get("wrap", True),
        when=when,
    )


def _build_question(data: Any, position: int, earlier: list[str]) -> QuestionSpec:
    if not isinstance(data, dict):
        raise ConfigError(
            f"questions[{position}] must be a mapping, got {type(data).__name__}"
        )

    name = _require_str_field(data, "name", f"questions[{position}]")
    entity = f"Question '{name}'"
    if name in earlier:
        raise ConfigError(f"{entity} is declared more than once")

    qtype = _require_str_field(data, "type", entity)
    if qtype not in QUESTION_TYPES:
        raise ConfigError(
            format_field_error(entity, "type", f"must be one of {', '.join(QUESTION_TYPES)}")
        )

    unknown = sorted(set(data) - _COMMON_FIELDS - _TYPE_FIELDS[qtype])
    if unknown:
        raise ConfigError(f"{entity} has unknown fields: {', '.join(unknown)}")

    when = _build_when(data, entity, earlier)

    if qtype == QuestionType.CONSTANT.value:
        if "value" not in data:
            raise ConfigError(f"{entity} missing required field: value")
        return constant(data["value"], when=when).named(name)

    _require_str_field(data, "message", entity)

    if qtype == QuestionType.INPUT.value:
        spec = _build_input(data, entity, when)
    elif qtype == QuestionType.CONFIRM.value:
        _optional_field(data, "default", entity, bool)
        default = data.get("default")
        spec = confirm(data["message"], default=True if default is None else default, when=when)
    elif qtype == QuestionType.CHOOSE.value:
        choices = _require_choices(data, entity)
        _optional_field(data, "default", entity, (int, str))
        spec = choose(data["message"], choices, default=data.get("default"), when=when)
    else:
        choices = _require_choices(data, entity)
        _optional_field(data, "default", entity, (list, int, str))
        spec = checkbox(data["message"], choices, default=data.get("default") or (), when=when)

    return spec.named(name)


def load_questions(path_or_text: Path | str) -> Questions:
    """Load a question file into a Questions list ready for ask_().

    Raises:
        ConfigError: If the file is unreadable or any question is malformed
    """
    raw = parse_question_file(path_or_text)
    specs: list[QuestionSpec] = []
    for position, data in enumerate(raw):
        specs.append(_build_question(data, position, [spec.name for spec in specs]))
    return Questions(specs)


__all__ = [
    "FILTERS",
    "load_questions",
    "parse_question_file",
    "pattern_validator",
    "when_equals",
]
