"""Error types and message formatting for ask.

Configuration problems (bad question lists, bad settings, bad question
files) are raised before anything is shown to the user. Answers that fail
validation never surface here: the widgets re-prompt instead.

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Field errors use structured format: '<entity> field '<field>' <issue>'
- Use present tense: 'must be', 'is required'
"""


class AskError(Exception):
    """Base class for all errors raised by ask."""


class QuestionError(AskError):
    """Raised when a question list cannot be asked as declared."""


class NotInteractiveError(QuestionError):
    """Raised when questions are asked without a terminal attached."""


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Examples:
        >>> format_error("file not found")
        'Error: file not found'
    """
    return f"Error: {message}"


def format_field_error(entity: str, field: str, issue: str) -> str:
    """Format a field validation error with structured format.

    Examples:
        >>> format_field_error("Question 'drink'", "choices", "must not be empty")
        "Question 'drink' field 'choices' must not be empty"
    """
    return f"{entity} field '{field}' {issue}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Examples:
        >>> format_suggestion("not a terminal", "run 'ask' from an interactive shell")
        "Error: not a terminal. Hint: run 'ask' from an interactive shell"
    """
    return f"{format_error(message)}. Hint: {suggestion}"


__all__ = [
    "AskError",
    "QuestionError",
    "NotInteractiveError",
    "format_error",
    "format_field_error",
    "format_suggestion",
]
