"""Runtime settings for ask, read from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import AskError


class ConfigError(AskError):
    """Raised when settings or a question file cannot be loaded.

    Provides detailed error messages including line numbers,
    column positions, and caret indicators for syntax errors.
    """
    pass


STYLE_ENV = "ASK_STYLE"
DEBUG_ENV = "ASK_DEBUG"

STYLE_CHOICES = ("auto", "fancy", "plain")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


@dataclass
class Settings:
    """Settings that apply to a whole evaluation."""
    style: str = "auto"
    debug: bool = False

    def __post_init__(self):
        if self.style not in STYLE_CHOICES:
            raise ValueError(
                f"style must be one of {', '.join(STYLE_CHOICES)}, got {self.style!r}"
            )


def _parse_flag(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean flag (1/0, true/false), got {value!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from environment variables.

    Priority:
    1. ASK_STYLE forces the 'fancy' or 'plain' style ('auto' probes the terminal)
    2. ASK_DEBUG enables debug logging in the command line tool

    Args:
        environ: Mapping to read from, defaults to os.environ

    Returns:
        Settings instance

    Raises:
        ConfigError: If a variable holds an unsupported value
    """
    if environ is None:
        environ = os.environ

    style = environ.get(STYLE_ENV, "auto").strip().lower() or "auto"
    debug = _parse_flag(DEBUG_ENV, environ.get(DEBUG_ENV, ""))

    try:
        return Settings(style=style, debug=debug)
    except ValueError as e:
        raise ConfigError(f"{STYLE_ENV}: {e}") from e


__all__ = [
    "ConfigError",
    "Settings",
    "STYLE_CHOICES",
    "load_settings",
]
