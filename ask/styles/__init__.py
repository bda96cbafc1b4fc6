"""Question styles: the rendering backends behind each question type.

- plain: line-mode prompts read with click, no cursor movement
- fancy: keypress-driven widgets redrawn in place

The style is picked once per evaluation by get_style() and used for every
question of that evaluation.
"""

import logging

from ..config import Settings
from ..terminal import Terminal
from .base import QuestionStyle
from .fancy import FancyStyle
from .plain import PlainStyle

_logging = logging.getLogger(__name__)

STYLES: dict[str, type[QuestionStyle]] = {
    FancyStyle.name: FancyStyle,
    PlainStyle.name: PlainStyle,
}


def get_style(terminal: Terminal, settings: Settings | None = None) -> QuestionStyle:
    """Select the style for one evaluation.

    The fancy style needs both cursor movement and single keypress reads;
    anything less falls back to the plain style. Settings.style forces one.
    """
    requested = settings.style if settings is not None else "auto"
    if requested != "auto":
        style_cls = STYLES[requested]
    elif terminal.can_move_cursor() and terminal.has_keypress_support():
        style_cls = FancyStyle
    else:
        style_cls = PlainStyle
    _logging.debug(f"Using {style_cls.name} style (requested: {requested})")
    return style_cls(terminal)


__all__ = [
    "QuestionStyle",
    "FancyStyle",
    "PlainStyle",
    "STYLES",
    "get_style",
]
