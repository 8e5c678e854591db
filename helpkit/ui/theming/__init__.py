# helpkit/ui/theming/__init__.py
# Console theme for help output

from .console_theme import (
    HELPKIT_STYLES,
    get_helpkit_theme,
    refresh_theme,
    auto_initialize_theme,
)

__all__ = [
    "HELPKIT_STYLES",
    "get_helpkit_theme",
    "refresh_theme",
    "auto_initialize_theme",
]
