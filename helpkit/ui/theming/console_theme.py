# helpkit/ui/theming/console_theme.py
# Console theme initialization & management for Rich styling

from __future__ import annotations

from ..core.rich_components import Theme
from ...helpkit_io.console import console, error_console

# fixed styles referenced by the logger
HELPKIT_STYLES = {
    "helpkit.banner": "dim",
    "helpkit.heading": "bold",
    "helpkit.synopsis": "bold green",
    "helpkit.name": "bold cyan",
    "helpkit.leader": "dim",
    "helpkit.diagnostic": "bold cyan",
    "error": "bold red",
}


def get_helpkit_theme() -> Theme:
    return Theme(HELPKIT_STYLES)


# * Replace previously pushed theme (e.g. after consoles were reconfigured)
def refresh_theme() -> None:
    from rich.theme import ThemeStackError

    for target in (console, error_console):
        # pop existing theme (if any was pushed) & push new one
        try:
            target.pop_theme()
        except ThemeStackError:
            pass  # no theme was pushed yet
        target.push_theme(get_helpkit_theme())


# theme initialization used at CLI start
def auto_initialize_theme() -> None:
    refresh_theme()
