# helpkit/ui/core/rich_components.py
# Rich building blocks for help output: literal text lines, the banner rule & name/value grids

from __future__ import annotations

from rich.console import Console, RenderableType
from rich.padding import Padding
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


# * Literal text; brackets in synopses & descriptions are never read as markup
def plain_line(message: str, style: str | None = None) -> Text:
    return Text(message, style=style or "")


# * Fixed-width rule, cropped rather than wrapped on narrow terminals
def banner_rule(width: int, char: str = "=") -> Text:
    return Text(char * width, style="helpkit.banner", no_wrap=True, overflow="crop")


# * Fixed-width name column & a value column that folds under itself
def name_value_grid(name_width: int) -> Table:
    table = Table.grid(padding=0)
    table.add_column(no_wrap=True, width=name_width)
    table.add_column(overflow="fold")
    return table


def indented(renderable: RenderableType, indent: int) -> Padding:
    return Padding(renderable, (0, 0, 0, indent))


__all__ = [
    "Console",
    "Text",
    "Theme",
    "plain_line",
    "banner_rule",
    "name_value_grid",
    "indented",
]
