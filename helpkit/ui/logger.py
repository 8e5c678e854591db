# helpkit/ui/logger.py
# Terminal logger for help output: plain lines, errors, banner & aligned name/value tables

from __future__ import annotations

from typing import Iterable, Optional

from .core.rich_components import (
    Console,
    Text,
    banner_rule,
    indented,
    name_value_grid,
    plain_line,
)
from ..core.types import NameDescription
from ..helpkit_io.console import console, error_console


# * Indentation constants & column math shared by every name/value table
class LoggerHelper:
    DEFAULT_INDENT = 3
    MINIMUM_DOTS = 4
    MIN_RIGHT_INDENT = 25
    BANNER_WIDTH = 65

    # column where values start for a table whose longest name has max_key_length chars
    @staticmethod
    def get_name_value_table_indent2(max_key_length: int) -> int:
        return max(
            LoggerHelper.DEFAULT_INDENT
            + max_key_length
            + 1
            + LoggerHelper.MINIMUM_DOTS
            + 1,
            LoggerHelper.MIN_RIGHT_INDENT,
        )


# * Output collaborator used by the help renderer
class Logger:
    def __init__(
        self, out: Optional[Console] = None, err: Optional[Console] = None
    ) -> None:
        self._out = out
        self._err = err

    # resolve at call time so patched module consoles are honoured
    @property
    def out(self) -> Console:
        return self._out if self._out is not None else console

    @property
    def err(self) -> Console:
        return self._err if self._err is not None else error_console

    # print one line of plain text (never parsed as Rich markup)
    def log(self, message: str = "", style: Optional[str] = None) -> None:
        self.out.print(plain_line(message, style))

    def log_error(self, message: str) -> None:
        self.err.print(plain_line(message, "error"))

    def log_banner(self) -> None:
        self.out.print()
        self.out.print(banner_rule(LoggerHelper.BANNER_WIDTH))

    # * Print rows as "<indent1>name ..... value" w/ values starting at column indent2
    def log_name_value_table(
        self,
        pairs: Iterable[NameDescription],
        indent1: Optional[int] = None,
        indent2: Optional[int] = None,
    ) -> None:
        rows = list(pairs)
        if not rows:
            return

        longest = max(len(pair.name) for pair in rows)
        if indent1 is None:
            indent1 = LoggerHelper.DEFAULT_INDENT
        if indent2 is None:
            indent2 = LoggerHelper.get_name_value_table_indent2(longest)

        # name, space, at least one leader dot, space
        name_width = max(indent2 - indent1, longest + 3)
        table = name_value_grid(name_width)
        for pair in rows:
            leader = "." * (name_width - len(pair.name) - 2)
            table.add_row(
                Text.assemble(
                    (pair.name, "helpkit.name"), " ", (leader, "helpkit.leader"), " "
                ),
                plain_line(pair.description),
            )

        self.out.print(indented(table, indent1))
