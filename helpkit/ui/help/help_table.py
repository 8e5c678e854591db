# helpkit/ui/help/help_table.py
# Usage table helpers: placeholder resolution, longest-name scan & aligned table output

from __future__ import annotations

from typing import Callable, Iterable, Optional

from ...core.placeholders import substitute_placeholder
from ...core.types import NameDescription
from ..logger import Logger

# key -> display string
ResolveFn = Callable[[str], str]


# * Replace "[Key]" in a description w/ its resource string; plain text unchanged
def get_description_string(description: Optional[str], resolve: ResolveFn) -> str:
    return substitute_placeholder(description, resolve)


# * Longest name in a table; 0 for None or empty
def get_longest_name(pairs: Optional[Iterable[NameDescription]]) -> int:
    if not pairs:
        return 0
    return max((len(pair.name) for pair in pairs), default=0)


# * Resolve descriptions then print the aligned name/value table
def print_command_table(
    pairs: Iterable[NameDescription],
    resolve: ResolveFn,
    logger: Logger,
    indent1: Optional[int] = None,
    indent2: Optional[int] = None,
) -> None:
    resolved = [
        NameDescription(pair.name, get_description_string(pair.description, resolve))
        for pair in pairs
    ]
    logger.log_name_value_table(resolved, indent1, indent2)
