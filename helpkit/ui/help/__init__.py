# helpkit/ui/help/__init__.py
# Help system UI components

from .help_resolver import HelpResolver
from .help_table import (
    get_description_string,
    get_longest_name,
    print_command_table,
)
from .help_renderer import HelpRenderer

__all__ = [
    "HelpResolver",
    "get_description_string",
    "get_longest_name",
    "print_command_table",
    "HelpRenderer",
]
