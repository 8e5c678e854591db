# helpkit/helpkit_io/console.py
# Shared Rich consoles: help text on stdout, errors & diagnostics on stderr
#
# Rich resolves sys.stdout / sys.stderr on every write, so swapped streams
# (e.g. typer's CliRunner) are honoured without recreating these objects.
# The helpkit theme is pushed onto both at CLI start (ui/theming/console_theme.py).

from rich.console import Console

console = Console()
error_console = Console(stderr=True)

__all__ = ["console", "error_console"]
