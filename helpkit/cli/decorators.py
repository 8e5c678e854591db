# helpkit/cli/decorators.py
# CLI decorator turning helpkit errors into one labelled stderr line & exit code 1

import functools
from typing import Any, Callable, TypeVar

from rich.markup import escape

from ..core.exceptions import HelpkitError, format_error_message

F = TypeVar("F", bound=Callable[..., Any])


# * Each error type carries its own label; other exceptions propagate untouched
def handle_helpkit_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HelpkitError as e:
            # looked up at call time so patched consoles are honoured
            from ..helpkit_io.console import error_console

            error_console.print(format_error_message(e.label, escape(str(e))))
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
