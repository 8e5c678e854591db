# helpkit/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup
load_dotenv()

from ..config.settings import settings_manager, apply_env_overrides
from ..core.exceptions import FileOperationError, SettingsValidationError
from ..core.output import set_reporter
from ..core.verbose import cleanup_verbose, vlog_config
from .diagnostics import reporter_for


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    help="Show usage for the commands declared in a JSON manifest.",
)


# * Load settings, apply overrides & show general usage when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    manifest: Optional[Path] = typer.Option(
        None, "--manifest", "-m", help="Command manifest JSON (default: bundled sample)"
    ),
    locale: Optional[str] = typer.Option(
        None, "--locale", "-l", help="Locale for resource strings, e.g. en or es"
    ),
    program_name: Optional[str] = typer.Option(
        None, "--program-name", "-p", help="Program name shown in synopsis lines"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log manifest lookups & resource misses to stderr"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress diagnostics"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # initialize theme at start of each CLI invocation
    from ..ui.theming.console_theme import auto_initialize_theme

    auto_initialize_theme()

    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    # precedence: command-line flags > environment > config file
    settings = apply_env_overrides(ctx.obj)
    overrides = {
        key: value
        for key, value in (
            ("manifest_path", str(manifest) if manifest is not None else None),
            ("locale", locale),
            ("program_name", program_name),
        )
        if value is not None
    }
    if overrides:
        try:
            settings = replace(settings, **overrides)
        except SettingsValidationError as e:
            flag = "--" + e.setting_name.replace("_", "-")
            raise typer.BadParameter(str(e), param_hint=flag)
    ctx.obj = settings

    # --log-file implies --verbose
    if verbose or log_file is not None:
        try:
            reporter = reporter_for(settings.dev_mode, log_file, quiet)
        except FileOperationError as e:
            raise typer.BadParameter(str(e), param_hint="--log-file")
        set_reporter(reporter)
        ctx.call_on_close(cleanup_verbose)
    vlog_config("locale", settings.locale)
    vlog_config("manifest_path", settings.manifest_path or "<bundled>")

    if ctx.invoked_subcommand is None:
        from .commands.help import run_help

        ctx.exit(run_help(settings, []))


# ! import command modules here to avoid circular import w/ app object
from .commands import help as _help  # noqa: F401,E402
from .commands import listing as _listing  # noqa: F401,E402
