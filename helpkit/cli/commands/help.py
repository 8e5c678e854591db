# helpkit/cli/commands/help.py
# Help command: general usage or usage for one manifest command

from __future__ import annotations

from typing import List, Optional

import typer

from ..app import app
from ..decorators import handle_helpkit_error
from ...config.settings import HelpkitSettings, get_settings
from ...core.types import Invocation
from ...helpkit_io.manifest_loader import load_manifest
from ...helpkit_io.resources import ResourceManager
from ...ui.help.help_renderer import HelpRenderer
from ...ui.logger import Logger


# * Wire manifest, resources & logger for the given settings
def build_renderer(settings: HelpkitSettings) -> HelpRenderer:
    manifest = load_manifest(settings.manifest_file)
    resources = ResourceManager(
        locale=settings.locale,
        resources_dir=settings.resources_path,
        strict=settings.strict_resources,
    )
    return HelpRenderer(manifest, resources, Logger(), settings.program_name)


# * Render help; exit code 1 when the requested command is not in the manifest
@handle_helpkit_error
def run_help(settings: HelpkitSettings, args: List[str]) -> int:
    renderer = build_renderer(settings)
    invocation = Invocation.from_args(args)
    handled = renderer.can_handle(invocation)
    renderer.run(invocation)
    return 0 if handled else 1


@app.command("help")
def help_command(
    ctx: typer.Context,
    command: Optional[List[str]] = typer.Argument(
        None, help="Command to show usage for (omit for all commands)"
    ),
) -> None:
    code = run_help(get_settings(ctx), command or [])
    if code:
        raise typer.Exit(code)
