# helpkit/cli/commands/listing.py
# Plain listings for shell completion & locale discovery

from __future__ import annotations

import typer

from ..app import app
from ..decorators import handle_helpkit_error
from ...config.settings import get_settings
from ...helpkit_io.console import console
from ...helpkit_io.manifest_loader import load_manifest
from ...helpkit_io.resources import ResourceManager, normalize_locale
from ...ui.core.rich_components import Text


# * Print manifest command names, one per line, in manifest order
@app.command("commands")
@handle_helpkit_error
def commands_command(ctx: typer.Context) -> None:
    settings = get_settings(ctx)
    for name in load_manifest(settings.manifest_file).names():
        console.print(Text(name))


# * List available locales & mark the active one
@app.command("locales")
def locales_command(ctx: typer.Context) -> None:
    settings = get_settings(ctx)
    active = normalize_locale(settings.locale)
    resources = ResourceManager(locale=active, resources_dir=settings.resources_path)
    for code, name in resources.available_locales():
        marker = "*" if code == active else " "
        console.print(Text(f"{marker} {code}  {name}"))
