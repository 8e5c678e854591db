# helpkit/config/settings.py
# Read-only settings for helpkit: program name, manifest & resource locations, locale

import os
from pathlib import Path
from typing import Any, Dict, Optional, cast
import typer
from dataclasses import dataclass, fields, replace

from ..helpkit_io.generics import read_json_safe
from ..core.exceptions import JSONParsingError, FileReadError, SettingsValidationError

# environment overrides (also read from .env at CLI start)
ENV_LOCALE = "HELPKIT_LOCALE"
ENV_MANIFEST = "HELPKIT_MANIFEST"


def _non_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _optional_path(value: Any) -> bool:
    return value is None or isinstance(value, str)


# field -> (check, expectation shown in the error)
_VALIDATORS = {
    "program_name": (_non_blank, "a non-empty string"),
    "manifest_path": (_optional_path, "a path string or null"),
    "resources_dir": (_optional_path, "a path string or null"),
    "locale": (_non_blank, "a non-empty string"),
    # strict bools; "true" or 1 are rejected rather than coerced
    "strict_resources": (lambda v: isinstance(v, bool), "true or false"),
    "dev_mode": (lambda v: isinstance(v, bool), "true or false"),
}


# * Settings read from ~/.helpkit/config.json, overridable by env & CLI flags
@dataclass(frozen=True)
class HelpkitSettings:
    # name shown in synopsis lines
    program_name: str = "helpkit"

    # manifest & resource locations (None -> bundled files)
    manifest_path: Optional[str] = None
    resources_dir: Optional[str] = None

    locale: str = "en"
    # raise on unknown resource keys instead of printing the key
    strict_resources: bool = False

    # --verbose also shows DEBUG diagnostics (resource hits)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        for name, (check, expected) in _VALIDATORS.items():
            value = getattr(self, name)
            if not check(value):
                raise SettingsValidationError(
                    f"{name} must be {expected}, got {value!r}", name, value
                )

    @property
    def manifest_file(self) -> Optional[Path]:
        return Path(self.manifest_path) if self.manifest_path else None

    @property
    def resources_path(self) -> Optional[Path]:
        return Path(self.resources_dir) if self.resources_dir else None


# * Loads settings once per process; a broken config file warns & falls back to defaults
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or Path.home() / ".helpkit" / "config.json"
        self._settings: Optional[HelpkitSettings] = None

    def load(self) -> HelpkitSettings:
        if self._settings is None:
            self._settings = self._read()
        return self._settings

    def _read(self) -> HelpkitSettings:
        if not self.config_path.exists():
            return HelpkitSettings()
        try:
            data = read_json_safe(self.config_path)
            if not isinstance(data, dict):
                raise SettingsValidationError(
                    "config must be a JSON object", "config", data
                )
            unknown = sorted(set(data) - {f.name for f in fields(HelpkitSettings)})
            if unknown:
                raise SettingsValidationError(
                    f"unknown setting(s): {', '.join(unknown)}",
                    unknown[0],
                    data[unknown[0]],
                )
            return HelpkitSettings(**data)
        except (JSONParsingError, FileReadError, SettingsValidationError) as e:
            typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
            typer.echo("Using default settings")
            return HelpkitSettings()


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[HelpkitSettings] = None
) -> HelpkitSettings:
    if provided is not None:
        return provided

    # search ctx, parent, & root for HelpkitSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, HelpkitSettings):
            return obj

    return settings_manager.load()


# * Apply HELPKIT_LOCALE / HELPKIT_MANIFEST on top of stored settings
def apply_env_overrides(settings: HelpkitSettings) -> HelpkitSettings:
    overrides: Dict[str, Any] = {}
    env_locale = os.environ.get(ENV_LOCALE, "").strip()
    if env_locale:
        overrides["locale"] = env_locale
    env_manifest = os.environ.get(ENV_MANIFEST, "").strip()
    if env_manifest:
        overrides["manifest_path"] = env_manifest
    return replace(settings, **overrides) if overrides else settings
