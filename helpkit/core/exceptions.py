# helpkit/core/exceptions.py
# Error types raised while loading manifests, settings & resource strings (pure)

from __future__ import annotations

from pathlib import Path
from typing import Any


# * "[red]Label:[/] message" line printed by the CLI error handler
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


class HelpkitError(Exception):
    # heading printed before the message on the CLI
    label = "Error"
    # attributes shown by repr()
    context: tuple[str, ...] = ()

    def __repr__(self) -> str:
        message = self.args[0] if self.args else ""
        extra = "".join(f", {name}={getattr(self, name)!r}" for name in self.context)
        return f"{type(self).__name__}({message!r}{extra})"


class ConfigurationError(HelpkitError):
    label = "Configuration Error"


# * One settings field holds an unusable value
class SettingsValidationError(ConfigurationError):
    context = ("setting_name", "value")

    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value


class JSONParsingError(HelpkitError):
    label = "JSON Parsing Error"


# * Manifest structure is not usable; command names the offending entry when known
class ManifestError(HelpkitError):
    label = "Manifest Error"
    context = ("command",)

    def __init__(self, message: str, command: str | None = None):
        super().__init__(message)
        self.command = command


class ResourceError(HelpkitError):
    label = "Resource Error"


# * Key missing from the active & default catalogs (strict lookups only)
class ResourceNotFoundError(ResourceError):
    context = ("key", "locale")

    def __init__(self, message: str, key: str, locale: str):
        super().__init__(message)
        self.key = key
        self.locale = locale


class FileOperationError(HelpkitError):
    label = "File Error"
    context = ("path",)

    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path)


class FileReadError(FileOperationError):
    pass
