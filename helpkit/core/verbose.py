# helpkit/core/verbose.py
# Diagnostic events for manifest lookups, resource strings, render paths, file reads & config

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import DiagnosticLevel, get_reporter, reset_reporter


def vlog(category: str, message: str) -> None:
    get_reporter().emit(DiagnosticLevel.VERBOSE, category, message)


# * Result of looking up the requested command (None when nothing was requested)
def vlog_lookup(command: str | None, found: bool) -> None:
    if command is None:
        message = "No command requested"
    elif found:
        message = f"Command '{command}' found in manifest"
    else:
        message = f"Command '{command}' not in manifest"
    vlog("LOOKUP", message)


# * Misses are VERBOSE; hits are DEBUG since every description produces one
def vlog_resource(key: str, locale: str, found: bool) -> None:
    if found:
        get_reporter().emit(DiagnosticLevel.DEBUG, "RESOURCE", f"{key} ({locale})")
    else:
        vlog("RESOURCE", f"Missing resource '{key}' for locale '{locale}'")


def vlog_render(view: str, detail: str | None = None) -> None:
    suffix = f" ({detail})" if detail else ""
    vlog("RENDER", f"Rendering {view} usage{suffix}")


def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    vlog("FILE", f"Read: {path}{size_str}")


def vlog_config(key: str, value: Any) -> None:
    vlog("CONFIG", f"{key} = {value}")


# * Close the active reporter (flushes the log file) & fall back to the null reporter
def cleanup_verbose() -> None:
    get_reporter().close()
    reset_reporter()
