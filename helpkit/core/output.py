# helpkit/core/output.py
# Diagnostic levels & the reporter registry core modules write to without importing the CLI (pure)

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable


# * How much diagnostic detail a run asked for
class DiagnosticLevel(IntEnum):
    OFF = 0
    # lookups, resource misses, render path, files read, config
    VERBOSE = 1
    # also resource hits
    DEBUG = 2


@runtime_checkable
class Reporter(Protocol):
    def emit(self, level: DiagnosticLevel, category: str, message: str) -> None: ...

    def close(self) -> None: ...


# * Registered until the CLI asks for diagnostics; drops every event
class NullReporter:
    def emit(self, level: DiagnosticLevel, category: str, message: str) -> None:
        pass

    def close(self) -> None:
        pass


_reporter: Reporter = NullReporter()


def set_reporter(reporter: Reporter) -> None:
    global _reporter
    _reporter = reporter


def get_reporter() -> Reporter:
    return _reporter


def reset_reporter() -> None:
    global _reporter
    _reporter = NullReporter()
