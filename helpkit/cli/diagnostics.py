# helpkit/cli/diagnostics.py
# Stderr reporter for --verbose w/ an optional plain-text --log-file

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import IO, Optional

from ..core.exceptions import FileOperationError
from ..core.output import DiagnosticLevel
from ..ui.core.rich_components import Text


class DiagnosticReporter:
    """Prints diagnostic events as ``[CATEGORY] message`` lines.

    Events above ``level`` are dropped. ``quiet`` silences stderr only; the
    log file, when given, still records every event the level admits.
    """

    def __init__(
        self,
        level: DiagnosticLevel = DiagnosticLevel.VERBOSE,
        log_file: Optional[Path] = None,
        quiet: bool = False,
    ) -> None:
        self.level = level
        self.quiet = quiet
        self.log_file = log_file
        self._log: Optional[IO[str]] = self._open(log_file) if log_file else None

    @staticmethod
    def _open(path: Path) -> IO[str]:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            return open(path, "a", encoding="utf-8")
        except OSError as e:
            raise FileOperationError(f"Cannot open log file {path}: {e}", path)

    def emit(self, level: DiagnosticLevel, category: str, message: str) -> None:
        if level > self.level:
            return
        if not self.quiet:
            from ..helpkit_io.console import error_console

            error_console.print(
                Text.assemble((f"[{category}]", "helpkit.diagnostic"), " ", message)
            )
        if self._log is not None:
            stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self._log.write(f"{stamp} [{category}] {message}\n")
            self._log.flush()

    def close(self) -> None:
        if self._log is not None:
            self._log.close()
            self._log = None


# * Reporter for the CLI flags; dev_mode lifts --verbose to DEBUG
def reporter_for(
    dev_mode: bool, log_file: Optional[Path] = None, quiet: bool = False
) -> DiagnosticReporter:
    level = DiagnosticLevel.DEBUG if dev_mode else DiagnosticLevel.VERBOSE
    return DiagnosticReporter(level, log_file=log_file, quiet=quiet)
