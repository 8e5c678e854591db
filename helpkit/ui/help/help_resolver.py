# helpkit/ui/help/help_resolver.py
# Decide whether an invocation can be answered from the command manifest

from __future__ import annotations

from typing import Optional

from ...core.manifest import ManifestRegistry
from ...core.types import CommandMetadata, Invocation
from ...core.verbose import vlog_lookup


class HelpResolver:
    def __init__(self, manifest: ManifestRegistry):
        self.manifest = manifest

    # * True for no requested command or a command present in the manifest
    def can_handle(self, invocation: Optional[Invocation]) -> bool:
        if invocation is None or invocation.is_empty:
            vlog_lookup(None, found=True)
            return True

        command = invocation.requested_command
        found = self.command_exists(command)
        vlog_lookup(command, found)
        return found

    # exact, case-sensitive manifest key lookup
    def command_exists(self, command: Optional[str]) -> bool:
        return command is not None and self.manifest.contains(command)

    def get_metadata(self, command: str) -> Optional[CommandMetadata]:
        return self.manifest.get(command)
