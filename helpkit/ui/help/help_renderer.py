# helpkit/ui/help/help_renderer.py
# Usage renderer: general command listing or one command's synopsis, arguments & options

from __future__ import annotations

from typing import Callable, Optional

from ...core.manifest import ManifestRegistry
from ...core.types import Invocation, NameDescription
from ...core.verbose import vlog_render
from ...helpkit_io.resources import format_resource
from ..logger import Logger, LoggerHelper
from .help_resolver import HelpResolver
from .help_table import get_description_string, get_longest_name, print_command_table

# resource keys for fixed UI strings
USAGE_SYNOPSIS_KEY = "CommandHelpUsageSynopsis"
PROGRAM_USAGE_KEY = "CommandHelpProgramUsage"
BAD_COMMAND_KEY = "CommandHelpBadCommand"
USAGE_OPTIONS_KEY = "CommandHelpUsageOptions"


# * Renders help for an invocation; holds only read references to its collaborators
class HelpRenderer:
    def __init__(
        self,
        manifest: ManifestRegistry,
        resolve: Callable[[str], str],
        logger: Optional[Logger] = None,
        program_name: str = "helpkit",
    ):
        self.manifest = manifest
        self.resolve = resolve
        self.logger = logger or Logger()
        self.program_name = program_name
        self.resolver = HelpResolver(manifest)

    def can_handle(self, invocation: Optional[Invocation]) -> bool:
        return self.resolver.can_handle(invocation)

    # * Entry point: banner, then usage for the requested command or the general listing
    def run(self, invocation: Optional[Invocation]) -> None:
        self.print_header()
        command = invocation.requested_command if invocation is not None else None
        # unknown commands report an error inside print_command_usage, then list everything
        if command is not None:
            self.print_command_usage(command)
        else:
            self.print_general_usage()

    def print_header(self) -> None:
        self.logger.log_banner()

    # * List every manifest command w/ its description, in manifest order
    def print_general_usage(self) -> None:
        vlog_render("general", f"{len(self.manifest)} commands")
        self._print_command_header(
            format_resource(self.resolve(PROGRAM_USAGE_KEY), self.program_name)
        )

        pairs = [
            NameDescription(name, metadata.description)
            for name, metadata in self.manifest.items()
        ]
        print_command_table(pairs, self.resolve, self.logger)

    # * Synopsis, description, arguments & options for one command
    def print_command_usage(self, command: str) -> None:
        metadata = self.resolver.get_metadata(command)
        if metadata is None:
            # unknown command degrades to the general listing
            self.logger.log_error(
                format_resource(self.resolve(BAD_COMMAND_KEY), f"'{command}'")
            )
            self.print_general_usage()
            return

        vlog_render("command", command)
        synopsis = " ".join(
            part for part in (self.program_name, command, metadata.synopsis) if part
        )
        self._print_command_header(synopsis, metadata.description)

        # options sit one indent deeper; share indent2 so both value columns line up
        indent = LoggerHelper.DEFAULT_INDENT
        longest_key = max(
            get_longest_name(metadata.arguments),
            get_longest_name(metadata.options) + indent,
        )
        indent2 = LoggerHelper.get_name_value_table_indent2(longest_key)

        if metadata.has_arguments:
            print_command_table(
                metadata.arguments, self.resolve, self.logger, indent, indent2
            )

        if metadata.has_options:
            self.logger.log(
                " " * indent + self.resolve(USAGE_OPTIONS_KEY), style="helpkit.heading"
            )
            print_command_table(
                metadata.options, self.resolve, self.logger, 2 * indent, indent2
            )

    def _print_command_header(
        self, synopsis: str, description: Optional[str] = None
    ) -> None:
        self.logger.log(self.resolve(USAGE_SYNOPSIS_KEY), style="helpkit.heading")
        self.logger.log(" " * LoggerHelper.DEFAULT_INDENT + synopsis, style="helpkit.synopsis")
        self.logger.log()
        if description:
            self.logger.log(get_description_string(description, self.resolve))
            self.logger.log()
