# helpkit/core/manifest.py
# Read-only ordered registry of command help metadata (pure - no I/O)

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from .exceptions import ManifestError
from .types import CommandMetadata, name_descriptions_from_list


# * Ordered mapping command name -> CommandMetadata; lookups are exact & case-sensitive
class ManifestRegistry:
    def __init__(self, commands: Mapping[str, CommandMetadata] | None = None):
        # copy preserves manifest order; proxy keeps the snapshot read-only
        self._commands: Mapping[str, CommandMetadata] = MappingProxyType(
            dict(commands or {})
        )

    # * Build registry from decoded manifest JSON
    @classmethod
    def from_mapping(cls, raw: Any) -> "ManifestRegistry":
        if not isinstance(raw, Mapping):
            raise ManifestError(
                f"Manifest must be a JSON object, got {type(raw).__name__}"
            )

        commands: dict[str, CommandMetadata] = {}
        for name, entry in raw.items():
            if not isinstance(entry, Mapping):
                raise ManifestError(
                    f"Entry for command '{name}' must be an object", command=name
                )
            commands[name] = _metadata_from_entry(name, entry)
        return cls(commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._commands)!r})"

    def contains(self, name: str) -> bool:
        return name in self._commands

    def get(self, name: str) -> Optional[CommandMetadata]:
        return self._commands.get(name)

    # command names in manifest order
    def names(self) -> list[str]:
        return list(self._commands)

    # (name, metadata) pairs in manifest order
    def items(self) -> list[tuple[str, CommandMetadata]]:
        return list(self._commands.items())


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _metadata_from_entry(name: str, entry: Mapping[str, Any]) -> CommandMetadata:
    # "args" is the manifest's historical key; "arguments" accepted as well
    raw_args = entry.get("args", entry.get("arguments"))
    return CommandMetadata(
        name=name,
        synopsis=_text(entry.get("synopsis")),
        description=_text(entry.get("description")),
        arguments=name_descriptions_from_list(raw_args, name, "args"),
        options=name_descriptions_from_list(entry.get("options"), name, "options"),
    )
