# helpkit/core/types.py
# Pure dataclasses for manifest metadata & invocations - no I/O dependencies

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence


# name/description pair shown as one row of a usage table
@dataclass(frozen=True)
class NameDescription:
    name: str
    description: str = ""

    # build from a manifest entry; returns None when the entry has no usable name
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["NameDescription"]:
        name = data.get("name")
        if not isinstance(name, str) or not name:
            return None
        description = data.get("description")
        return cls(name=name, description=description if isinstance(description, str) else "")


# help metadata for one command; immutable once loaded
@dataclass(frozen=True)
class CommandMetadata:
    name: str
    synopsis: str = ""
    description: str = ""
    arguments: tuple[NameDescription, ...] = ()
    options: tuple[NameDescription, ...] = ()

    @property
    def has_arguments(self) -> bool:
        return len(self.arguments) > 0

    @property
    def has_options(self) -> bool:
        return len(self.options) > 0


# user-supplied tokens after the program name
@dataclass(frozen=True)
class Invocation:
    original: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # absent args behave like an empty invocation
        if self.original is None:
            object.__setattr__(self, "original", ())
        elif not isinstance(self.original, tuple):
            object.__setattr__(self, "original", tuple(self.original))

    @classmethod
    def from_args(cls, args: Optional[Iterable[str]]) -> "Invocation":
        return cls(original=tuple(args or ()))

    @property
    def is_empty(self) -> bool:
        return len(self.original) == 0

    # first token is the requested command name
    @property
    def requested_command(self) -> Optional[str]:
        return self.original[0] if self.original else None


# convert raw manifest list to NameDescription tuple; non-list values count as no entries
def name_descriptions_from_list(
    raw: Any, command: str, field_name: str
) -> tuple[NameDescription, ...]:
    from .exceptions import ManifestError

    if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes)):
        return ()

    pairs: list[NameDescription] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            raise ManifestError(
                f"{field_name}[{index}] of command '{command}' must be an object",
                command=command,
            )
        pair = NameDescription.from_dict(entry)
        if pair is None:
            raise ManifestError(
                f"{field_name}[{index}] of command '{command}' has no name",
                command=command,
            )
        pairs.append(pair)
    return tuple(pairs)
