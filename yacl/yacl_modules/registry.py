"""Command registry and lookup functions.

The registry is built once at startup by explicit registration
and passed into the dispatcher. It never scans modules for
commands.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from yacl.yacl_modules.types import CommandDescriptor


class CommandRegistry:
    """Immutable, ordered collection of command descriptors.

    Names should be unique ignoring case. When they are not,
    lookups return the first match in registration order.
    """

    __slots__ = ("_descriptors",)

    def __init__(
        self,
        descriptors: Iterable[CommandDescriptor] = (),
    ) -> None:
        self._descriptors: tuple[CommandDescriptor, ...] = tuple(
            descriptors,
        )

    def register(
        self,
        descriptor: CommandDescriptor,
    ) -> CommandRegistry:
        """Return a new registry with descriptor appended."""
        return CommandRegistry((*self._descriptors, descriptor))

    def list_names(self) -> tuple[str, ...]:
        """Return all command names in ordinal sort order."""
        return tuple(sorted(d.name for d in self._descriptors))

    def find_by_name(
        self,
        name: str,
        *,
        case_insensitive: bool = True,
    ) -> CommandDescriptor | None:
        """Look up a command by name. Returns None if not found."""
        if case_insensitive:
            wanted = name.lower()
            for descriptor in self._descriptors:
                if descriptor.name.lower() == wanted:
                    return descriptor
            return None
        for descriptor in self._descriptors:
            if descriptor.name == name:
                return descriptor
        return None

    def contains(self, name: str) -> bool:
        """Case-insensitive membership test against listed names."""
        wanted = name.lower()
        return any(n.lower() == wanted for n in self.list_names())

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"CommandRegistry({list(self.list_names())!r})"
