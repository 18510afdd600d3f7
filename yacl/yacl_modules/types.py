"""Shared type definitions for the YACL dispatch pipeline."""
from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

ParsedArguments = Mapping[str, str]
CommandAction = Callable[[ParsedArguments], object]

EMPTY_ARGUMENTS: ParsedArguments = MappingProxyType({})


class ExitCode(enum.IntEnum):
    """Process exit codes signalled by the dispatcher.

    Values are stable: hosts and scripts may rely on them.
    """

    SUCCESS = 0
    NO_COMMAND = 1
    INVALID_COMMAND = 2
    NO_COMMAND_ARGUMENTS = 3
    INVALID_COMMAND_ARGUMENTS = 4
    MISSING_COMMAND_ARGUMENTS = 5
    INTERNAL_NO_COMMAND_METADATA = 6
    INTERNAL_NO_REQUIRED_ARGUMENTS_PROVIDED = 7


def _no_action(_arguments: ParsedArguments) -> None:
    return None


def _empty_arguments() -> ParsedArguments:
    return EMPTY_ARGUMENTS


@dataclass(frozen=True)
class CommandDescriptor:
    """Metadata and callback for one invocable command.

    Descriptors are data: hosts build them once at startup and
    register them explicitly. required_argument_names may be None
    or empty only when requires_arguments is False.
    """

    name: str
    description: str
    action: CommandAction = _no_action
    requires_arguments: bool = False
    required_argument_names: tuple[str, ...] | None = None

    def bind(self, arguments: ParsedArguments) -> Invocation:
        """Return an Invocation carrying the parsed arguments."""
        return Invocation(descriptor=self, arguments=arguments)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Invocation:
    """A validated command ready to run."""

    descriptor: CommandDescriptor
    arguments: ParsedArguments = field(default_factory=_empty_arguments)

    def execute(self) -> None:
        """Run the command's action on the calling thread.

        Exceptions raised by the action propagate unchanged.
        """
        self.descriptor.action(self.arguments)


@dataclass(frozen=True)
class ParseOutcome:
    """Result of splitting raw tokens into key=value pairs."""

    arguments: ParsedArguments = field(default_factory=_empty_arguments)
    malformed: tuple[str, ...] = ()


@dataclass(frozen=True)
class ArgumentReport:
    """Classification of one invocation's argument tokens.

    missing follows the order of the required names; unknown
    follows the order the keys were supplied in.
    """

    arguments: ParsedArguments = field(default_factory=_empty_arguments)
    malformed: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    unknown: tuple[str, ...] = ()

    @property
    def is_fatal(self) -> bool:
        """True when malformed or missing arguments block execution."""
        return bool(self.malformed or self.missing)
