"""Console text rendering for usage, command lists and help.

Pure functions: they return lines and never write them.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from yacl.yacl_modules.steps.classify_arguments import (
    required_argument_names,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from returns.result import Result

    from yacl.yacl_modules.config import DispatchConfig
    from yacl.yacl_modules.errors import DispatchError
    from yacl.yacl_modules.registry import CommandRegistry
    from yacl.yacl_modules.types import CommandDescriptor


def render_marked_list(
    items: Iterable[str],
    marker: str = "-",
) -> tuple[str, ...]:
    """Prefix each item with the list marker."""
    return tuple(f"{marker} {item}" for item in items)


def render_command_list(
    registry: CommandRegistry,
    marker: str = "-",
) -> tuple[str, ...]:
    """Return the sorted command names as marked lines."""
    return render_marked_list(registry.list_names(), marker)


def render_usage(
    descriptor: CommandDescriptor,
    config: DispatchConfig,
) -> Result[tuple[str, ...], DispatchError]:
    """Render the usage block for a command.

    Header names the help invocation, then one marked line per
    required argument. Fails when a command that requires
    arguments declares none.
    """

    def _lines(required: tuple[str, ...]) -> tuple[str, ...]:
        return (
            f"{config.program_name} {config.help_command}",
            f"command arguments for ({descriptor.name}) are:",
            *render_marked_list(required, config.list_marker),
        )

    return required_argument_names(descriptor).map(_lines)


def render_help(
    registry: CommandRegistry,
    config: DispatchConfig,
) -> tuple[str, ...]:
    """Render the help listing for every registered command."""
    lines = [f"usage: {config.program_name} <command> [name=value ...]"]
    lines.append("the valid commands are:")
    for descriptor in sorted(registry, key=lambda d: d.name):
        lines.append(
            f"{config.list_marker} {descriptor.name}:"
            f" {descriptor.description}",
        )
        if descriptor.requires_arguments and descriptor.required_argument_names:
            lines.extend(
                f"    {config.list_marker} {arg}=<value>"
                for arg in descriptor.required_argument_names
            )
    return tuple(lines)
