"""Built-in help command."""
from __future__ import annotations

from typing import TYPE_CHECKING

from yacl.yacl_modules import io_ops
from yacl.yacl_modules.steps.render import render_help
from yacl.yacl_modules.types import CommandDescriptor

if TYPE_CHECKING:
    from yacl.yacl_modules.config import DispatchConfig
    from yacl.yacl_modules.registry import CommandRegistry
    from yacl.yacl_modules.types import ParsedArguments


def add_help_command(
    registry: CommandRegistry,
    config: DispatchConfig,
) -> CommandRegistry:
    """Return registry extended with a help command.

    The help listing covers every command of the extended
    registry, help included. A registry that already has a
    command with the configured name is returned unchanged.
    """
    if registry.contains(config.help_command):
        return registry

    def _show_help(_arguments: ParsedArguments) -> None:
        io_ops.write_lines(render_help(extended, config))

    extended = registry.register(
        CommandDescriptor(
            name=config.help_command,
            description="Show the available commands and their arguments",
            action=_show_help,
        ),
    )
    return extended
