"""Demo host application wired through the YACL dispatcher.

Usage:
    python -m yacl.yacl_demo greet name=Ada
    python -m yacl.yacl_demo add left=2 right=40
    python -m yacl.yacl_demo version
    python -m yacl.yacl_demo help
"""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from yacl.yacl_modules import io_ops
from yacl.yacl_modules.config import DispatchConfig
from yacl.yacl_modules.dispatcher import Dispatcher
from yacl.yacl_modules.help import add_help_command
from yacl.yacl_modules.registry import CommandRegistry
from yacl.yacl_modules.types import CommandDescriptor

if TYPE_CHECKING:
    from collections.abc import Sequence

    from yacl.yacl_modules.types import ParsedArguments

DEMO_VERSION = "0.1.0"


def greet(arguments: ParsedArguments) -> None:
    """Print a greeting for the given name."""
    io_ops.write_stdout(f"hello, {arguments['name']}")


def add(arguments: ParsedArguments) -> None:
    """Print the sum of two integers.

    Non-integer values raise ValueError, which propagates.
    """
    total = int(arguments["left"]) + int(arguments["right"])
    io_ops.write_stdout(str(total))


def version(_arguments: ParsedArguments) -> None:
    """Print the demo version."""
    io_ops.write_stdout(DEMO_VERSION)


def build_registry() -> CommandRegistry:
    """Register the demo commands."""
    return CommandRegistry(
        [
            CommandDescriptor(
                name="greet",
                description="Greet someone by name",
                action=greet,
                requires_arguments=True,
                required_argument_names=("name",),
            ),
            CommandDescriptor(
                name="add",
                description="Add two integers",
                action=add,
                requires_arguments=True,
                required_argument_names=("left", "right"),
            ),
            CommandDescriptor(
                name="version",
                description="Show the demo version",
                action=version,
            ),
        ],
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Dispatch argv (default: sys.argv[1:]) and exit."""
    config = DispatchConfig(program_name="yacl-demo")
    registry = add_help_command(build_registry(), config)
    args = list(sys.argv[1:] if argv is None else argv)
    Dispatcher(registry=registry, config=config).start(args)


if __name__ == "__main__":  # pragma: no cover
    main()
