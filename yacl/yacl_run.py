"""Run a host application's commands through the YACL dispatcher.

Loads a CommandRegistry from a 'module:attribute' path, adds
the built-in help command and dispatches the remaining
command-line tokens.

Usage:
    yacl-run --app yacl.yacl_demo:build_registry greet name=Ada
    yacl-run --app myapp.commands:REGISTRY build input=a output=b
    yacl-run --app myapp.commands:REGISTRY --duplicate-keys last_wins ...

Everything after the first non-option token is passed to the
dispatcher unchanged, so KEY=VALUE tokens are never parsed by
click.
"""
from __future__ import annotations

import sys
from pathlib import Path

# When run as a script, add the project root to sys.path so that
# absolute imports like "from yacl.yacl_modules..." resolve correctly.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from returns.io import IOFailure  # noqa: E402
from returns.unsafe import unsafe_perform_io  # noqa: E402

from yacl.yacl_modules import io_ops  # noqa: E402
from yacl.yacl_modules.config import DispatchConfig  # noqa: E402
from yacl.yacl_modules.dispatcher import Dispatcher  # noqa: E402
from yacl.yacl_modules.help import add_help_command  # noqa: E402


def build_config(
    program_name: str | None,
    duplicate_keys: str,
    list_marker: str,
) -> DispatchConfig:
    """Map CLI options onto a DispatchConfig."""
    overrides: dict[str, object] = {
        "duplicate_keys": duplicate_keys,
        "list_marker": list_marker,
    }
    if program_name:
        overrides["program_name"] = program_name
    return DispatchConfig.model_validate(overrides)


# --- CLI Entry Point ---

import click  # noqa: E402


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.option(
    "--app",
    "app_path",
    required=True,
    help="Registry location as module:attribute",
)
@click.option(
    "--program-name",
    default=None,
    help="Name shown in usage text (default: script name)",
)
@click.option(
    "--duplicate-keys",
    type=click.Choice(["malformed", "last_wins"]),
    default="malformed",
    help="How a repeated key=value token is handled",
)
@click.option(
    "--list-marker",
    default="-",
    help="Prefix for listed names (default: '-')",
)
@click.option(
    "--no-help",
    is_flag=True,
    help="Do not add the built-in help command",
)
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
def main(
    *,
    app_path: str,
    program_name: str | None,
    duplicate_keys: str,
    list_marker: str,
    no_help: bool,
    argv: tuple[str, ...],
) -> None:
    """Dispatch COMMAND [KEY=VALUE ...] to a host registry."""
    load_result = io_ops.load_registry(app_path)
    if isinstance(load_result, IOFailure):
        err = unsafe_perform_io(load_result.failure())
        io_ops.write_stderr(f"Registry load failed: {err}")
        io_ops.exit_process(err.exit_code)

    registry = unsafe_perform_io(load_result.unwrap())
    config = build_config(program_name, duplicate_keys, list_marker)
    if not no_help:
        registry = add_help_command(registry, config)
    Dispatcher(registry=registry, config=config).start(list(argv))


if __name__ == "__main__":  # pragma: no cover
    main()
