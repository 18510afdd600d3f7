"""I/O boundary module -- ALL console, process and import I/O goes here.

This is the single mock point for the test suite. Steps never
write to the console or exit the process directly; they call
io_ops functions.
"""
from __future__ import annotations

import importlib
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import NoReturn

from returns.io import IOFailure, IOResult, IOSuccess

from yacl.yacl_modules.errors import DispatchError
from yacl.yacl_modules.registry import CommandRegistry
from yacl.yacl_modules.types import CommandDescriptor, ExitCode


def write_stdout(
    message: str,
) -> IOResult[None, DispatchError]:
    """Write one line of console output.

    Returns IOSuccess(None) or IOFailure on error.
    """
    try:
        sys.stdout.write(f"{message}\n")
    except OSError as exc:
        return IOFailure(
            DispatchError(
                step_name="io_ops.write_stdout",
                error_type="StdoutWriteError",
                message=f"Failed to write to stdout: {exc}",
                exit_code=ExitCode.SUCCESS,
                context={"original_message": message},
            ),
        )
    return IOSuccess(None)


def write_stderr(
    message: str,
) -> IOResult[None, DispatchError]:
    """Write one line to stderr (fail-open logging).

    Returns IOSuccess(None) or IOFailure on error.
    """
    try:
        sys.stderr.write(f"{message}\n")
    except OSError as exc:
        return IOFailure(
            DispatchError(
                step_name="io_ops.write_stderr",
                error_type="StderrWriteError",
                message=f"Failed to write to stderr: {exc}",
                exit_code=ExitCode.SUCCESS,
                context={"original_message": message},
            ),
        )
    return IOSuccess(None)


def write_lines(
    lines: Iterable[str],
) -> IOResult[None, DispatchError]:
    """Write each line to stdout, stopping at the first failure."""
    for line in lines:
        result = write_stdout(line)
        if isinstance(result, IOFailure):
            return result
    return IOSuccess(None)


def exit_process(code: ExitCode) -> NoReturn:
    """Terminate the process with the given exit code."""
    sys.exit(int(code))


def default_program_name() -> str:
    """Return the running program's name without extension."""
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else "yacl"
    return Path(argv0).stem or "yacl"


def _registry_error(
    app_path: str,
    message: str,
) -> IOResult[CommandRegistry, DispatchError]:
    return IOFailure(
        DispatchError(
            step_name="io_ops.load_registry",
            error_type="RegistryLoadError",
            message=message,
            exit_code=ExitCode.INTERNAL_NO_COMMAND_METADATA,
            context={"app_path": app_path},
        ),
    )


def _coerce_registry(
    target: object,
) -> CommandRegistry | None:
    if isinstance(target, CommandRegistry):
        return target
    if isinstance(target, (str, bytes)) or not isinstance(
        target, Iterable,
    ):
        return None
    descriptors = list(target)
    if not all(isinstance(d, CommandDescriptor) for d in descriptors):
        return None
    return CommandRegistry(descriptors)


def load_registry(
    app_path: str,
) -> IOResult[CommandRegistry, DispatchError]:
    """Import a host registry from a 'module:attribute' path.

    The attribute may be a CommandRegistry, an iterable of
    CommandDescriptor, or a zero-argument callable returning
    either. Returns IOResult, never raises.
    """
    module_name, sep, attr_name = app_path.partition(":")
    if not sep or not module_name or not attr_name:
        return _registry_error(
            app_path,
            f"Expected 'module:attribute', got '{app_path}'",
        )
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:  # noqa: BLE001
        return _registry_error(
            app_path,
            f"Cannot import module '{module_name}': {exc}",
        )

    target: object = module
    for part in attr_name.split("."):
        try:
            target = getattr(target, part)
        except AttributeError:
            return _registry_error(
                app_path,
                f"Module '{module_name}' has no attribute '{attr_name}'",
            )

    try:
        if callable(target):
            target = target()
        registry = _coerce_registry(target)
    except Exception as exc:  # noqa: BLE001
        return _registry_error(
            app_path,
            f"Building registry from '{app_path}' failed: {exc}",
        )
    if registry is None:
        return _registry_error(
            app_path,
            f"'{app_path}' is not a command registry"
            f" (got {type(target).__name__})",
        )
    return IOSuccess(registry)
