"""Argument classification against a command's requirements."""
from __future__ import annotations

from typing import TYPE_CHECKING

from returns.result import Failure, Result, Success

from yacl.yacl_modules.errors import DispatchError
from yacl.yacl_modules.types import ArgumentReport, ExitCode

if TYPE_CHECKING:
    from yacl.yacl_modules.types import CommandDescriptor, ParseOutcome


def required_argument_names(
    descriptor: CommandDescriptor,
) -> Result[tuple[str, ...], DispatchError]:
    """Return the descriptor's required names (pure function).

    A command that requires arguments but declares none is a
    host configuration error.
    """
    names = descriptor.required_argument_names
    if descriptor.requires_arguments and not names:
        return Failure(
            DispatchError(
                step_name="required_argument_names",
                error_type="NoRequiredArgumentsError",
                message=(
                    "there was an error gathering the required"
                    f" arguments for command ({descriptor.name})"
                ),
                exit_code=(
                    ExitCode.INTERNAL_NO_REQUIRED_ARGUMENTS_PROVIDED
                ),
                context={"command_name": descriptor.name},
            ),
        )
    return Success(tuple(names or ()))


def classify_arguments(
    descriptor: CommandDescriptor,
    outcome: ParseOutcome,
) -> Result[ArgumentReport, DispatchError]:
    """Compute missing and unknown arguments for one invocation.

    missing: required names absent from the parsed map.
    unknown: parsed keys absent from the required names.
    """

    def _classify(required: tuple[str, ...]) -> ArgumentReport:
        present = outcome.arguments
        return ArgumentReport(
            arguments=present,
            malformed=outcome.malformed,
            missing=tuple(n for n in required if n not in present),
            unknown=tuple(k for k in present if k not in required),
        )

    return required_argument_names(descriptor).map(_classify)
