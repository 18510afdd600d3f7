"""Command dispatch -- selection, validation and execution.

The Dispatcher receives its CommandRegistry explicitly. It
selects a command from the first token, validates the
remaining key=value tokens and runs the command. Every
detected problem is printed where it is found and returned
as an IOFailure carrying the exit code; start() turns that
code into process termination.

Unknown arguments are the only non-fatal condition: they are
listed as a warning and the command still runs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NoReturn

from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure
from returns.unsafe import unsafe_perform_io

from yacl.yacl_modules import io_ops
from yacl.yacl_modules.config import DispatchConfig
from yacl.yacl_modules.errors import DispatchError
from yacl.yacl_modules.steps.classify_arguments import classify_arguments
from yacl.yacl_modules.steps.parse_arguments import parse_argument_tokens
from yacl.yacl_modules.steps.render import (
    render_command_list,
    render_marked_list,
    render_usage,
)
from yacl.yacl_modules.types import EMPTY_ARGUMENTS, ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence

    from yacl.yacl_modules.registry import CommandRegistry
    from yacl.yacl_modules.types import (
        ArgumentReport,
        CommandDescriptor,
        Invocation,
    )

SelectedCommand = tuple["CommandDescriptor", tuple[str, ...]]


def exit_code_of(
    result: IOResult[ExitCode, DispatchError],
) -> ExitCode:
    """Collapse a dispatch result into its process exit code."""
    if isinstance(result, IOFailure):
        return unsafe_perform_io(result.failure()).exit_code
    return unsafe_perform_io(result.unwrap())


@dataclass(frozen=True)
class Dispatcher:
    """Runs one command per process invocation."""

    registry: CommandRegistry
    config: DispatchConfig = field(default_factory=DispatchConfig)

    def _say(self, *lines: str) -> None:
        io_ops.write_lines(lines)

    def _fail(
        self,
        step_name: str,
        error_type: str,
        message: str,
        exit_code: ExitCode,
        context: dict[str, object],
    ) -> IOResult[object, DispatchError]:
        return IOFailure(
            DispatchError(
                step_name=step_name,
                error_type=error_type,
                message=message,
                exit_code=exit_code,
                context=context,
            ),
        )

    def _print_usage(
        self,
        descriptor: CommandDescriptor,
    ) -> IOResult[None, DispatchError]:
        """Print the usage block, or the configuration error."""
        usage = render_usage(descriptor, self.config)
        if isinstance(usage, Failure):
            err = usage.failure()
            self._say(err.message)
            return IOFailure(err)
        self._say(
            f"usage for command ({descriptor}):",
            *usage.unwrap(),
        )
        return IOSuccess(None)

    def select_command(
        self,
        argv: Sequence[str] | None,
    ) -> IOResult[SelectedCommand, DispatchError]:
        """Pick the command named by argv[0].

        Returns the descriptor and the remaining tokens. Names
        match ignoring case; the first registered match wins.
        """
        marker = self.config.list_marker
        if not argv:
            self._say(
                "there were no commands provided.",
                "the valid commands are:",
                *render_command_list(self.registry, marker),
            )
            return self._fail(
                "dispatcher.select_command",
                "NoCommandError",
                "No command provided",
                ExitCode.NO_COMMAND,
                {"available": list(self.registry.list_names())},
            )

        name = argv[0]
        tokens = tuple(argv[1:])
        if self.registry.contains(name):
            descriptor = self.registry.find_by_name(name)
            if descriptor is None:
                self._say(
                    f"there was an error gathering the metadata"
                    f" for command ({name})",
                )
                return self._fail(
                    "dispatcher.select_command",
                    "NoCommandMetadataError",
                    f"Command '{name}' is listed but has no descriptor",
                    ExitCode.INTERNAL_NO_COMMAND_METADATA,
                    {"command_name": name},
                )
            return IOSuccess((descriptor, tokens))

        self._say(
            f"the provided command ({name}) is not valid."
            " possible commands are:",
            *render_command_list(self.registry, marker),
        )
        available = list(self.registry.list_names())
        return self._fail(
            "dispatcher.select_command",
            "InvalidCommandError",
            f"Unknown command '{name}'. Available: {available}",
            ExitCode.INVALID_COMMAND,
            {"command_name": name, "available": available},
        )

    def _report(
        self,
        descriptor: CommandDescriptor,
        report: ArgumentReport,
    ) -> None:
        marker = self.config.list_marker
        if report.unknown:
            self._say(
                "there were command arguments provided for the command"
                f" ({descriptor}) that were unknown... this is not a"
                f" breaking action and ({descriptor}) will continue"
                " as normal",
                "the unknown command arguments were:",
                *render_marked_list(report.unknown, marker),
            )
        if report.malformed:
            self._say(
                "there were invalid command arguments provided for"
                f" the command ({descriptor})",
                "the invalid command arguments were:",
                *render_marked_list(report.malformed, marker),
            )
        if report.missing:
            self._say(
                "there were missing command arguments provided for"
                f" the command ({descriptor})",
                "the missing command arguments were:",
                *render_marked_list(report.missing, marker),
            )

    def validate_arguments(
        self,
        descriptor: CommandDescriptor,
        tokens: Sequence[str],
    ) -> IOResult[Invocation, DispatchError]:
        """Validate tokens against the command's requirements.

        Returns the bound Invocation when the command may run.
        Malformed and missing arguments are both reported before
        the run fails.
        """
        if not descriptor.requires_arguments:
            return IOSuccess(descriptor.bind(EMPTY_ARGUMENTS))

        if not tokens:
            self._say(
                "there were no command arguments provided for the"
                f" command ({descriptor})",
            )
            usage = self._print_usage(descriptor)
            if isinstance(usage, IOFailure):
                return usage
            return self._fail(
                "dispatcher.validate_arguments",
                "NoCommandArgumentsError",
                f"Command '{descriptor}' requires arguments",
                ExitCode.NO_COMMAND_ARGUMENTS,
                {"command_name": descriptor.name},
            )

        outcome = parse_argument_tokens(tokens, self.config.duplicate_keys)
        for token in outcome.malformed:
            self._say(
                f"the command ({descriptor}) was given an argument of"
                f" {token}, which does not meet the required format of"
                " commandArg=value",
            )

        classified = classify_arguments(descriptor, outcome)
        if isinstance(classified, Failure):
            err = classified.failure()
            self._say(err.message)
            return IOFailure(err)

        report = classified.unwrap()
        self._report(descriptor, report)
        if report.is_fatal:
            usage = self._print_usage(descriptor)
            if isinstance(usage, IOFailure):
                return usage
            return self._fail(
                "dispatcher.validate_arguments",
                "InvalidCommandArgumentsError",
                f"Command '{descriptor}' received invalid arguments",
                ExitCode.INVALID_COMMAND_ARGUMENTS,
                {
                    "command_name": descriptor.name,
                    "malformed": list(report.malformed),
                    "missing": list(report.missing),
                },
            )
        return IOSuccess(descriptor.bind(report.arguments))

    def dispatch(
        self,
        argv: Sequence[str] | None,
    ) -> IOResult[ExitCode, DispatchError]:
        """Select, validate and execute one command.

        Exceptions raised by the command's action propagate.
        """

        def _validate(
            selected: SelectedCommand,
        ) -> IOResult[Invocation, DispatchError]:
            descriptor, tokens = selected
            return self.validate_arguments(descriptor, tokens)

        def _execute(invocation: Invocation) -> ExitCode:
            invocation.execute()
            return ExitCode.SUCCESS

        return self.select_command(argv).bind(_validate).map(_execute)

    def start(self, argv: Sequence[str] | None) -> NoReturn:
        """Run the pipeline and terminate the process."""
        self._say("")
        io_ops.exit_process(exit_code_of(self.dispatch(argv)))
