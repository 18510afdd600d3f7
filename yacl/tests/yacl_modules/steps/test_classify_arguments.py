"""Tests for argument classification."""
from __future__ import annotations

from returns.result import Failure, Success

from yacl.yacl_modules.steps.classify_arguments import (
    classify_arguments,
    required_argument_names,
)
from yacl.yacl_modules.steps.parse_arguments import parse_argument_tokens
from yacl.yacl_modules.types import CommandDescriptor, ExitCode

BUILD = CommandDescriptor(
    name="build",
    description="d",
    requires_arguments=True,
    required_argument_names=("input", "output"),
)


def test_required_names_for_optional_command() -> None:
    """Commands without requirements have no required names."""
    descriptor = CommandDescriptor(name="v", description="d")
    assert required_argument_names(descriptor) == Success(())


def test_required_names_missing_list_fails() -> None:
    """requires_arguments without names is a configuration error."""
    for names in (None, ()):
        descriptor = CommandDescriptor(
            name="broken",
            description="d",
            requires_arguments=True,
            required_argument_names=names,
        )
        result = required_argument_names(descriptor)
        assert isinstance(result, Failure)
        err = result.failure()
        assert err.exit_code is (
            ExitCode.INTERNAL_NO_REQUIRED_ARGUMENTS_PROVIDED
        )
        assert err.message == (
            "there was an error gathering the required"
            " arguments for command (broken)"
        )


def test_all_present() -> None:
    """Both required names supplied: nothing missing or unknown."""
    outcome = parse_argument_tokens(["input=a.txt", "output=b.txt"])
    report = classify_arguments(BUILD, outcome).unwrap()
    assert dict(report.arguments) == {"input": "a.txt", "output": "b.txt"}
    assert report.missing == ()
    assert report.unknown == ()
    assert not report.is_fatal


def test_missing_follows_required_order() -> None:
    """Missing names keep the declared order."""
    outcome = parse_argument_tokens(["other=1"])
    report = classify_arguments(BUILD, outcome).unwrap()
    assert report.missing == ("input", "output")
    assert report.unknown == ("other",)
    assert report.is_fatal


def test_unknown_is_not_fatal() -> None:
    """Extra arguments are unknown but not fatal."""
    outcome = parse_argument_tokens(
        ["input=a.txt", "output=b.txt", "extra=z"],
    )
    report = classify_arguments(BUILD, outcome).unwrap()
    assert report.unknown == ("extra",)
    assert not report.is_fatal


def test_malformed_carried_into_report() -> None:
    """Malformed tokens from parsing are kept in the report."""
    single = CommandDescriptor(
        name="single",
        description="d",
        requires_arguments=True,
        required_argument_names=("x",),
    )
    outcome = parse_argument_tokens(["badtoken"])
    report = classify_arguments(single, outcome).unwrap()
    assert report.malformed == ("badtoken",)
    assert report.missing == ("x",)
    assert report.is_fatal
