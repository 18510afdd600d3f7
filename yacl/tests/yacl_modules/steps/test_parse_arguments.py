"""Tests for argument token parsing."""
from __future__ import annotations

import pytest
from returns.result import Failure, Success

from yacl.yacl_modules.steps.parse_arguments import (
    parse_argument_tokens,
    split_argument_token,
)
from yacl.yacl_modules.types import ExitCode


def test_split_simple_token() -> None:
    """key=value splits into its two halves."""
    assert split_argument_token("input=a.txt") == Success(("input", "a.txt"))


def test_split_keeps_later_separators_in_value() -> None:
    """Only the first '=' separates; the value is byte-for-byte."""
    assert split_argument_token("query=a=b==c") == Success(
        ("query", "a=b==c"),
    )


@pytest.mark.parametrize(
    "token",
    ["badtoken", "=value", "key=", "=", ""],
)
def test_split_malformed_tokens(token: str) -> None:
    """Tokens without a non-empty key and value are malformed."""
    result = split_argument_token(token)
    assert isinstance(result, Failure)
    err = result.failure()
    assert err.error_type == "MalformedArgumentError"
    assert err.exit_code is ExitCode.INVALID_COMMAND_ARGUMENTS
    assert err.context == {"token": token}


def test_parse_builds_argument_map() -> None:
    """Well-formed tokens land in the map."""
    outcome = parse_argument_tokens(["input=a.txt", "output=b.txt"])
    assert dict(outcome.arguments) == {"input": "a.txt", "output": "b.txt"}
    assert outcome.malformed == ()


def test_parse_collects_malformed_in_order() -> None:
    """Malformed tokens are recorded and never inserted."""
    outcome = parse_argument_tokens(["b", "x=1", "a", "=z"])
    assert dict(outcome.arguments) == {"x": "1"}
    assert outcome.malformed == ("b", "a", "=z")


def test_parse_result_is_read_only() -> None:
    """The argument map cannot be mutated."""
    outcome = parse_argument_tokens(["x=1"])
    with pytest.raises(TypeError):
        outcome.arguments["x"] = "2"  # type: ignore[index]


def test_duplicate_key_is_malformed_by_default() -> None:
    """A repeated key is rejected and the first value kept."""
    outcome = parse_argument_tokens(["x=1", "x=2"])
    assert dict(outcome.arguments) == {"x": "1"}
    assert outcome.malformed == ("x=2",)


def test_duplicate_key_last_wins() -> None:
    """With last_wins the later value replaces the earlier one."""
    outcome = parse_argument_tokens(["x=1", "x=2"], "last_wins")
    assert dict(outcome.arguments) == {"x": "2"}
    assert outcome.malformed == ()


def test_round_trip_value_lookup() -> None:
    """Looking up a parsed key returns exactly the supplied value."""
    value = "s3://bucket/key?a=1&b=2"
    outcome = parse_argument_tokens([f"url={value}"])
    assert outcome.arguments["url"] == value
