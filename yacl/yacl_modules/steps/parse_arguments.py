"""Argument token parsing (pure functions).

Tokens have the shape key=value. Only the first '=' separates
key from value; any further '=' belong to the value.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from returns.result import Failure, Result, Success

from yacl.yacl_modules.errors import DispatchError
from yacl.yacl_modules.types import ExitCode, ParseOutcome

if TYPE_CHECKING:
    from collections.abc import Sequence

    from yacl.yacl_modules.config import DuplicateKeyPolicy

ARGUMENT_SEPARATOR = "="


def split_argument_token(
    token: str,
) -> Result[tuple[str, str], DispatchError]:
    """Split one token into (key, value) on the first separator.

    Fails when the separator is absent or either side is empty.
    """
    key, sep, value = token.partition(ARGUMENT_SEPARATOR)
    if not sep or not key or not value:
        return Failure(
            DispatchError(
                step_name="split_argument_token",
                error_type="MalformedArgumentError",
                message=(
                    f"Argument '{token}' does not match"
                    " the format key=value"
                ),
                exit_code=ExitCode.INVALID_COMMAND_ARGUMENTS,
                context={"token": token},
            ),
        )
    return Success((key, value))


def parse_argument_tokens(
    tokens: Sequence[str],
    duplicate_keys: DuplicateKeyPolicy = "malformed",
) -> ParseOutcome:
    """Build the argument map for one invocation.

    Malformed tokens are collected in input order and never
    inserted. With duplicate_keys="malformed" a repeated key
    is malformed and the first value is kept.
    """
    arguments: dict[str, str] = {}
    malformed: list[str] = []
    for token in tokens:
        split = split_argument_token(token)
        if isinstance(split, Failure):
            malformed.append(token)
            continue
        key, value = split.unwrap()
        if key in arguments and duplicate_keys == "malformed":
            malformed.append(token)
            continue
        arguments[key] = value
    return ParseOutcome(
        arguments=MappingProxyType(arguments),
        malformed=tuple(malformed),
    )
