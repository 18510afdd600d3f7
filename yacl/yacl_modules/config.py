"""Dispatcher configuration."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from yacl.yacl_modules import io_ops

DuplicateKeyPolicy = Literal["malformed", "last_wins"]


def _default_program_name() -> str:
    return io_ops.default_program_name()


class DispatchConfig(BaseModel):
    """Settings shared by the dispatcher and its render steps.

    duplicate_keys controls a repeated key=value token:
    "malformed" rejects the later token, "last_wins" keeps it.
    """

    model_config = ConfigDict(frozen=True)

    program_name: str = Field(default_factory=_default_program_name)
    duplicate_keys: DuplicateKeyPolicy = "malformed"
    list_marker: str = "-"
    help_command: str = "help"
