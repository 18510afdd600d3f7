"""Shared test fixtures for the YACL test suite."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from yacl.yacl_modules.config import DispatchConfig
from yacl.yacl_modules.dispatcher import Dispatcher
from yacl.yacl_modules.registry import CommandRegistry
from yacl.yacl_modules.types import CommandDescriptor

if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from yacl.yacl_modules.types import ParsedArguments


@pytest.fixture
def calls() -> list[tuple[str, dict[str, str]]]:
    """Record of (command name, arguments) for every executed action."""
    return []


@pytest.fixture
def sample_registry(
    calls: list[tuple[str, dict[str, str]]],
) -> CommandRegistry:
    """Return a registry registered in non-sorted order."""

    def _recorder(name: str):  # type: ignore[no-untyped-def]
        def _action(arguments: ParsedArguments) -> None:
            calls.append((name, dict(arguments)))

        return _action

    return CommandRegistry(
        [
            CommandDescriptor(
                name="version",
                description="Show the version",
                action=_recorder("version"),
            ),
            CommandDescriptor(
                name="build",
                description="Build output from input",
                action=_recorder("build"),
                requires_arguments=True,
                required_argument_names=("input", "output"),
            ),
            CommandDescriptor(
                name="Zeta",
                description="Capitalized command",
                action=_recorder("Zeta"),
            ),
            CommandDescriptor(
                name="single",
                description="Needs x",
                action=_recorder("single"),
                requires_arguments=True,
                required_argument_names=("x",),
            ),
            CommandDescriptor(
                name="alpha",
                description="Lowercase command",
                action=_recorder("alpha"),
            ),
            CommandDescriptor(
                name="broken",
                description="Requires arguments but declares none",
                action=_recorder("broken"),
                requires_arguments=True,
            ),
        ],
    )


@pytest.fixture
def sample_config() -> DispatchConfig:
    """Return a config with a fixed program name."""
    return DispatchConfig(program_name="app")


@pytest.fixture
def dispatcher(
    sample_registry: CommandRegistry,
    sample_config: DispatchConfig,
) -> Dispatcher:
    """Return a Dispatcher over the sample registry."""
    return Dispatcher(registry=sample_registry, config=sample_config)


@pytest.fixture
def mock_exit(mocker: MagicMock) -> MagicMock:
    """Replace process exit with a SystemExit-raising mock."""
    return mocker.patch(  # type: ignore[no-any-return]
        "yacl.yacl_modules.io_ops.exit_process",
        side_effect=SystemExit,
    )
