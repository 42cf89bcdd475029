"""Pytest fixtures and plugins."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, cast

import pytest
from click.testing import CliRunner

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.fixture
def cli_runner(request: pytest.FixtureRequest) -> CliRunner:
    """Initialize instance of `click.testing.CliRunner`.

    Keyword arguments of a ``cli_runner`` mark are passed to the runner.
    Its ``env`` is merged into the default environment.

    """
    kwargs: dict[str, Any] = {
        "env": {
            **os.environ,
            "AWS_PROFILE": None,
            "AWS_REGION": "us-east-1",
            "DEBUG": None,
            "ROSACTL_NO_COLOR": "1",
            "ROSACTL_PLATFORM_API_URL": None,
            "VERBOSE": None,
        }
    }
    mark = cast("pytest.Function | pytest.Item", request.node).get_closest_marker("cli_runner")
    if mark:
        mark_kwargs = dict(cast("dict[str, Any]", mark.kwargs))
        kwargs["env"].update(mark_kwargs.pop("env", {}))
        kwargs.update(mark_kwargs)
    return CliRunner(**kwargs)


@pytest.fixture
def mock_setup_logging(mocker: MockerFixture) -> Any:
    """Prevent the CLI from reconfiguring logging."""
    return mocker.patch("rosactl._cli.main.setup_logging")
