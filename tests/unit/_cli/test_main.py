"""Test rosactl._cli.main."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import Mock

import pytest

from rosactl import __version__
from rosactl._cli import cli
from rosactl._cli.utils import CliContext
from rosactl.aws import CallerIdentity

if TYPE_CHECKING:
    from click.testing import CliRunner
    from pytest_mock import MockerFixture

MODULE = "rosactl._cli.main"

IDENTITY = CallerIdentity(
    account="123456789012", arn="arn:aws:iam::123456789012:user/test", user_id="AIDAEXAMPLE"
)


@pytest.fixture
def mock_context(mocker: MockerFixture) -> Mock:
    """Record the global options the context object is created with."""
    mocker.patch("rosactl._cli.commands._whoami.get_caller_identity", return_value=IDENTITY)
    return mocker.patch(f"{MODULE}.CliContext", wraps=CliContext)


def test_cli_help(cli_runner: CliRunner) -> None:
    """Test cli --help lists the commands."""
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("init", "setup-account", "whoami"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    """Test cli --version."""
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output == f"{__version__}\n"


@pytest.mark.parametrize(
    "args",
    [
        ["--region", "us-west-2", "--debug", "whoami"],
        ["whoami", "--region", "us-west-2", "--debug"],
        ["--debug", "whoami", "--region", "us-west-2"],
    ],
)
def test_cli_global_options(
    args: list[str],
    cli_runner: CliRunner,
    mock_context: Mock,
    mock_setup_logging: Mock,
) -> None:
    """Test global options are accepted before and after the command."""
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    mock_setup_logging.assert_called_once_with(debug=1, no_color=True, verbose=False)
    kwargs: dict[str, Any] = mock_context.call_args.kwargs
    assert kwargs["region"] == "us-west-2"
    assert kwargs["profile"] is None


@pytest.mark.cli_runner(env={"AWS_REGION": "eu-west-1", "VERBOSE": "1"})
def test_cli_global_options_env(
    cli_runner: CliRunner, mock_context: Mock, mock_setup_logging: Mock
) -> None:
    """Test global options are read from the environment."""
    assert cli_runner.invoke(cli, ["whoami"]).exit_code == 0
    assert mock_context.call_args.kwargs["region"] == "eu-west-1"
    assert mock_setup_logging.call_args.kwargs["verbose"] is True
