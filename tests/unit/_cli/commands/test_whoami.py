"""Test rosactl._cli.commands._whoami."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from botocore.exceptions import NoCredentialsError

from rosactl._cli import cli
from rosactl.aws import CallerIdentity
from rosactl.exceptions import RemoteFailureError

if TYPE_CHECKING:
    from click.testing import CliRunner
    from pytest import LogCaptureFixture
    from pytest_mock import MockerFixture

MODULE = "rosactl._cli.commands._whoami"


def test_whoami(cli_runner: CliRunner, mocker: MockerFixture, mock_setup_logging: Any) -> None:
    """Test whoami."""
    mock_get_caller_identity = mocker.patch(
        f"{MODULE}.get_caller_identity",
        return_value=CallerIdentity(
            account="123456789012",
            arn="arn:aws:iam::123456789012:user/test",
            user_id="AIDAEXAMPLE",
        ),
    )
    result = cli_runner.invoke(cli, ["whoami"])
    assert result.exit_code == 0
    assert result.output == (
        "UserId: AIDAEXAMPLE\n"
        "Account: 123456789012\n"
        "Arn: arn:aws:iam::123456789012:user/test\n"
    )
    mock_get_caller_identity.assert_called_once()


def test_whoami_error(
    caplog: LogCaptureFixture,
    cli_runner: CliRunner,
    mocker: MockerFixture,
    mock_setup_logging: Any,
) -> None:
    """Test whoami when the call fails."""
    caplog.set_level(logging.ERROR, logger="rosactl.cli.commands.whoami")
    mocker.patch(
        f"{MODULE}.get_caller_identity",
        side_effect=RemoteFailureError("GetCallerIdentity", "ExpiredToken", "token expired"),
    )
    result = cli_runner.invoke(cli, ["whoami"])
    assert result.exit_code == 1
    assert "GetCallerIdentity failed (ExpiredToken): token expired" in caplog.messages
    assert "UserId" not in result.output


def test_whoami_no_credentials(
    caplog: LogCaptureFixture,
    cli_runner: CliRunner,
    mocker: MockerFixture,
    mock_setup_logging: Any,
) -> None:
    """Test whoami without credentials."""
    caplog.set_level(logging.ERROR, logger="rosactl.cli.commands.whoami")
    mocker.patch(f"{MODULE}.get_caller_identity", side_effect=NoCredentialsError())
    result = cli_runner.invoke(cli, ["whoami"])
    assert result.exit_code == 1
    assert "Unable to locate credentials" in caplog.messages
