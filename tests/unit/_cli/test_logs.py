"""Test rosactl._cli.logs."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Any

import pytest

from rosactl._cli.logs import (
    LOG_FIELD_STYLES,
    LOG_FORMAT,
    LOG_FORMAT_VERBOSE,
    LOG_LEVEL_STYLES,
    LogSettings,
    setup_logging,
)
from rosactl._logging import LogLevels

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

MODULE = "rosactl._cli.logs"


@pytest.fixture(autouse=True)
def clean_env(mocker: MockerFixture) -> None:
    """Remove log settings from the environment."""
    mocker.patch.dict(os.environ, {})
    for key in ("ROSACTL_LOG_FIELD_STYLES", "ROSACTL_LOG_FORMAT", "ROSACTL_LOG_LEVEL_STYLES"):
        os.environ.pop(key, None)


class TestLogSettings:
    """Test LogSettings."""

    def test___init__(self, mocker: MockerFixture) -> None:
        """Test __init__ reads the environment."""
        mocker.patch.dict(
            os.environ,
            {
                "ROSACTL_LOG_FORMAT": "%(levelname)s %(message)s",
                "ROSACTL_LOG_LEVEL_STYLES": "info=blue",
            },
        )
        obj = LogSettings(debug=2, no_color=True, verbose=True)
        assert obj._env == {
            "field_styles": None,
            "fmt": "%(levelname)s %(message)s",
            "level_styles": "info=blue",
        }
        assert obj.debug == 2
        assert obj.no_color
        assert obj.verbose

    @pytest.mark.parametrize("no_color", [False, True])
    def test_coloredlogs(self, mocker: MockerFixture, no_color: bool) -> None:
        """Test coloredlogs."""
        mocker.patch.object(LogSettings, "supports_colors", True)
        obj = LogSettings(no_color=no_color)
        result = obj.coloredlogs
        assert result["fmt"] == obj.fmt
        assert result["isatty"] is (None if no_color else True)
        assert result["stream"] is sys.stdout
        assert result["field_styles"] == obj.field_styles
        assert result["level_styles"] == obj.level_styles

    def test_field_styles(self, mocker: MockerFixture) -> None:
        """Test field_styles."""
        assert LogSettings().field_styles == LOG_FIELD_STYLES
        assert LogSettings(no_color=True).field_styles == {}
        mocker.patch.dict(os.environ, {"ROSACTL_LOG_FIELD_STYLES": "name=magenta"})
        assert LogSettings().field_styles["name"] == {"color": "magenta"}
        assert LOG_FIELD_STYLES["name"] == {}

    @pytest.mark.parametrize(
        "kwargs, expected",
        [
            ({}, LOG_FORMAT),
            ({"debug": 1}, LOG_FORMAT_VERBOSE),
            ({"no_color": True}, LOG_FORMAT_VERBOSE),
            ({"verbose": True}, LOG_FORMAT_VERBOSE),
        ],
    )
    def test_fmt(self, expected: str, kwargs: dict[str, Any]) -> None:
        """Test fmt."""
        assert LogSettings(**kwargs).fmt == expected

    def test_fmt_env(self, mocker: MockerFixture) -> None:
        """Test fmt from the environment."""
        mocker.patch.dict(os.environ, {"ROSACTL_LOG_FORMAT": "%(message)s"})
        assert LogSettings(verbose=True).fmt == "%(message)s"

    def test_level_styles(self, mocker: MockerFixture) -> None:
        """Test level_styles."""
        assert LogSettings().level_styles == LOG_LEVEL_STYLES
        assert LogSettings(no_color=True).level_styles == {}
        mocker.patch.dict(os.environ, {"ROSACTL_LOG_LEVEL_STYLES": "success=blue"})
        assert LogSettings().level_styles["success"] == {"color": "blue"}
        assert LOG_LEVEL_STYLES["success"] == {"color": "green", "bold": True}
        assert sorted(LOG_LEVEL_STYLES) == [
            "debug",
            "error",
            "info",
            "success",
            "verbose",
            "warning",
        ]

    @pytest.mark.parametrize(
        "kwargs, log_level",
        [
            ({}, LogLevels.INFO),
            ({"verbose": True}, LogLevels.VERBOSE),
            ({"debug": 1}, LogLevels.DEBUG),
            ({"debug": 2, "verbose": True}, LogLevels.DEBUG),
        ],
    )
    def test_log_level(self, kwargs: dict[str, Any], log_level: LogLevels) -> None:
        """Test log_level."""
        assert LogSettings(**kwargs).log_level == log_level

    @pytest.mark.parametrize("terminal", [False, True])
    def test_supports_colors(self, mocker: MockerFixture, terminal: bool) -> None:
        """Test supports_colors."""
        mocker.patch.dict(os.environ, {"GITLAB_CI": "true"})
        mock_supports = mocker.patch(f"{MODULE}.terminal_supports_colors", return_value=terminal)
        assert LogSettings().supports_colors is terminal
        mock_supports.assert_called_once_with(sys.stdout)


@pytest.mark.parametrize("debug, installs", [(0, 1), (1, 1), (2, 2)])
def test_setup_logging(debug: int, installs: int, mocker: MockerFixture) -> None:
    """Test setup_logging."""
    mocker.patch.object(LogSettings, "supports_colors", False)
    mock_install = mocker.patch(f"{MODULE}.coloredlogs.install")
    setup_logging(debug=debug)
    assert mock_install.call_count == installs
    assert mock_install.call_args_list[0].kwargs["logger"] is logging.getLogger("rosactl")
    if installs == 2:
        assert mock_install.call_args_list[1].kwargs["logger"] is logging.getLogger("botocore")
        assert mock_install.call_args_list[1].args == (LogLevels.DEBUG,)
