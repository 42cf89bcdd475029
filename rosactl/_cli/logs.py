"""rosactl CLI logging setup."""

from __future__ import annotations

import logging
import os
import sys
from functools import cached_property
from typing import Any, TextIO

import coloredlogs
from humanfriendly.terminal import terminal_supports_colors  # type: ignore
from typing_extensions import TypedDict

from .. import LogLevels

LOGGER = logging.getLogger("rosactl")

LOG_FORMAT = "[rosactl] %(message)s"
LOG_FORMAT_VERBOSE = logging.BASIC_FORMAT
LOG_FIELD_STYLES: dict[str, dict[str, Any]] = {
    "levelname": {},
    "message": {},
    "name": {},
}
LOG_LEVEL_STYLES: dict[str, dict[str, Any]] = {
    "debug": {"color": "green"},
    "error": {"color": "red"},
    "info": {},
    "success": {"color": "green", "bold": True},
    "verbose": {"color": "cyan"},
    "warning": {"color": 214},
}


class LogSettingsEnvTypeDef(TypedDict):
    """Type definition for :attr:`rosactl._cli.logs.LogSettings._env` attribute."""

    field_styles: str | None
    fmt: str | None
    level_styles: str | None


class LogSettings:
    """CLI log settings."""

    _env: LogSettingsEnvTypeDef

    def __init__(self, *, debug: int = 0, no_color: bool = False, verbose: bool = False) -> None:
        """Instantiate class.

        Args:
            debug: Debug level.
            no_color: Disable color in rosactl's logs.
            verbose: Whether to display verbose logs.

        """
        self._env = {
            "field_styles": os.getenv("ROSACTL_LOG_FIELD_STYLES"),
            "fmt": os.getenv("ROSACTL_LOG_FORMAT"),
            "level_styles": os.getenv("ROSACTL_LOG_LEVEL_STYLES"),
        }
        self.debug = debug
        self.no_color = no_color
        self.verbose = verbose

    @property
    def coloredlogs(self) -> dict[str, Any]:
        """Return settings for coloredlogs."""
        return {
            "field_styles": self.field_styles,
            "fmt": self.fmt,
            "isatty": None if self.no_color else self.supports_colors,
            "level_styles": self.level_styles,
            "stream": self.stream,
        }

    @cached_property
    def fmt(self) -> str:
        """Return log record format.

        If "ROSACTL_LOG_FORMAT" exists in the environment, it will be used.

        """
        fmt = self._env["fmt"]
        if isinstance(fmt, str) and fmt:
            return fmt
        if self.debug or self.no_color or self.verbose:
            return LOG_FORMAT_VERBOSE
        return LOG_FORMAT

    @cached_property
    def field_styles(self) -> dict[str, Any]:
        """Return log field styles.

        If "ROSACTL_LOG_FIELD_STYLES" exists in the environment, it will be
        used to update LOG_FIELD_STYLES.

        """
        if self.no_color:
            return {}

        result = LOG_FIELD_STYLES.copy()
        if self._env["field_styles"]:
            result.update(
                coloredlogs.parse_encoded_styles(self._env["field_styles"])  # type: ignore
            )
        return result

    @cached_property
    def level_styles(self) -> dict[str, Any]:
        """Return log level styles.

        If "ROSACTL_LOG_LEVEL_STYLES" exists in the environment, it will be
        used to update LOG_LEVEL_STYLES.

        """
        if self.no_color:
            return {}

        result = LOG_LEVEL_STYLES.copy()
        if self._env["level_styles"]:
            result.update(
                coloredlogs.parse_encoded_styles(self._env["level_styles"])  # type: ignore
            )
        return result

    @cached_property
    def log_level(self) -> LogLevels:
        """Return log level to use."""
        if self.debug:
            return LogLevels.DEBUG
        if self.verbose:
            return LogLevels.VERBOSE
        return LogLevels.INFO

    @property
    def stream(self) -> TextIO:
        """Stream that will be logged to."""
        return sys.stdout

    @cached_property
    def supports_colors(self) -> bool:
        """Return if ``stream`` is connected to a terminal that supports ANSI escape sequences."""
        return terminal_supports_colors(self.stream)  # type: ignore


def setup_logging(*, debug: int = 0, no_color: bool = False, verbose: bool = False) -> None:
    """Configure log settings for the rosactl CLI.

    Keyword Args:
        debug: Debug level (0-2).
        no_color: Whether to use colorized logs.
        verbose: Use verbose logging.

    """
    settings = LogSettings(debug=debug, no_color=no_color, verbose=verbose)

    coloredlogs.install(settings.log_level, logger=LOGGER, **settings.coloredlogs)
    LOGGER.debug("rosactl log level: %s", LOGGER.getEffectiveLevel())

    if settings.debug >= 2:
        coloredlogs.install(
            settings.log_level,
            logger=logging.getLogger("botocore"),
            **settings.coloredlogs,
        )
        LOGGER.debug("set dependency log level to debug")
    LOGGER.debug("initialized logging for rosactl")
