"""Class mixins."""

from __future__ import annotations

import logging
import platform
import shlex
import subprocess
from collections.abc import Iterable
from typing import TYPE_CHECKING, ClassVar, cast

if TYPE_CHECKING:
    from pathlib import Path

    from ._logging import RosactlLogger

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))


class CliInterfaceMixin:
    """Mixin for adding CLI interface methods."""

    EXECUTABLE: ClassVar[str]
    """CLI executable."""

    cwd: Path
    """Working directory where commands will be run."""

    env: dict[str, str] | None = None
    """Environment variables passed to commands. Inherited when ``None``."""

    @staticmethod
    def convert_to_cli_arg(arg_name: str, *, prefix: str = "--") -> str:
        """Convert string kwarg name into a CLI argument."""
        return f"{prefix}{arg_name.replace('_', '-')}"

    @classmethod
    def generate_command(
        cls,
        command: list[str] | str,
        **kwargs: bool | Iterable[str] | str | None,
    ) -> list[str]:
        """Generate command to be executed and log it.

        Args:
            command: Command to run.
            **kwargs: Converted into CLI options appended to the command.

        Returns:
            The full command to be passed into a subprocess.

        """
        cmd = [cls.EXECUTABLE, *(command if isinstance(command, list) else [command])]
        cmd.extend(cls._generate_command_handle_kwargs(**kwargs))
        LOGGER.debug("generated command: %s", cls.list2cmdline(cmd))
        return cmd

    @classmethod
    def _generate_command_handle_kwargs(
        cls, **kwargs: bool | Iterable[str] | str | None
    ) -> list[str]:
        """Handle kwargs passed to generate_command."""
        result: list[str] = []
        for k, v in kwargs.items():
            if isinstance(v, str):
                result.extend([cls.convert_to_cli_arg(k), v])
            elif isinstance(v, (list, set, tuple)):
                for i in cast(Iterable[str], v):
                    result.extend([cls.convert_to_cli_arg(k), i])
            elif isinstance(v, bool) and v:
                result.append(cls.convert_to_cli_arg(k))
        return result

    @staticmethod
    def list2cmdline(split_command: Iterable[str]) -> str:
        """Combine a list of strings into a string that can be run as a command.

        Handles multi-platform differences.

        """
        if platform.system() == "Windows":
            return subprocess.list2cmdline(split_command)
        return shlex.join(split_command)

    def _run_command(self, command: Iterable[str] | str) -> str:
        """Run command and return its output.

        Args:
            command: Command to pass to shell to execute.

        Raises:
            subprocess.CalledProcessError: The command exited with a non-zero
                status. ``stderr`` of the error holds the captured output.

        """
        cmd_str = command if isinstance(command, str) else self.list2cmdline(command)
        LOGGER.verbose("running command: %s", cmd_str)
        return subprocess.check_output(
            cmd_str,
            cwd=self.cwd,
            env=self.env,
            shell=True,
            stderr=subprocess.PIPE,
            text=True,
        )
