"""Build the deployment package of the provisioner."""

from __future__ import annotations

import hashlib
import io
import logging
import shutil
import stat
import subprocess
import sys
import tempfile
import zipfile
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

from pydantic import ConfigDict

from ..exceptions import BuildFailureError, PackageSizeExceededError
from ..mixins import CliInterfaceMixin
from ..utils import BaseModel
from .constants import (
    BOOTSTRAP_FILE_NAME,
    DEFAULT_ARCHITECTURE,
    DEFAULT_ENTRY_POINT,
    DEFAULT_PYTHON_VERSION,
    MAX_PACKAGE_SIZE,
)

if TYPE_CHECKING:
    from _typeshed import StrPath

    from .._logging import RosactlLogger
    from .models import DeploymentConfig

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))

INTERPRETER = "/usr/bin/env python3"
"""Interpreter written to the shebang line of the executable."""

PLATFORM_TAGS = {
    "arm64": "manylinux2014_aarch64",
    "x86_64": "manylinux2014_x86_64",
}
"""Wheel platform tag of each supported architecture."""


class PackageArtifact(BaseModel):
    """A built deployment package."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    """Content of the zip archive."""

    checksum: str
    """Lowercase hex SHA-256 of ``data``."""

    size: int
    """Size of ``data`` in bytes."""

    @classmethod
    def from_bytes(cls, data: bytes) -> PackageArtifact:
        """Create an artifact, computing the checksum and size of the data."""
        return cls(data=data, checksum=hashlib.sha256(data).hexdigest(), size=len(data))


class Pip(CliInterfaceMixin):
    """pip CLI interface used to install dependencies for another platform."""

    EXECUTABLE: ClassVar[str] = sys.executable
    """CLI executable."""

    def __init__(self, cwd: Path) -> None:
        """Instantiate class.

        Args:
            cwd: Working directory where commands will be run.

        """
        self.cwd = cwd

    @classmethod
    def generate_install_command(
        cls,
        *,
        platform: str,
        python_version: str,
        requirements: StrPath,
        target: StrPath,
    ) -> list[str]:
        """Generate the command that when run will install dependencies.

        Only binary distributions are installed so the result matches the
        target platform rather than the platform pip is run on.

        Args:
            platform: Wheel platform tag (e.g. ``manylinux2014_x86_64``).
            python_version: Python version of the target interpreter.
            requirements: Path to a ``requirements.txt`` file.
            target: Path to a directory where dependencies will be installed.

        """
        return cls.generate_command(
            ["-m", "pip", "install"],
            disable_pip_version_check=True,
            implementation="cp",
            no_input=True,
            only_binary=":all:",
            platform=platform,
            python_version=python_version,
            requirement=str(requirements),
            target=str(target),
        )

    def install(
        self,
        *,
        platform: str,
        python_version: str,
        requirements: Path,
        target: Path,
    ) -> Path:
        """Install dependencies to a target directory.

        Raises:
            BuildFailureError: pip exited with an error.

        """
        target.mkdir(exist_ok=True, parents=True)
        try:
            self._run_command(
                self.generate_install_command(
                    platform=platform,
                    python_version=python_version,
                    requirements=requirements,
                    target=target,
                )
            )
        except subprocess.CalledProcessError as exc:
            raise BuildFailureError(
                requirements, "failed to install dependencies", exc.stderr or ""
            ) from exc
        return target


class ZipApp(CliInterfaceMixin):
    """zipapp CLI interface used to produce a single executable file."""

    EXECUTABLE: ClassVar[str] = sys.executable
    """CLI executable."""

    def __init__(self, cwd: Path) -> None:
        """Instantiate class.

        Args:
            cwd: Working directory where commands will be run.

        """
        self.cwd = cwd

    @classmethod
    def generate_create_command(
        cls, *, entry_point: str, output: StrPath, source: StrPath
    ) -> list[str]:
        """Generate the command that when run will create the executable."""
        return cls.generate_command(
            ["-m", "zipapp", str(source)],
            main=entry_point,
            output=str(output),
            python=INTERPRETER,
        )

    def create(self, *, entry_point: str, output: Path, source: Path) -> Path:
        """Create an executable archive from a directory.

        Raises:
            BuildFailureError: zipapp exited with an error.

        """
        try:
            self._run_command(
                self.generate_create_command(
                    entry_point=entry_point, output=output, source=source
                )
            )
        except subprocess.CalledProcessError as exc:
            raise BuildFailureError(source, "failed to compile", exc.stderr or "") from exc
        if not output.is_file():
            raise BuildFailureError(source, f"{output.name} not found after compiling")
        return output


class PackageBuilder:
    """Compile a source tree into a Lambda deployment package.

    The package is a zip archive containing a single executable named
    ``bootstrap``. The executable is a Python zip application that includes
    the source tree and its dependencies, installed for the target
    architecture.

    """

    ZIPFILE_PERMISSION_MASK: ClassVar[int] = (stat.S_IRWXU | stat.S_IRWXG | stat.S_IRWXO) << 16
    """Mask to retrieve unix file permissions from the external attributes property of a ``zipfile.ZipInfo``."""

    def __init__(
        self,
        *,
        architecture: str = DEFAULT_ARCHITECTURE,
        entry_point: str = DEFAULT_ENTRY_POINT,
        python_version: str = DEFAULT_PYTHON_VERSION,
        requirements: Path | None = None,
    ) -> None:
        """Instantiate class.

        Args:
            architecture: Instruction set architecture of the target.
            entry_point: Callable (``module:function``) run by the executable.
            python_version: Python version dependencies are installed for.
            requirements: Optional requirements file to install.

        """
        if architecture not in PLATFORM_TAGS:
            raise ValueError(f"unsupported architecture: {architecture}")
        self.architecture = architecture
        self.entry_point = entry_point
        self.python_version = python_version
        self.requirements = requirements

    @classmethod
    def from_config(cls, config: DeploymentConfig) -> PackageBuilder:
        """Create a package builder from a deployment config."""
        return cls(
            architecture=config.architecture,
            entry_point=config.entry_point,
            python_version=config.python_version,
            requirements=config.requirements,
        )

    def build(self, source_dir: StrPath) -> PackageArtifact:
        """Build the deployment package.

        Args:
            source_dir: Directory to bundle. It is added to the executable
                under its own name so it can be imported as a package.

        Raises:
            BuildFailureError: The source directory does not exist or a
                command used to compile the package failed.
            PackageSizeExceededError: The package is too large to upload.

        """
        source_dir = Path(source_dir).resolve()
        if not source_dir.is_dir():
            raise BuildFailureError(source_dir, "source directory does not exist")
        if self.requirements and not self.requirements.is_file():
            raise BuildFailureError(source_dir, f"{self.requirements} does not exist")

        LOGGER.info("building deployment package (%s)...", self.architecture)
        with tempfile.TemporaryDirectory(prefix="rosactl-build-") as tmp_dir:
            build_dir = Path(tmp_dir)
            staging_dir = build_dir / "staging"
            shutil.copytree(
                source_dir,
                staging_dir / source_dir.name,
                ignore=shutil.ignore_patterns("__pycache__", "*.pyc"),
            )
            if self.requirements:
                Pip(build_dir).install(
                    platform=PLATFORM_TAGS[self.architecture],
                    python_version=self.python_version,
                    requirements=self.requirements.resolve(),
                    target=staging_dir,
                )
            executable = ZipApp(build_dir).create(
                entry_point=self.entry_point,
                output=build_dir / BOOTSTRAP_FILE_NAME,
                source=staging_dir,
            )
            executable.chmod(0o755)
            data = self._archive(executable)

        if len(data) > MAX_PACKAGE_SIZE:
            raise PackageSizeExceededError(len(data), MAX_PACKAGE_SIZE)
        artifact = PackageArtifact.from_bytes(data)
        LOGGER.verbose(
            "built deployment package (size: %s bytes; sha256: %s)",
            artifact.size,
            artifact.checksum,
        )
        return artifact

    def _archive(self, executable: Path) -> bytes:
        """Wrap the executable in a zip archive."""
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive_file:
            archive_file.write(executable, BOOTSTRAP_FILE_NAME)
            self._fix_file_permissions(archive_file)
        return buffer.getvalue()

    def _fix_file_permissions(self, archive_file: zipfile.ZipFile) -> None:
        """Ensure every file of the archive is executable (755).

        The change occurs within the archive file only.

        """
        for file_info in archive_file.filelist:
            current_perms = (file_info.external_attr & self.ZIPFILE_PERMISSION_MASK) >> 16
            if current_perms != 0o755:
                LOGGER.debug(
                    "fixing file permissions for %s: %o => 755",
                    file_info.filename,
                    current_perms,
                )
                file_info.external_attr = (
                    file_info.external_attr & ~self.ZIPFILE_PERMISSION_MASK
                ) | (0o755 << 16)
