"""Entry point of the provisioner deployment package.

The deployment package is a Python zip application. Dependencies with
compiled extensions can not be imported from a zip archive so the archive is
unpacked once per execution environment and the runtime is started from the
unpacked copy.

Only the standard library may be imported by this module.

"""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import zipfile
from pathlib import Path

RUNTIME_MODULE = "rosactl.provisioner.runtime"


def unpack(archive: Path, root: Path | None = None) -> Path:
    """Extract the zip application to a directory named after its size and mtime.

    Extraction is skipped when the directory already exists.

    Returns:
        Directory containing the extracted files.

    """
    root = root or Path(tempfile.gettempdir())
    info = archive.stat()
    target = root / f"rosactl-{info.st_size}-{int(info.st_mtime)}"
    if target.is_dir():
        return target
    staging = Path(tempfile.mkdtemp(prefix=".rosactl-", dir=root))
    try:
        with zipfile.ZipFile(archive) as zip_file:
            zip_file.extractall(staging)
        staging.rename(target)
    except OSError:
        shutil.rmtree(staging, ignore_errors=True)
        if not target.is_dir():
            raise
    return target


def main() -> None:
    """Start the runtime from an unpacked copy of the zip application."""
    archive = Path(sys.argv[0]).resolve()
    if not zipfile.is_zipfile(archive):
        from .runtime import main as runtime_main

        runtime_main()
        return
    target = unpack(archive)
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(target), env.get("PYTHONPATH")]))
    os.execve(sys.executable, [sys.executable, "-m", RUNTIME_MODULE], env)
