"""OIDC provider provisioner run as an AWS Lambda function.

Submodules are imported on first access so :mod:`.bootstrap` can be started
from a zip archive before third-party dependencies are importable.

"""

from __future__ import annotations

import importlib
from typing import Any

_EXPORTS = {
    "Handler": "handler",
    "OIDCProvisionerError": "models",
    "OIDCProvisionerRequest": "models",
    "OIDCProvisionerResponse": "models",
    "RuntimeClient": "runtime",
    "lambda_handler": "runtime",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(importlib.import_module(f".{_EXPORTS[name]}", __name__), name)
