"""rosactl command import aggregation."""

from ._init import init
from ._setup_account import setup_account
from ._whoami import whoami

__all__ = ["init", "setup_account", "whoami"]
