"""Constant values."""

from pathlib import Path

BOOTSTRAP_FILE_NAME = "bootstrap"
"""Name of the executable a custom runtime starts. Also used as the function handler."""

DEFAULT_ARCHITECTURE = "x86_64"
"""Default instruction set architecture of the function."""

DEFAULT_ENTRY_POINT = "rosactl.provisioner.bootstrap:main"
"""Callable executed when the deployment package is started."""

DEFAULT_EXECUTION_ROLE_NAME = "rosa-oidc-provisioner-execution"
"""Default name of the IAM role assumed by the function."""

DEFAULT_FUNCTION_NAME = "rosa-oidc-provisioner"
"""Default name of the function."""

DEFAULT_MEMORY_SIZE = 128
"""Default amount of memory (MiB) available to the function."""

DEFAULT_PYTHON_VERSION = "3.12"
"""Python version dependencies of the deployment package are installed for."""

DEFAULT_RUNTIME = "provided.al2023"
"""Default runtime of the function."""

DEFAULT_TAGS = {"rosa:component": "oidc-provisioner", "rosa:managed": "true"}
"""Tags applied to resources created by ``rosactl setup-account``."""

DEFAULT_TIMEOUT = 60
"""Default timeout (seconds) of the function."""

EXECUTION_ROLE_DESCRIPTION = "Execution role for ROSA OIDC provisioner Lambda"

FUNCTION_DESCRIPTION = "ROSA OIDC provider provisioner"

INVOKE_STATEMENT_ID = "AllowInvokerInvoke"
"""Statement ID of the invocation permission added to the function policy."""

LOG_GROUP_RETENTION_DAYS = 90

MAX_PACKAGE_SIZE = 50 * 1024 * 1024
"""Largest deployment package that can be uploaded directly (50 MiB)."""

PERMISSIONS_POLICY_NAME = "OIDCProvisionerPermissions"
"""Name of the inline policy attached to the execution role."""

PROVISIONER_SOURCE_DIR = Path(__file__).resolve().parent.parent
"""Source of the provisioner bundled into the deployment package."""

PROVISIONER_REQUIREMENTS = PROVISIONER_SOURCE_DIR / "provisioner" / "requirements.txt"
"""Third-party requirements of the provisioner."""
