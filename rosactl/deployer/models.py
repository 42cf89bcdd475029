"""Deployment models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from ..utils import BaseModel
from .constants import (
    DEFAULT_ARCHITECTURE,
    DEFAULT_ENTRY_POINT,
    DEFAULT_MEMORY_SIZE,
    DEFAULT_PYTHON_VERSION,
    DEFAULT_RUNTIME,
    DEFAULT_TIMEOUT,
)

Architecture = Literal["x86_64", "arm64"]


class DeploymentConfig(BaseModel):
    """Input of a single deployment."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    function_name: str = Field(min_length=1)
    """Name of the Lambda function."""

    execution_role_name: str = Field(min_length=1)
    """Name of the IAM role assumed by the function."""

    source_dir: Path
    """Directory containing the provisioner source code."""

    invoker_role_arn: str | None = None
    """ARN of the role allowed to invoke the function."""

    source_account_id: str | None = None
    """Account invocations must originate from."""

    runtime: str = DEFAULT_RUNTIME
    """Lambda runtime identifier."""

    memory_size: int = Field(default=DEFAULT_MEMORY_SIZE, ge=128, le=10240)
    """Memory (MiB) available to the function."""

    timeout: int = Field(default=DEFAULT_TIMEOUT, ge=1, le=900)
    """Timeout (seconds) of the function."""

    architecture: Architecture = DEFAULT_ARCHITECTURE
    """Instruction set architecture of the function."""

    layers: tuple[str, ...] = ()
    """ARNs of layers attached to the function.

    The ``provided`` runtimes do not include a Python interpreter. One of the
    layers must provide ``python3`` for the deployment package to start.

    """

    tags: dict[str, str] = Field(default_factory=dict)
    """Tags applied to the function and its log group."""

    entry_point: str = DEFAULT_ENTRY_POINT
    """Callable (``module:function``) run when the deployment package starts."""

    python_version: str = DEFAULT_PYTHON_VERSION
    """Python version dependencies are installed for."""

    requirements: Path | None = None
    """Requirements file installed into the deployment package."""

    @field_validator("invoker_role_arn", "source_account_id", mode="before")
    @classmethod
    def _convert_empty_to_none(cls, v: str | None) -> str | None:
        """Treat empty strings as not provided."""
        return v or None

    @property
    def invocation_permission_configured(self) -> bool:
        """Whether both values needed for the invocation permission are set."""
        return bool(self.invoker_role_arn and self.source_account_id)

    @property
    def log_group_name(self) -> str:
        """Name of the log group Lambda writes function logs to."""
        return f"/aws/lambda/{self.function_name}"


class StepOutcome(str, Enum):
    """How a deployment step ended."""

    OK = "ok"
    WARNING = "warning"
    FATAL = "fatal"
    SKIPPED = "skipped"


class StepReport(BaseModel):
    """Outcome of a single deployment step."""

    model_config = ConfigDict(frozen=True)

    name: str
    outcome: StepOutcome
    message: str = ""


class DeploymentResult(BaseModel):
    """Resources reconciled by a deployment."""

    model_config = ConfigDict(frozen=True)

    function_arn: str
    function_name: str
    execution_role_arn: str
    log_group_name: str
    status: Literal["created", "updated"]
    package_size: int
    package_checksum: str
    """Lowercase hex SHA-256 of the deployment package."""

    steps: tuple[StepReport, ...] = ()
    """Per-step reports in execution order."""

    @property
    def warnings(self) -> list[StepReport]:
        """Steps that failed without aborting the deployment."""
        return [step for step in self.steps if step.outcome is StepOutcome.WARNING]
