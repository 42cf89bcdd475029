"""rosactl exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class RosactlError(Exception):
    """Base class for custom exceptions raised by rosactl."""

    message: str
    """Error message."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Instantiate class."""
        if self.message:
            super().__init__(self.message, *args, **kwargs)
        else:
            super().__init__(*args, **kwargs)


class InvalidArgumentError(RosactlError):
    """A required argument was not provided or has an invalid value."""

    argument: str
    """Name of the argument."""

    def __init__(self, argument: str, reason: str = "is required") -> None:
        """Instantiate class.

        Args:
            argument: Name of the argument.
            reason: Why the value is invalid.

        """
        self.argument = argument
        self.reason = reason
        self.message = f"{argument} {reason}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.argument, self.reason)


class RequestValidationError(RosactlError):
    """Provisioner request failed validation.

    Only the first rule that was violated is reported.

    """

    def __init__(self, reason: str) -> None:
        """Instantiate class.

        Args:
            reason: Description of the violated rule.

        """
        self.reason = reason
        self.message = f"invalid request: {reason}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.reason,)


class AwsClientError(RosactlError):
    """Base class for errors raised by the AWS resource clients."""

    operation: str
    """API operation that failed."""

    error_code: str
    """Error code returned by AWS."""

    def __init__(self, operation: str, error_code: str, detail: str = "") -> None:
        """Instantiate class.

        Args:
            operation: API operation that failed.
            error_code: Error code returned by AWS.
            detail: Error message returned by AWS.

        """
        self.operation = operation
        self.error_code = error_code
        self.detail = detail
        self.message = f"{operation} failed ({error_code})"
        if detail:
            self.message += f": {detail}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.operation, self.error_code, self.detail)


class NotFoundError(AwsClientError):
    """The requested resource does not exist."""


class ConflictError(AwsClientError):
    """The resource already exists or is being modified concurrently."""


class RemoteFailureError(AwsClientError):
    """Any other error returned by an AWS API call."""


class BuildFailureError(RosactlError):
    """Building the deployment package failed.

    Raised when the source directory does not exist or when one of the
    commands used to compile the package exits with a non-zero status.

    """

    source_dir: Path
    """Source directory that was being built."""

    def __init__(self, source_dir: Path, reason: str, output: str = "") -> None:
        """Instantiate class.

        Args:
            source_dir: Source directory that was being built.
            reason: Short description of the failure.
            output: Diagnostic output captured from the compiler.

        """
        self.source_dir = source_dir
        self.reason = reason
        self.output = output
        self.message = f"failed to build {source_dir}: {reason}"
        if output:
            self.message += f"\n{output.strip()}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.source_dir, self.reason, self.output)


class PackageSizeExceededError(RosactlError):
    """Deployment package is larger than AWS Lambda allows."""

    def __init__(self, size: int, max_size: int) -> None:
        """Instantiate class.

        Args:
            size: Size of the deployment package in bytes.
            max_size: Maximum allowed size in bytes.

        """
        self.size = size
        self.max_size = max_size
        self.message = f"package size {size} bytes exceeds maximum {max_size} bytes"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.size, self.max_size)


class DeploymentStepError(RosactlError):
    """A required deployment step failed and the deployment was aborted."""

    step: str
    """Name of the step that failed."""

    cause: Exception
    """The exception raised by the step."""

    def __init__(self, step: str, cause: Exception) -> None:
        """Instantiate class.

        Args:
            step: Name of the step that failed.
            cause: The exception raised by the step.

        """
        self.step = step
        self.cause = cause
        self.message = f"deployment failed at step {step}: {cause}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.step, self.cause)


class ProvisionerError(RosactlError):
    """OIDC provider reconciliation failed."""

    def __init__(self, stage: str, cause: Exception) -> None:
        """Instantiate class.

        Args:
            stage: What the handler was doing when the error occurred.
            cause: The exception that was raised.

        """
        self.stage = stage
        self.cause = cause
        self.message = f"failed to {stage}: {cause}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.stage, self.cause)


class ValidationFailedError(RosactlError):
    """AWS credentials or configuration are not usable."""

    def __init__(self, reason: str) -> None:
        """Instantiate class.

        Args:
            reason: Why validation failed.

        """
        self.reason = reason
        self.message = f"AWS validation failed: {reason}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.reason,)


class PlatformApiError(RosactlError):
    """Platform API is not reachable or returned an error."""

    url: str
    """URL that was requested."""

    def __init__(self, url: str, reason: str) -> None:
        """Instantiate class.

        Args:
            url: URL that was requested.
            reason: Why the request failed.

        """
        self.url = url
        self.reason = reason
        self.message = f"GET {url} failed: {reason}"
        super().__init__()

    def __reduce__(self) -> tuple[type[Exception], tuple[Any, ...]]:
        """Support for pickling."""
        return self.__class__, (self.url, self.reason)
