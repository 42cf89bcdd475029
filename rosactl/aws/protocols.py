"""Capability-scoped interfaces of the AWS resources that rosactl manages.

The deployment orchestrator and the provisioner handler only depend on these
protocols. They are implemented by thin adapters over boto3 clients and by
in-memory fakes in tests.

Every method raises :class:`~rosactl.exceptions.NotFoundError`,
:class:`~rosactl.exceptions.ConflictError` or
:class:`~rosactl.exceptions.RemoteFailureError` on failure.

"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from typing_extensions import Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


@runtime_checkable
class RoleClient(Protocol):
    """IAM role management."""

    @abstractmethod
    def get_role(self, name: str) -> str:
        """Return the ARN of an existing role."""
        raise NotImplementedError

    @abstractmethod
    def create_role(self, name: str, trust_policy: str, description: str) -> str:
        """Create a role and return its ARN."""
        raise NotImplementedError

    @abstractmethod
    def put_role_policy(self, role_name: str, policy_name: str, document: str) -> None:
        """Create or replace an inline policy of a role."""
        raise NotImplementedError


@runtime_checkable
class FunctionClient(Protocol):
    """Lambda function management."""

    @abstractmethod
    def get_function(self, name: str) -> str:
        """Return the ARN of an existing function."""
        raise NotImplementedError

    @abstractmethod
    def create_function(
        self,
        name: str,
        *,
        architecture: str,
        description: str,
        handler: str,
        layers: Sequence[str] = (),
        memory_size: int,
        role_arn: str,
        runtime: str,
        timeout: int,
        zip_file: bytes,
    ) -> str:
        """Create a function and return its ARN."""
        raise NotImplementedError

    @abstractmethod
    def update_function_code(self, name: str, zip_file: bytes) -> None:
        """Replace the deployment package of a function."""
        raise NotImplementedError

    @abstractmethod
    def update_function_configuration(
        self,
        name: str,
        *,
        handler: str,
        layers: Sequence[str] = (),
        memory_size: int,
        role_arn: str,
        runtime: str,
        timeout: int,
    ) -> None:
        """Update the configuration of a function."""
        raise NotImplementedError

    @abstractmethod
    def add_permission(
        self,
        name: str,
        *,
        action: str,
        principal: str,
        source_account: str,
        statement_id: str,
    ) -> None:
        """Add a statement to the resource policy of a function."""
        raise NotImplementedError

    @abstractmethod
    def remove_permission(self, name: str, statement_id: str) -> None:
        """Remove a statement from the resource policy of a function."""
        raise NotImplementedError

    @abstractmethod
    def tag_resource(self, arn: str, tags: Mapping[str, str]) -> None:
        """Add tags to a function."""
        raise NotImplementedError


@runtime_checkable
class LogGroupClient(Protocol):
    """CloudWatch log group management."""

    @abstractmethod
    def describe_log_groups(self, prefix: str) -> list[str]:
        """Return the names of all log groups starting with ``prefix``."""
        raise NotImplementedError

    @abstractmethod
    def create_log_group(self, name: str) -> None:
        """Create a log group."""
        raise NotImplementedError

    @abstractmethod
    def put_retention_policy(self, name: str, days: int) -> None:
        """Set the retention of a log group."""
        raise NotImplementedError

    @abstractmethod
    def tag_log_group(self, name: str, tags: Mapping[str, str]) -> None:
        """Add tags to a log group."""
        raise NotImplementedError


@runtime_checkable
class IdentityProviderClient(Protocol):
    """IAM OpenID Connect identity provider management."""

    @abstractmethod
    def list_providers(self) -> list[str]:
        """Return the ARNs of all OIDC providers in the account."""
        raise NotImplementedError

    @abstractmethod
    def get_provider_url(self, arn: str) -> str:
        """Return the issuer URL stored for a provider."""
        raise NotImplementedError

    @abstractmethod
    def create_provider(
        self, url: str, thumbprints: Sequence[str], client_ids: Sequence[str]
    ) -> str:
        """Create a provider and return its ARN."""
        raise NotImplementedError

    @abstractmethod
    def tag_provider(self, arn: str, tags: Mapping[str, str]) -> None:
        """Add tags to a provider."""
        raise NotImplementedError
