"""Provisioner request and response models."""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field

from ..utils import BaseModel


class OIDCProvisionerRequest(BaseModel):
    """Event the provisioner is invoked with.

    Fields default to empty values so the handler can report which required
    value is missing.

    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    issuer_url: str = ""
    """Issuer URL of the cluster's OIDC configuration."""

    thumbprint: str = ""
    """Thumbprint of the issuer's certificate."""

    cluster_id: str = ""
    """ID of the cluster the provider belongs to."""

    client_ids: list[str] = Field(default_factory=list)
    """Audiences of the provider. Defaults are used when empty."""


class OIDCProvisionerResponse(BaseModel):
    """Result of a successful invocation."""

    model_config = ConfigDict(frozen=True)

    oidc_provider_arn: str
    status: Literal["created", "already_exists"]
    message: str | None = None


class OIDCProvisionerError(BaseModel):
    """Body returned for a failed invocation."""

    model_config = ConfigDict(frozen=True)

    error_type: str
    error_message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> OIDCProvisionerError:
        """Describe an exception."""
        return cls(error_type=type(exc).__name__, error_message=str(exc))
