"""AWS session and client construction."""

from __future__ import annotations

import logging
from functools import cached_property
from typing import TYPE_CHECKING, cast

import boto3
from pydantic import ConfigDict

from ..utils import BaseModel
from ._iam import IamOidcProviders, IamRoles
from ._lambda import LambdaFunctions
from ._logs import CloudWatchLogGroups

if TYPE_CHECKING:
    from mypy_boto3_sts.client import STSClient

    from .._logging import RosactlLogger

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))


class ClientConfig(BaseModel):
    """Where AWS credentials and the region are resolved from.

    Values left as ``None`` are resolved by the standard boto3 credential
    chain (environment, shared config files, instance metadata).

    """

    model_config = ConfigDict(frozen=True)

    profile: str | None = None
    """Named profile from the shared AWS config files."""

    region: str | None = None
    """AWS region."""


def create_session(config: ClientConfig) -> boto3.Session:
    """Create a boto3 session from a client config."""
    LOGGER.debug(
        "creating boto3 session (profile=%s, region=%s)",
        config.profile or "default",
        config.region or "default",
    )
    return boto3.Session(profile_name=config.profile, region_name=config.region)


class AwsClients:
    """Bundle of the resource adapters used by rosactl.

    Clients are created on first use.

    """

    def __init__(self, session: boto3.Session) -> None:
        """Instantiate class.

        Args:
            session: boto3 session used to create clients.

        """
        self.session = session

    @classmethod
    def from_config(cls, config: ClientConfig) -> AwsClients:
        """Create the bundle from a client config."""
        return cls(create_session(config))

    @property
    def region(self) -> str | None:
        """Region of the session."""
        return self.session.region_name

    @cached_property
    def functions(self) -> LambdaFunctions:
        """Lambda function adapter."""
        return LambdaFunctions(self.session.client("lambda"))

    @cached_property
    def log_groups(self) -> CloudWatchLogGroups:
        """CloudWatch log group adapter."""
        return CloudWatchLogGroups(self.session.client("logs"))

    @cached_property
    def oidc_providers(self) -> IamOidcProviders:
        """IAM OIDC provider adapter."""
        return IamOidcProviders(self.session.client("iam"))

    @cached_property
    def roles(self) -> IamRoles:
        """IAM role adapter."""
        return IamRoles(self.session.client("iam"))

    @cached_property
    def sts(self) -> STSClient:
        """STS client."""
        return self.session.client("sts")
