"""CLI utils."""

from __future__ import annotations

import logging
from functools import cached_property
from typing import TYPE_CHECKING, Any

from ..aws import AwsClients, ClientConfig

if TYPE_CHECKING:
    import boto3

LOGGER = logging.getLogger(__name__)


class CliContext:
    """CLI context object."""

    def __init__(
        self,
        *,
        debug: int = 0,
        no_color: bool = False,
        platform_api_url: str | None = None,
        profile: str | None = None,
        region: str | None = None,
        verbose: bool = False,
        **_: Any,
    ) -> None:
        """Instantiate class.

        Args:
            debug: Debug level.
            no_color: Whether color is disabled in logs.
            platform_api_url: Base URL of the platform API.
            profile: AWS profile.
            region: AWS region.
            verbose: Whether to display verbose logs.

        """
        self.debug = debug
        self.no_color = no_color
        self.platform_api_url = platform_api_url
        self.profile = profile
        self.region = region
        self.verbose = verbose

    @cached_property
    def client_config(self) -> ClientConfig:
        """Where AWS credentials and region are resolved from."""
        return ClientConfig(profile=self.profile, region=self.region)

    @cached_property
    def clients(self) -> AwsClients:
        """AWS resource clients."""
        return AwsClients.from_config(self.client_config)

    @property
    def session(self) -> boto3.Session:
        """boto3 session of the resource clients."""
        return self.clients.session

    def __getitem__(self, key: str) -> Any:
        """Implement evaluation of self[key].

        Args:
            key: Attribute name to return the value for.

        Raises:
            AttributeError: If attribute does not exist on this object.

        """
        return getattr(self, key)

    def __str__(self) -> str:
        """Return string representation of the object."""
        return f"CliContext({self.__dict__})"
