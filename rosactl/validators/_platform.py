"""Validate that the platform API is reachable."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, cast

import requests
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from pydantic import ConfigDict

from ..exceptions import PlatformApiError
from ..utils import BaseModel

if TYPE_CHECKING:
    import boto3

    from .._logging import RosactlLogger

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))

LIVE_PATH = "/prod/v0/live"
REGION_REGEX = re.compile(r"execute-api\.([a-z0-9-]+)\.amazonaws\.com")
REQUEST_TIMEOUT = 10
SIGNING_SERVICE = "execute-api"


class PlatformValidationResult(BaseModel):
    """Response of the liveness endpoint."""

    model_config = ConfigDict(frozen=True)

    api_version: str
    """Body of the response."""


def region_from_url(url: str) -> str | None:
    """Region of an API Gateway URL."""
    match = REGION_REGEX.search(url)
    return match.group(1) if match else None


class PlatformValidator:
    """Call the liveness endpoint of the platform API with a SigV4 signed request."""

    def __init__(
        self,
        api_url: str,
        session: boto3.Session,
        http: requests.Session | None = None,
    ) -> None:
        """Instantiate class.

        Args:
            api_url: Base URL of the platform API.
            session: boto3 session providing credentials and the fallback region.
            http: HTTP session used to send the request.

        """
        self.api_url = api_url
        self.http = http or requests.Session()
        self.session = session

    @property
    def live_url(self) -> str:
        """URL of the liveness endpoint."""
        return self.api_url.removesuffix("/") + LIVE_PATH

    @property
    def region(self) -> str | None:
        """Region the request is signed for."""
        return region_from_url(self.api_url) or self.session.region_name

    def sign(self, url: str) -> dict[str, str]:
        """Return the headers of a signed GET request.

        Raises:
            PlatformApiError: Credentials or region are not available.

        """
        credentials = self.session.get_credentials()
        if credentials is None:
            raise PlatformApiError(url, "no AWS credentials available to sign the request")
        if not self.region:
            raise PlatformApiError(url, "unable to determine region to sign the request")
        request = AWSRequest(method="GET", url=url)
        SigV4Auth(credentials.get_frozen_credentials(), SIGNING_SERVICE, self.region).add_auth(
            request
        )
        return dict(request.headers.items())

    def validate(self) -> PlatformValidationResult:
        """Check the liveness endpoint.

        Raises:
            PlatformApiError: The URL is not set, the request failed or the
                response status is not 200.

        """
        if not self.api_url:
            raise PlatformApiError(LIVE_PATH, "platform API URL is not configured")
        url = self.live_url
        headers = self.sign(url)
        LOGGER.debug("GET %s (region: %s)", url, self.region)
        try:
            response = self.http.get(url, headers=headers, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as exc:
            raise PlatformApiError(url, f"failed to connect: {exc}") from exc
        if response.status_code != 200:
            raise PlatformApiError(
                url, f"returned status: {response.status_code}, body: {response.text}"
            )
        return PlatformValidationResult(api_version=response.text)
