"""Create or find the IAM OIDC provider of a cluster."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast
from urllib.parse import urlsplit

from ..exceptions import AwsClientError, ProvisionerError, RequestValidationError
from .models import OIDCProvisionerRequest, OIDCProvisionerResponse

if TYPE_CHECKING:
    from .._logging import RosactlLogger
    from ..aws.protocols import IdentityProviderClient

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))

DEFAULT_CLIENT_IDS = ("openshift", "sts.amazonaws.com")
TAG_CLUSTER_KEY = "rosa:cluster-id"
TAG_COMPONENT_KEY = "rosa:component"
TAG_COMPONENT_VALUE = "oidc-provider"


def normalize_issuer_url(url: str) -> str:
    """Remove one trailing slash."""
    return url.removesuffix("/")


def comparable_url(url: str) -> str:
    """Form of an issuer URL used to compare it with the URL stored by IAM.

    IAM stores provider URLs without a scheme.

    """
    return url.removesuffix("/").removeprefix("https://")


def validate_request(request: OIDCProvisionerRequest) -> None:
    """Validate a request.

    Raises:
        RequestValidationError: Describes the first rule that was violated.

    """
    if not request.issuer_url:
        raise RequestValidationError("issuer_url is required")
    try:
        parsed = urlsplit(request.issuer_url)
        hostname = parsed.hostname
    except ValueError as exc:
        raise RequestValidationError("issuer_url must be an absolute URL") from exc
    if not parsed.scheme:
        raise RequestValidationError("issuer_url must be an absolute URL")
    if parsed.scheme != "https":
        raise RequestValidationError("issuer_url must use https scheme")
    if not hostname:
        raise RequestValidationError("issuer_url must have a valid host")
    if not request.thumbprint:
        raise RequestValidationError("thumbprint is required")
    if not request.cluster_id:
        raise RequestValidationError("cluster_id is required")


class Handler:
    """Idempotently ensure an IAM OIDC provider exists for a cluster."""

    def __init__(self, providers: IdentityProviderClient) -> None:
        """Instantiate class.

        Args:
            providers: IAM OIDC provider client.

        """
        self.providers = providers

    def handle(self, request: OIDCProvisionerRequest) -> OIDCProvisionerResponse:
        """Reconcile the provider described by a request.

        Raises:
            ProvisionerError: The provider could not be looked up, created or
                (when it already existed) tagged.
            RequestValidationError: The request is invalid.

        """
        validate_request(request)
        issuer_url = normalize_issuer_url(request.issuer_url)
        tags = {TAG_COMPONENT_KEY: TAG_COMPONENT_VALUE, TAG_CLUSTER_KEY: request.cluster_id}

        try:
            existing_arn = self.find_provider(issuer_url)
        except AwsClientError as exc:
            raise ProvisionerError("check if provider exists", exc) from exc

        if existing_arn:
            LOGGER.info("found OIDC provider %s for %s", existing_arn, issuer_url)
            try:
                self.providers.tag_provider(existing_arn, tags)
            except AwsClientError as exc:
                raise ProvisionerError("tag existing provider", exc) from exc
            return OIDCProvisionerResponse(
                message="OIDC provider already exists",
                oidc_provider_arn=existing_arn,
                status="already_exists",
            )

        try:
            arn = self.providers.create_provider(
                issuer_url,
                [request.thumbprint],
                request.client_ids or list(DEFAULT_CLIENT_IDS),
            )
        except AwsClientError as exc:
            raise ProvisionerError("create OIDC provider", exc) from exc
        LOGGER.info("created OIDC provider %s for %s", arn, issuer_url)
        try:
            self.providers.tag_provider(arn, tags)
        except AwsClientError as exc:
            LOGGER.warning("failed to tag provider %s: %s", arn, exc)
        return OIDCProvisionerResponse(
            message="OIDC provider created successfully",
            oidc_provider_arn=arn,
            status="created",
        )

    def find_provider(self, issuer_url: str) -> str | None:
        """Return the ARN of the provider for an issuer URL, if it exists.

        Providers whose details can not be retrieved are skipped.

        Raises:
            AwsClientError: Listing providers failed.

        """
        target = comparable_url(issuer_url)
        for arn in self.providers.list_providers():
            try:
                url = self.providers.get_provider_url(arn)
            except AwsClientError as exc:
                LOGGER.warning("skipping provider %s: %s", arn, exc)
                continue
            if comparable_url(url) == target:
                return arn
        return None
