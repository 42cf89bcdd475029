"""IAM adapters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from ._errors import handle_client_error

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from mypy_boto3_iam.client import IAMClient

    from .._logging import RosactlLogger

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))


def _tag_list(tags: Mapping[str, str]) -> list[dict[str, str]]:
    """Convert a mapping of tags into the list format used by IAM."""
    return [{"Key": k, "Value": v} for k, v in tags.items()]


class IamRoles:
    """IAM role management backed by a boto3 client."""

    def __init__(self, client: IAMClient) -> None:
        """Instantiate class.

        Args:
            client: boto3 IAM client.

        """
        self.client = client

    def get_role(self, name: str) -> str:
        """Return the ARN of an existing role."""
        with handle_client_error():
            return self.client.get_role(RoleName=name)["Role"]["Arn"]

    def create_role(self, name: str, trust_policy: str, description: str) -> str:
        """Create a role and return its ARN."""
        with handle_client_error():
            response = self.client.create_role(
                AssumeRolePolicyDocument=trust_policy,
                Description=description,
                RoleName=name,
            )
        LOGGER.verbose("created IAM role %s", name)
        return response["Role"]["Arn"]

    def put_role_policy(self, role_name: str, policy_name: str, document: str) -> None:
        """Create or replace an inline policy of a role."""
        with handle_client_error():
            self.client.put_role_policy(
                PolicyDocument=document, PolicyName=policy_name, RoleName=role_name
            )
        LOGGER.verbose("put inline policy %s on IAM role %s", policy_name, role_name)


class IamOidcProviders:
    """IAM OpenID Connect provider management backed by a boto3 client."""

    def __init__(self, client: IAMClient) -> None:
        """Instantiate class.

        Args:
            client: boto3 IAM client.

        """
        self.client = client

    def list_providers(self) -> list[str]:
        """Return the ARNs of all OIDC providers in the account.

        ``ListOpenIDConnectProviders`` is not paginated by IAM.

        """
        with handle_client_error():
            response = self.client.list_open_id_connect_providers()
        return [
            provider["Arn"]
            for provider in response.get("OpenIDConnectProviderList", [])
            if "Arn" in provider
        ]

    def get_provider_url(self, arn: str) -> str:
        """Return the issuer URL stored for a provider (without a scheme)."""
        with handle_client_error():
            response = self.client.get_open_id_connect_provider(
                OpenIDConnectProviderArn=arn
            )
        return response.get("Url", "")

    def create_provider(
        self, url: str, thumbprints: Sequence[str], client_ids: Sequence[str]
    ) -> str:
        """Create a provider and return its ARN."""
        with handle_client_error():
            response = self.client.create_open_id_connect_provider(
                ClientIDList=list(client_ids),
                ThumbprintList=list(thumbprints),
                Url=url,
            )
        return response["OpenIDConnectProviderArn"]

    def tag_provider(self, arn: str, tags: Mapping[str, str]) -> None:
        """Add tags to a provider."""
        with handle_client_error():
            self.client.tag_open_id_connect_provider(
                OpenIDConnectProviderArn=arn, Tags=_tag_list(tags)
            )
