"""AWS caller identity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ConfigDict

from ..utils import BaseModel
from ._errors import handle_client_error

if TYPE_CHECKING:
    from mypy_boto3_sts.client import STSClient


class CallerIdentity(BaseModel):
    """Identity of the credentials in use."""

    model_config = ConfigDict(frozen=True)

    account: str
    """AWS account ID."""

    arn: str
    """ARN of the calling principal."""

    user_id: str
    """Unique identifier of the calling principal."""


def get_caller_identity(client: STSClient) -> CallerIdentity:
    """Call ``GetCallerIdentity``.

    Raises:
        rosactl.exceptions.AwsClientError: The call failed.

    """
    with handle_client_error():
        response = client.get_caller_identity()
    return CallerIdentity(
        account=response.get("Account", ""),
        arn=response.get("Arn", ""),
        user_id=response.get("UserId", ""),
    )
