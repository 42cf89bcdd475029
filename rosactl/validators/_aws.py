"""Validate AWS credentials and region."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from botocore.exceptions import BotoCoreError
from pydantic import ConfigDict

from ..aws import get_caller_identity
from ..exceptions import AwsClientError, ValidationFailedError
from ..utils import BaseModel

if TYPE_CHECKING:
    from mypy_boto3_sts.client import STSClient

    from .._logging import RosactlLogger

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))

SUPPORTED_REGIONS = (
    "us-east-1",
    "us-east-2",
    "us-west-1",
    "us-west-2",
    "eu-west-1",
    "eu-west-2",
    "eu-west-3",
    "eu-central-1",
    "eu-north-1",
    "ap-southeast-1",
    "ap-southeast-2",
    "ap-northeast-1",
    "ap-northeast-2",
    "ap-south-1",
    "sa-east-1",
    "ca-central-1",
)


class AwsValidationResult(BaseModel):
    """Identity and region that passed validation."""

    model_config = ConfigDict(frozen=True)

    account_id: str
    user_arn: str
    region: str


class AwsValidator:
    """Check that AWS credentials work and the region is supported."""

    def __init__(self, client: STSClient, region: str | None) -> None:
        """Instantiate class.

        Args:
            client: STS client created with the credentials to validate.
            region: Configured region.

        """
        self.client = client
        self.region = region

    def validate(self) -> AwsValidationResult:
        """Validate credentials then region.

        Raises:
            ValidationFailedError: Validation failed.

        """
        try:
            identity = get_caller_identity(self.client)
        except (AwsClientError, BotoCoreError) as exc:
            raise ValidationFailedError(f"failed to validate AWS credentials: {exc}") from exc
        if not self.region:
            raise ValidationFailedError("AWS region is not configured")
        if self.region not in SUPPORTED_REGIONS:
            raise ValidationFailedError(f"AWS region '{self.region}' is not supported")
        LOGGER.debug("validated credentials of %s in %s", identity.arn, self.region)
        return AwsValidationResult(
            account_id=identity.account, region=self.region, user_arn=identity.arn
        )
