"""Validation of the environment rosactl runs in."""

from ._aws import SUPPORTED_REGIONS, AwsValidationResult, AwsValidator
from ._platform import PlatformValidationResult, PlatformValidator, region_from_url

__all__ = [
    "SUPPORTED_REGIONS",
    "AwsValidationResult",
    "AwsValidator",
    "PlatformValidationResult",
    "PlatformValidator",
    "region_from_url",
]
