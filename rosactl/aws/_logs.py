"""CloudWatch Logs adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from ._errors import handle_client_error

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from mypy_boto3_logs.client import CloudWatchLogsClient
    from mypy_boto3_logs.type_defs import DescribeLogGroupsResponseTypeDef


class CloudWatchLogGroups:
    """CloudWatch log group management backed by a boto3 client."""

    def __init__(self, client: CloudWatchLogsClient) -> None:
        """Instantiate class.

        Args:
            client: boto3 CloudWatch Logs client.

        """
        self.client = client

    def describe_log_groups(self, prefix: str) -> list[str]:
        """Return the names of all log groups starting with ``prefix``."""
        names: list[str] = []
        with handle_client_error():
            paginator = self.client.get_paginator("describe_log_groups")
            for page in cast(
                "Iterator[DescribeLogGroupsResponseTypeDef]",
                paginator.paginate(logGroupNamePrefix=prefix),
            ):
                names.extend(
                    group["logGroupName"]
                    for group in page.get("logGroups", [])
                    if "logGroupName" in group
                )
        return names

    def create_log_group(self, name: str) -> None:
        """Create a log group."""
        with handle_client_error():
            self.client.create_log_group(logGroupName=name)

    def put_retention_policy(self, name: str, days: int) -> None:
        """Set the retention of a log group."""
        with handle_client_error():
            self.client.put_retention_policy(logGroupName=name, retentionInDays=days)

    def tag_log_group(self, name: str, tags: Mapping[str, str]) -> None:
        """Add tags to a log group."""
        with handle_client_error():
            self.client.tag_log_group(logGroupName=name, tags=dict(tags))
