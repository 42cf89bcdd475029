"""Lambda adapter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from ._errors import handle_client_error

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from mypy_boto3_lambda.client import LambdaClient

    from .._logging import RosactlLogger

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))


class LambdaFunctions:
    """Lambda function management backed by a boto3 client."""

    def __init__(self, client: LambdaClient, *, wait: bool = True) -> None:
        """Instantiate class.

        Args:
            client: boto3 Lambda client.
            wait: Wait for a code update to finish before returning. A function
                can not be reconfigured while an update is in progress.

        """
        self.client = client
        self.wait = wait

    def get_function(self, name: str) -> str:
        """Return the ARN of an existing function."""
        with handle_client_error():
            response = self.client.get_function(FunctionName=name)
        return response["Configuration"]["FunctionArn"]

    def create_function(
        self,
        name: str,
        *,
        architecture: str,
        description: str,
        handler: str,
        layers: Sequence[str] = (),
        memory_size: int,
        role_arn: str,
        runtime: str,
        timeout: int,
        zip_file: bytes,
    ) -> str:
        """Create a function and return its ARN."""
        with handle_client_error():
            response = self.client.create_function(
                Architectures=[architecture],  # type: ignore[list-item]
                Code={"ZipFile": zip_file},
                Description=description,
                FunctionName=name,
                Handler=handler,
                Layers=list(layers),
                MemorySize=memory_size,
                Role=role_arn,
                Runtime=runtime,  # type: ignore[arg-type]
                Timeout=timeout,
            )
        return response["FunctionArn"]

    def update_function_code(self, name: str, zip_file: bytes) -> None:
        """Replace the deployment package of a function."""
        with handle_client_error():
            self.client.update_function_code(FunctionName=name, ZipFile=zip_file)
            if self.wait:
                LOGGER.verbose("waiting for code update of %s to complete...", name)
                self.client.get_waiter("function_updated_v2").wait(FunctionName=name)

    def update_function_configuration(
        self,
        name: str,
        *,
        handler: str,
        layers: Sequence[str] = (),
        memory_size: int,
        role_arn: str,
        runtime: str,
        timeout: int,
    ) -> None:
        """Update the configuration of a function.

        ``layers`` replaces the layers of the function. An empty sequence
        removes them.

        """
        with handle_client_error():
            self.client.update_function_configuration(
                FunctionName=name,
                Handler=handler,
                Layers=list(layers),
                MemorySize=memory_size,
                Role=role_arn,
                Runtime=runtime,  # type: ignore[arg-type]
                Timeout=timeout,
            )

    def add_permission(
        self,
        name: str,
        *,
        action: str,
        principal: str,
        source_account: str,
        statement_id: str,
    ) -> None:
        """Add a statement to the resource policy of a function."""
        with handle_client_error():
            self.client.add_permission(
                Action=action,
                FunctionName=name,
                Principal=principal,
                SourceAccount=source_account,
                StatementId=statement_id,
            )

    def remove_permission(self, name: str, statement_id: str) -> None:
        """Remove a statement from the resource policy of a function."""
        with handle_client_error():
            self.client.remove_permission(FunctionName=name, StatementId=statement_id)

    def tag_resource(self, arn: str, tags: Mapping[str, str]) -> None:
        """Add tags to a function."""
        with handle_client_error():
            self.client.tag_resource(Resource=arn, Tags=dict(tags))
