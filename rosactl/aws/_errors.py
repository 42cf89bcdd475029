"""Translation of botocore errors into rosactl exceptions."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, cast

from botocore.exceptions import ClientError

from ..exceptions import AwsClientError, ConflictError, NotFoundError, RemoteFailureError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .._logging import RosactlLogger

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))

NOT_FOUND_ERROR_CODES = frozenset({"NoSuchEntity", "ResourceNotFoundException"})
CONFLICT_ERROR_CODES = frozenset(
    {
        "EntityAlreadyExists",
        "ResourceAlreadyExistsException",
        "ResourceConflictException",
    }
)


def translate_client_error(error: ClientError) -> AwsClientError:
    """Convert a :class:`botocore.exceptions.ClientError` by its error code.

    Args:
        error: Error raised by a boto3 client.

    Returns:
        :class:`~rosactl.exceptions.NotFoundError`,
        :class:`~rosactl.exceptions.ConflictError` or
        :class:`~rosactl.exceptions.RemoteFailureError`.

    """
    details = error.response.get("Error", {})
    code = details.get("Code", "Unknown")
    operation = error.operation_name or "unknown"
    message = details.get("Message", "")
    if code in NOT_FOUND_ERROR_CODES:
        return NotFoundError(operation, code, message)
    if code in CONFLICT_ERROR_CODES:
        return ConflictError(operation, code, message)
    return RemoteFailureError(operation, code, message)


@contextmanager
def handle_client_error() -> Iterator[None]:
    """Raise translated errors for any ClientError raised within the context."""
    try:
        yield
    except ClientError as exc:
        translated = translate_client_error(exc)
        LOGGER.debug("%s", translated)
        raise translated from exc
