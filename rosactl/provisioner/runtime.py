"""AWS Lambda runtime interface of the provisioner.

Implements the `Lambda Runtime API
<https://docs.aws.amazon.com/lambda/latest/dg/runtimes-api.html>`__ loop used
by custom runtimes and a handler function for managed Python runtimes.

"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any, NamedTuple, cast

import boto3
import requests
from pydantic import ValidationError

from ..aws import IamOidcProviders
from ..exceptions import RosactlError
from .handler import Handler
from .models import OIDCProvisionerError, OIDCProvisionerRequest

if TYPE_CHECKING:
    from .._logging import RosactlLogger

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
RUNTIME_API_VERSION = "2018-06-01"


class Invocation(NamedTuple):
    """Next event to process."""

    request_id: str
    event: Any


class RuntimeClient:
    """Client of the Lambda Runtime API."""

    def __init__(self, api: str, session: requests.Session | None = None) -> None:
        """Instantiate class.

        Args:
            api: Host and port of the API (``AWS_LAMBDA_RUNTIME_API``).
            session: HTTP session.

        """
        self.base_url = f"http://{api}/{RUNTIME_API_VERSION}/runtime"
        self.session = session or requests.Session()

    def next_invocation(self) -> Invocation:
        """Block until the next event is available."""
        response = self.session.get(f"{self.base_url}/invocation/next", timeout=None)
        response.raise_for_status()
        return Invocation(
            request_id=response.headers["Lambda-Runtime-Aws-Request-Id"],
            event=response.json(),
        )

    def send_response(self, request_id: str, body: dict[str, Any]) -> None:
        """Report the result of an invocation."""
        self.session.post(
            f"{self.base_url}/invocation/{request_id}/response", json=body, timeout=10
        ).raise_for_status()

    def send_error(self, request_id: str, error: OIDCProvisionerError) -> None:
        """Report that an invocation failed."""
        self.session.post(
            f"{self.base_url}/invocation/{request_id}/error",
            headers={"Lambda-Runtime-Function-Error-Type": error.error_type},
            json=error.model_dump(),
            timeout=10,
        ).raise_for_status()

    def send_init_error(self, error: OIDCProvisionerError) -> None:
        """Report that the runtime failed to initialize."""
        self.session.post(
            f"{self.base_url}/init/error",
            headers={"Lambda-Runtime-Function-Error-Type": error.error_type},
            json=error.model_dump(),
            timeout=10,
        ).raise_for_status()


def create_handler() -> Handler:
    """Create a handler using the credentials of the function."""
    return Handler(IamOidcProviders(boto3.client("iam")))


def process_event(handler: Handler, event: Any) -> dict[str, Any]:
    """Handle a single event.

    Raises:
        pydantic.ValidationError: The event is not a valid request.
        rosactl.exceptions.RosactlError: The request failed.

    """
    request = OIDCProvisionerRequest.model_validate(event or {})
    return handler.handle(request).model_dump(exclude_none=True)


def serve(
    handler: Handler, client: RuntimeClient, *, max_invocations: int | None = None
) -> int:
    """Process events until stopped.

    Args:
        handler: Handler used for every event.
        client: Runtime API client.
        max_invocations: Stop after this many events. Runs forever when ``None``.

    Returns:
        Number of processed events.

    """
    count = 0
    while max_invocations is None or count < max_invocations:
        invocation = client.next_invocation()
        LOGGER.debug("received invocation %s", invocation.request_id)
        try:
            body = process_event(handler, invocation.event)
        except (RosactlError, ValidationError) as exc:
            LOGGER.error("invocation %s failed: %s", invocation.request_id, exc)
            client.send_error(invocation.request_id, OIDCProvisionerError.from_exception(exc))
        else:
            client.send_response(invocation.request_id, body)
        count += 1
    return count


def lambda_handler(event: Any, context: Any) -> dict[str, Any]:  # noqa: ARG001
    """Handler for managed Python runtimes."""
    return process_event(create_handler(), event)


def configure_logging() -> None:
    """Log to stderr at the level set by ``LOG_LEVEL``."""
    logging.basicConfig(format=LOG_FORMAT, level=os.getenv("LOG_LEVEL", "INFO").upper())


def main() -> None:
    """Run the Runtime API loop of a custom runtime."""
    configure_logging()
    client = RuntimeClient(os.environ["AWS_LAMBDA_RUNTIME_API"])
    try:
        handler = create_handler()
    except Exception as exc:
        LOGGER.error("failed to initialize: %s", exc)
        client.send_init_error(OIDCProvisionerError.from_exception(exc))
        raise
    serve(handler, client)


if __name__ == "__main__":
    main()
