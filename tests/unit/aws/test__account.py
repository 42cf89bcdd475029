"""Test rosactl.aws._account."""

from __future__ import annotations

import pytest

from rosactl.aws import CallerIdentity, get_caller_identity
from rosactl.exceptions import RemoteFailureError

from ..factories import stubbed_client


def test_get_caller_identity() -> None:
    """Test get_caller_identity."""
    client, stubber = stubbed_client("sts")
    stubber.add_response(
        "get_caller_identity",
        {
            "Account": "123456789012",
            "Arn": "arn:aws:iam::123456789012:user/test",
            "UserId": "AIDAEXAMPLE",
        },
        {},
    )
    assert get_caller_identity(client) == CallerIdentity(
        account="123456789012",
        arn="arn:aws:iam::123456789012:user/test",
        user_id="AIDAEXAMPLE",
    )
    stubber.assert_no_pending_responses()


def test_get_caller_identity_error() -> None:
    """Test get_caller_identity ExpiredToken."""
    client, stubber = stubbed_client("sts")
    stubber.add_client_error("get_caller_identity", "ExpiredToken")
    with pytest.raises(RemoteFailureError):
        get_caller_identity(client)
    stubber.assert_no_pending_responses()
