"""Test rosactl.provisioner.handler."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pytest

from rosactl.exceptions import (
    ConflictError,
    NotFoundError,
    ProvisionerError,
    RemoteFailureError,
    RequestValidationError,
)
from rosactl.provisioner.handler import (
    Handler,
    comparable_url,
    normalize_issuer_url,
    validate_request,
)
from rosactl.provisioner.models import OIDCProvisionerRequest

from ..factories import FakeIdentityProviders

if TYPE_CHECKING:
    from pytest import LogCaptureFixture

MODULE = "rosactl.provisioner.handler"

ISSUER_URL = "https://oidc.example.com/cluster-1"
PROVIDER_ARN = "arn:aws:iam::123456789012:oidc-provider/oidc.example.com/cluster-1"
EXPECTED_TAGS = {"rosa:component": "oidc-provider", "rosa:cluster-id": "cluster-1"}


def make_request(**kwargs: Any) -> OIDCProvisionerRequest:
    """Create a valid request, overriding some fields."""
    data = {"cluster_id": "cluster-1", "issuer_url": ISSUER_URL, "thumbprint": "a" * 40}
    data.update(kwargs)
    return OIDCProvisionerRequest.model_validate(data)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://example.com/", "https://example.com"),
        ("https://example.com", "https://example.com"),
        ("https://example.com//", "https://example.com/"),
    ],
)
def test_normalize_issuer_url(url: str, expected: str) -> None:
    """Test normalize_issuer_url."""
    assert normalize_issuer_url(url) == expected


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://example.com/", "example.com"),
        ("https://example.com/path", "example.com/path"),
        ("example.com/path", "example.com/path"),
    ],
)
def test_comparable_url(url: str, expected: str) -> None:
    """Test comparable_url."""
    assert comparable_url(url) == expected


@pytest.mark.parametrize(
    "overrides, reason",
    [
        ({"issuer_url": ""}, "issuer_url is required"),
        ({"issuer_url": "", "thumbprint": ""}, "issuer_url is required"),
        ({"issuer_url": "oidc.example.com"}, "issuer_url must be an absolute URL"),
        ({"issuer_url": "https://[invalid"}, "issuer_url must be an absolute URL"),
        ({"issuer_url": "http://oidc.example.com"}, "issuer_url must use https scheme"),
        (
            {"issuer_url": "http://oidc.example.com", "thumbprint": ""},
            "issuer_url must use https scheme",
        ),
        ({"issuer_url": "https://"}, "issuer_url must have a valid host"),
        ({"thumbprint": ""}, "thumbprint is required"),
        ({"cluster_id": "", "thumbprint": ""}, "thumbprint is required"),
        ({"cluster_id": ""}, "cluster_id is required"),
    ],
)
def test_validate_request(overrides: dict[str, str], reason: str) -> None:
    """Test validate_request reports the first violated rule."""
    with pytest.raises(RequestValidationError) as excinfo:
        validate_request(make_request(**overrides))
    assert excinfo.value.reason == reason
    assert excinfo.value.message == f"invalid request: {reason}"


def test_validate_request_valid() -> None:
    """Test validate_request with a valid request."""
    assert not validate_request(make_request())


class TestHandler:
    """Test Handler."""

    def test_handle_create(self, fake_providers: FakeIdentityProviders) -> None:
        """Test handle when the provider does not exist."""
        response = Handler(fake_providers).handle(make_request())
        assert response.status == "created"
        assert response.oidc_provider_arn == PROVIDER_ARN
        assert response.message == "OIDC provider created successfully"
        assert fake_providers.called("create_provider") == [
            (ISSUER_URL, ["a" * 40], ["openshift", "sts.amazonaws.com"])
        ]
        assert fake_providers.tags == {PROVIDER_ARN: EXPECTED_TAGS}

    def test_handle_create_client_ids(self, fake_providers: FakeIdentityProviders) -> None:
        """Test handle passes the client IDs of the request."""
        Handler(fake_providers).handle(make_request(client_ids=["custom"]))
        assert fake_providers.called("create_provider")[0][2] == ["custom"]

    def test_handle_create_trailing_slash(
        self, fake_providers: FakeIdentityProviders
    ) -> None:
        """Test the issuer URL is created without its trailing slash."""
        Handler(fake_providers).handle(make_request(issuer_url=f"{ISSUER_URL}/"))
        assert fake_providers.called("create_provider")[0][0] == ISSUER_URL

    @pytest.mark.parametrize("issuer_url", [ISSUER_URL, f"{ISSUER_URL}/"])
    def test_handle_exists(self, issuer_url: str) -> None:
        """Test handle when the provider exists."""
        providers = FakeIdentityProviders({PROVIDER_ARN: "oidc.example.com/cluster-1"})
        response = Handler(providers).handle(make_request(issuer_url=issuer_url))
        assert response.status == "already_exists"
        assert response.oidc_provider_arn == PROVIDER_ARN
        assert response.message == "OIDC provider already exists"
        assert not providers.called("create_provider")
        assert providers.tags == {PROVIDER_ARN: EXPECTED_TAGS}

    def test_handle_exists_among_others(self) -> None:
        """Test handle finds the matching provider among others."""
        other = "arn:aws:iam::123456789012:oidc-provider/oidc.example.com/cluster-2"
        providers = FakeIdentityProviders(
            {other: "oidc.example.com/cluster-2", PROVIDER_ARN: "oidc.example.com/cluster-1"}
        )
        assert Handler(providers).handle(make_request()).oidc_provider_arn == PROVIDER_ARN

    def test_handle_exists_tag_failure(self) -> None:
        """Test failure to tag an existing provider."""
        providers = FakeIdentityProviders({PROVIDER_ARN: "oidc.example.com/cluster-1"})
        error = RemoteFailureError("TagOpenIDConnectProvider", "AccessDenied")
        providers.fail("tag_provider", error)
        with pytest.raises(ProvisionerError) as excinfo:
            Handler(providers).handle(make_request())
        assert excinfo.value.stage == "tag existing provider"
        assert excinfo.value.cause is error

    def test_handle_create_tag_failure(
        self, caplog: LogCaptureFixture, fake_providers: FakeIdentityProviders
    ) -> None:
        """Test failure to tag a created provider is only logged."""
        caplog.set_level(logging.WARNING, logger=MODULE)
        fake_providers.fail(
            "tag_provider", RemoteFailureError("TagOpenIDConnectProvider", "AccessDenied")
        )
        response = Handler(fake_providers).handle(make_request())
        assert response.status == "created"
        assert f"failed to tag provider {PROVIDER_ARN}" in caplog.text

    def test_handle_create_failure(self, fake_providers: FakeIdentityProviders) -> None:
        """Test failure to create the provider."""
        error = ConflictError("CreateOpenIDConnectProvider", "EntityAlreadyExists")
        fake_providers.fail("create_provider", error)
        with pytest.raises(ProvisionerError) as excinfo:
            Handler(fake_providers).handle(make_request())
        assert excinfo.value.stage == "create OIDC provider"
        assert str(excinfo.value).startswith("failed to create OIDC provider: ")
        assert not fake_providers.called("tag_provider")

    def test_handle_list_failure(self, fake_providers: FakeIdentityProviders) -> None:
        """Test failure to list providers."""
        fake_providers.fail(
            "list_providers", RemoteFailureError("ListOpenIDConnectProviders", "AccessDenied")
        )
        with pytest.raises(ProvisionerError) as excinfo:
            Handler(fake_providers).handle(make_request())
        assert excinfo.value.stage == "check if provider exists"
        assert not fake_providers.called("create_provider")

    def test_handle_invalid(self, fake_providers: FakeIdentityProviders) -> None:
        """Test an invalid request makes no AWS calls."""
        with pytest.raises(RequestValidationError):
            Handler(fake_providers).handle(make_request(thumbprint=""))
        assert not fake_providers.calls

    def test_find_provider_skips_failed_lookup(self, caplog: LogCaptureFixture) -> None:
        """Test providers whose details can not be retrieved are skipped."""
        caplog.set_level(logging.WARNING, logger=MODULE)
        broken = "arn:aws:iam::123456789012:oidc-provider/broken"
        providers = FakeIdentityProviders(
            {broken: "broken", PROVIDER_ARN: "oidc.example.com/cluster-1"}
        )
        providers.fail("get_provider_url", NotFoundError("GetOpenIDConnectProvider", "NoSuchEntity"))
        assert Handler(providers).find_provider(ISSUER_URL) == PROVIDER_ARN
        assert f"skipping provider {broken}" in caplog.text

    def test_find_provider_none(self, fake_providers: FakeIdentityProviders) -> None:
        """Test find_provider when no provider matches."""
        assert Handler(fake_providers).find_provider(ISSUER_URL) is None
