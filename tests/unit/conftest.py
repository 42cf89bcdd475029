"""Pytest fixtures and plugins."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from rosactl.deployer import DeploymentConfig

from .factories import (
    FakeFunctions,
    FakeIdentityProviders,
    FakeLogGroups,
    FakePackageBuilder,
    FakeRoles,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from _pytest.config import Config

LOGGER = logging.getLogger(__name__)
TEST_ROOT = Path(__file__).parent


def pytest_configure(config: Config) -> None:
    """Configure pytest."""
    config.addinivalue_line(  # cspell:ignore addinivalue
        "markers",
        "cli_runner(env=None, **kwargs): Pass kwargs to `click.testing.CliRunner` initialization.",
    )


@pytest.fixture(scope="session", autouse=True)
def aws_credentials() -> Iterator[None]:
    """Ensure AWS SDK finds some (bogus) credentials in the environment.

    This prevents it from trying to use other providers.

    """
    overrides = {
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_DEFAULT_REGION": "us-east-1",
    }
    saved_env: dict[str, str | None] = {}
    for key, value in overrides.items():
        LOGGER.info("Overriding env var: %s=%s", key, value)
        saved_env[key] = os.environ.get(key, None)
        os.environ[key] = value

    yield

    for key, value in saved_env.items():
        LOGGER.info("Restoring saved env var: %s=%s", key, value)
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value

    saved_env.clear()


@pytest.fixture
def deployment_config(tmp_path: Path) -> DeploymentConfig:
    """Deployment config without invoker and tags."""
    source_dir = tmp_path / "src"
    source_dir.mkdir()
    return DeploymentConfig(
        execution_role_name="test-role",
        function_name="test-function",
        source_dir=source_dir,
    )


@pytest.fixture
def fake_functions() -> FakeFunctions:
    """Empty in-memory function client."""
    return FakeFunctions()


@pytest.fixture
def fake_log_groups() -> FakeLogGroups:
    """Empty in-memory log group client."""
    return FakeLogGroups()


@pytest.fixture
def fake_package_builder() -> FakePackageBuilder:
    """Package builder returning a fixed artifact."""
    return FakePackageBuilder()


@pytest.fixture
def fake_providers() -> FakeIdentityProviders:
    """Empty in-memory identity provider client."""
    return FakeIdentityProviders()


@pytest.fixture
def fake_roles() -> FakeRoles:
    """Empty in-memory role client."""
    return FakeRoles()
