"""Deployment of the OIDC provisioner."""

from ._deployer import Deployer
from ._package import PackageArtifact, PackageBuilder, Pip, ZipApp
from ._policy import permissions_policy, resource_policy, to_json, trust_policy
from .models import DeploymentConfig, DeploymentResult, StepOutcome, StepReport

__all__ = [
    "DeploymentConfig",
    "DeploymentResult",
    "Deployer",
    "PackageArtifact",
    "PackageBuilder",
    "Pip",
    "StepOutcome",
    "StepReport",
    "ZipApp",
    "permissions_policy",
    "resource_policy",
    "to_json",
    "trust_policy",
]
