"""Deploy the OIDC provisioner into an AWS account."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar, cast

from .._logging import PrefixAdaptor
from botocore.exceptions import BotoCoreError

from ..exceptions import AwsClientError, ConflictError, DeploymentStepError, NotFoundError
from ._package import PackageArtifact, PackageBuilder
from ._policy import permissions_policy, resource_policy, to_json, trust_policy
from .constants import (
    BOOTSTRAP_FILE_NAME,
    EXECUTION_ROLE_DESCRIPTION,
    FUNCTION_DESCRIPTION,
    INVOKE_STATEMENT_ID,
    LOG_GROUP_RETENTION_DAYS,
    PERMISSIONS_POLICY_NAME,
)
from .models import DeploymentConfig, DeploymentResult, StepOutcome, StepReport

if TYPE_CHECKING:
    from .._logging import RosactlLogger
    from ..aws.protocols import FunctionClient, LogGroupClient, RoleClient

LOGGER = cast("RosactlLogger", logging.getLogger(__name__))

_T = TypeVar("_T")


class Deployer:
    """Reconcile the resources needed to run the provisioner.

    Steps run in a fixed order. Failure of a step that later steps depend on
    aborts the deployment with :class:`~rosactl.exceptions.DeploymentStepError`.
    Failure of the invocation permission, log group or tagging steps is
    logged and recorded as a warning. Nothing is rolled back.

    """

    def __init__(
        self,
        roles: RoleClient,
        functions: FunctionClient,
        log_groups: LogGroupClient,
        config: DeploymentConfig,
        package_builder: PackageBuilder | None = None,
    ) -> None:
        """Instantiate class.

        Args:
            roles: IAM role client.
            functions: Lambda function client.
            log_groups: CloudWatch log group client.
            config: Deployment configuration.
            package_builder: Builder of the deployment package. Created from
                ``config`` when not provided.

        """
        self.config = config
        self.functions = functions
        self.log_groups = log_groups
        self.package_builder = package_builder or PackageBuilder.from_config(config)
        self.roles = roles
        self.logger = PrefixAdaptor(config.function_name, LOGGER)
        self.reports: list[StepReport] = []

    def deploy(self) -> DeploymentResult:
        """Run all deployment steps.

        Raises:
            DeploymentStepError: A required step failed.

        """
        self.reports = []
        if self.config.runtime.startswith("provided") and not self.config.layers:
            self.logger.warning(
                "no layers configured; runtime %s does not provide the python3 interpreter "
                "the deployment package requires",
                self.config.runtime,
            )
        role_arn = self._run_required("ensure_execution_role", self.ensure_execution_role)
        artifact = self._run_required("build_package", self.build_package)
        function_arn = self._run_required("check_function", self.check_function)
        if function_arn is None:
            function_arn = self._run_required(
                "create_function", self.create_function, role_arn, artifact
            )
            status = "created"
        else:
            self._run_required("update_function", self.update_function, role_arn, artifact)
            status = "updated"

        if self.config.invocation_permission_configured:
            self._run_tolerated("add_invocation_permission", self.add_invocation_permission)
        else:
            self._skip(
                "add_invocation_permission",
                "invoker role ARN or source account ID not provided",
            )
        self._run_tolerated("ensure_log_group", self.ensure_log_group)
        if self.config.tags:
            self._run_tolerated("tag_function", self.tag_function, function_arn)
        else:
            self._skip("tag_function", "no tags configured")

        self.logger.success("%s %s", status, function_arn)
        return DeploymentResult(
            execution_role_arn=role_arn,
            function_arn=function_arn,
            function_name=self.config.function_name,
            log_group_name=self.config.log_group_name,
            package_checksum=artifact.checksum,
            package_size=artifact.size,
            status=status,
            steps=tuple(self.reports),
        )

    def ensure_execution_role(self) -> tuple[str, str]:
        """Get the execution role, creating it if it does not exist."""
        name = self.config.execution_role_name
        try:
            arn = self.roles.get_role(name)
        except NotFoundError:
            self.logger.info("creating execution role %s...", name)
        else:
            self.logger.verbose("execution role %s exists", name)
            return arn, f"using existing role {arn}"
        arn = self.roles.create_role(
            name, to_json(trust_policy()), EXECUTION_ROLE_DESCRIPTION
        )
        self.roles.put_role_policy(name, PERMISSIONS_POLICY_NAME, to_json(permissions_policy()))
        return arn, f"created role {arn}"

    def build_package(self) -> tuple[PackageArtifact, str]:
        """Build the deployment package."""
        artifact = self.package_builder.build(self.config.source_dir)
        return artifact, f"{artifact.size} bytes (sha256: {artifact.checksum})"

    def check_function(self) -> tuple[str | None, str]:
        """Determine if the function already exists."""
        try:
            arn = self.functions.get_function(self.config.function_name)
        except NotFoundError:
            return None, "function does not exist"
        return arn, f"function exists ({arn})"

    def create_function(self, role_arn: str, artifact: PackageArtifact) -> tuple[str, str]:
        """Create the function."""
        self.logger.info("creating function...")
        arn = self.functions.create_function(
            self.config.function_name,
            architecture=self.config.architecture,
            description=FUNCTION_DESCRIPTION,
            handler=BOOTSTRAP_FILE_NAME,
            layers=self.config.layers,
            memory_size=self.config.memory_size,
            role_arn=role_arn,
            runtime=self.config.runtime,
            timeout=self.config.timeout,
            zip_file=artifact.data,
        )
        return arn, f"created function {arn}"

    def update_function(self, role_arn: str, artifact: PackageArtifact) -> tuple[None, str]:
        """Update the code and configuration of the function."""
        self.logger.info("updating function...")
        self.functions.update_function_code(self.config.function_name, artifact.data)
        self.functions.update_function_configuration(
            self.config.function_name,
            handler=BOOTSTRAP_FILE_NAME,
            layers=self.config.layers,
            memory_size=self.config.memory_size,
            role_arn=role_arn,
            runtime=self.config.runtime,
            timeout=self.config.timeout,
        )
        return None, "updated function code and configuration"

    def add_invocation_permission(self) -> tuple[None, str]:
        """Allow the invoker role to invoke the function.

        An existing statement with the same ID is replaced.

        """
        policy = resource_policy(
            self.config.invoker_role_arn or "", self.config.source_account_id or ""
        )
        statement = json.loads(to_json(policy))["Statement"][0]
        permission = {
            "action": statement["Action"][0],
            "principal": statement["Principal"]["AWS"],
            "source_account": statement["Condition"]["StringEquals"]["aws:SourceAccount"],
            "statement_id": INVOKE_STATEMENT_ID,
        }
        try:
            self.functions.add_permission(self.config.function_name, **permission)
        except ConflictError:
            self.logger.verbose("replacing statement %s of function policy", INVOKE_STATEMENT_ID)
            self.functions.remove_permission(self.config.function_name, INVOKE_STATEMENT_ID)
            try:
                self.functions.add_permission(self.config.function_name, **permission)
            except ConflictError:
                return None, "invocation permission already present"
            return None, f"replaced invocation permission for {permission['principal']}"
        return None, f"added invocation permission for {permission['principal']}"

    def ensure_log_group(self) -> tuple[None, str]:
        """Create the log group of the function and set its retention."""
        name = self.config.log_group_name
        if name in self.log_groups.describe_log_groups(name):
            message = f"log group {name} exists"
        else:
            try:
                self.log_groups.create_log_group(name)
            except ConflictError:
                message = f"log group {name} exists"
            else:
                message = f"created log group {name}"
        self.log_groups.put_retention_policy(name, LOG_GROUP_RETENTION_DAYS)
        if self.config.tags:
            self.log_groups.tag_log_group(name, self.config.tags)
        return None, f"{message} (retention: {LOG_GROUP_RETENTION_DAYS} days)"

    def tag_function(self, function_arn: str) -> tuple[None, str]:
        """Apply the configured tags to the function."""
        self.functions.tag_resource(function_arn, self.config.tags)
        return None, f"applied {len(self.config.tags)} tag(s)"

    def _run_required(
        self, name: str, step: Callable[..., tuple[_T, str]], *args: Any
    ) -> _T:
        """Run a step that must succeed for the deployment to continue."""
        self.logger.debug("running step %s", name)
        try:
            value, message = step(*args)
        except Exception as exc:
            self._record(name, StepOutcome.FATAL, str(exc))
            self.logger.error("%s failed: %s", name, exc)
            raise DeploymentStepError(name, exc) from exc
        self._record(name, StepOutcome.OK, message)
        return value

    def _run_tolerated(self, name: str, step: Callable[..., tuple[Any, str]], *args: Any) -> None:
        """Run a step whose AWS errors are recorded as warnings.

        Errors returned by the API and errors raised by botocore before a
        response is received (connection, timeout, credentials) are tolerated.

        """
        self.logger.debug("running step %s", name)
        try:
            _, message = step(*args)
        except (AwsClientError, BotoCoreError) as exc:
            self._record(name, StepOutcome.WARNING, str(exc))
            self.logger.warning("%s failed: %s", name, exc)
            return
        self._record(name, StepOutcome.OK, message)

    def _skip(self, name: str, reason: str) -> None:
        self._record(name, StepOutcome.SKIPPED, reason)
        self.logger.verbose("skipped %s: %s", name, reason)

    def _record(self, name: str, outcome: StepOutcome, message: str) -> None:
        self.reports.append(StepReport(name=name, outcome=outcome, message=message))
        if outcome is StepOutcome.OK:
            self.logger.verbose("%s: %s", name, message)
