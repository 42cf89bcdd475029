"""``rosactl setup-account`` command."""

import logging
from typing import Any, Optional

import click
from botocore.exceptions import BotoCoreError
from pydantic import ValidationError

from ...deployer import DeploymentConfig, Deployer, StepOutcome
from ...deployer.constants import (
    DEFAULT_EXECUTION_ROLE_NAME,
    DEFAULT_FUNCTION_NAME,
    DEFAULT_TAGS,
    PROVISIONER_REQUIREMENTS,
    PROVISIONER_SOURCE_DIR,
)
from ...exceptions import RosactlError
from .. import options

LOGGER = logging.getLogger(__name__.replace("._", "."))


@click.command("setup-account", short_help="deploy the OIDC provisioner")
@click.option(
    "--function-name",
    default=DEFAULT_FUNCTION_NAME,
    metavar="<name>",
    show_default=True,
    help="Name of the Lambda function.",
)
@click.option(
    "--execution-role-name",
    default=DEFAULT_EXECUTION_ROLE_NAME,
    metavar="<name>",
    show_default=True,
    help="Name of the IAM role assumed by the function.",
)
@click.option(
    "--layer",
    "layers",
    metavar="<arn>",
    multiple=True,
    help="ARN of a layer attached to the function. The runtime has no Python "
    "interpreter so a layer providing python3 is required. May be supplied more than once.",
)
@click.option(
    "--invoker-role-arn",
    metavar="<arn>",
    help="ARN of the role allowed to invoke the function.",
)
@click.option(
    "--source-account-id",
    metavar="<account-id>",
    help="Account invocations must originate from.",
)
@options.debug
@options.no_color
@options.profile
@options.region
@options.verbose
@click.pass_context
def setup_account(
    ctx: click.Context,
    execution_role_name: str,
    function_name: str,
    invoker_role_arn: Optional[str],
    layers: tuple[str, ...],
    source_account_id: Optional[str],
    **_: Any,
) -> None:
    """Deploy the OIDC provisioner into the current AWS account.

    \b
    Process
    -------
    1. Creates the execution role if it does not exist.
    2. Builds the deployment package.
    3. Creates or updates the Lambda function with the given layers.
    4. Allows the invoker role to invoke the function (only when both
       "--invoker-role-arn" and "--source-account-id" are provided).
    5. Creates the log group of the function.
    6. Tags the function.

    Running the command again updates the existing resources.

    """  # noqa: D301
    try:
        config = DeploymentConfig(
            execution_role_name=execution_role_name,
            function_name=function_name,
            invoker_role_arn=invoker_role_arn,
            layers=layers,
            requirements=PROVISIONER_REQUIREMENTS,
            source_account_id=source_account_id,
            source_dir=PROVISIONER_SOURCE_DIR,
            tags=DEFAULT_TAGS,
        )
        clients = ctx.obj.clients
        result = Deployer(clients.roles, clients.functions, clients.log_groups, config).deploy()
    except ValidationError as err:
        LOGGER.error(err, exc_info=bool(ctx.obj.debug))
        ctx.exit(1)
    except (BotoCoreError, RosactlError) as err:
        LOGGER.error(str(err), exc_info=bool(ctx.obj.debug))
        ctx.exit(1)

    for step in result.steps:
        if step.outcome is StepOutcome.WARNING:
            LOGGER.warning("%s: %s", step.name, step.message)
    click.echo(f"Function ARN: {result.function_arn}")
    click.echo(f"Execution Role ARN: {result.execution_role_arn}")
    click.echo(f"Log Group: {result.log_group_name}")
    click.echo(f"Status: {result.status}")
    click.echo(f"Package: {result.package_size} bytes (sha256: {result.package_checksum})")
