"""``rosactl whoami`` command."""

import logging
from typing import Any

import click
from botocore.exceptions import BotoCoreError

from ...aws import get_caller_identity
from ...exceptions import RosactlError
from .. import options

LOGGER = logging.getLogger(__name__.replace("._", "."))


@click.command("whoami", short_help="show AWS identity")
@options.debug
@options.no_color
@options.profile
@options.region
@options.verbose
@click.pass_context
def whoami(ctx: click.Context, **_: Any) -> None:
    """Print the identity of the AWS credentials in use."""
    try:
        identity = get_caller_identity(ctx.obj.clients.sts)
    except (BotoCoreError, RosactlError) as err:
        LOGGER.error(str(err), exc_info=bool(ctx.obj.debug))
        ctx.exit(1)
    click.echo(f"UserId: {identity.user_id}")
    click.echo(f"Account: {identity.account}")
    click.echo(f"Arn: {identity.arn}")
