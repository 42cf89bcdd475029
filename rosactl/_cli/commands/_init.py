"""``rosactl init`` command."""

import logging
from typing import TYPE_CHECKING, Any, cast

import click
from botocore.exceptions import BotoCoreError

from ...exceptions import RosactlError
from ...validators import AwsValidator, PlatformValidator
from .. import options

if TYPE_CHECKING:
    from ..._logging import RosactlLogger

LOGGER = cast("RosactlLogger", logging.getLogger(__name__.replace("._", ".")))


@click.command("init", short_help="validate environment")
@options.debug
@options.no_color
@options.platform_api_url
@options.profile
@options.region
@options.verbose
@click.pass_context
def init(ctx: click.Context, **_: Any) -> None:
    """Validate AWS credentials, region and the platform API.

    \b
    1. AWS credentials are valid and the region is supported.
    2. The platform API liveness endpoint responds (only when
       "--platform-api-url" or "ROSACTL_PLATFORM_API_URL" is set).

    """  # noqa: D301
    try:
        clients = ctx.obj.clients
        result = AwsValidator(clients.sts, clients.region).validate()
        LOGGER.success(
            "AWS credentials are valid (account: %s; identity: %s; region: %s)",
            result.account_id,
            result.user_arn,
            result.region,
        )
        if not ctx.obj.platform_api_url:
            LOGGER.info("platform API URL not set; skipped platform API validation")
            return
        platform = PlatformValidator(ctx.obj.platform_api_url, clients.session).validate()
        LOGGER.success("platform API is live: %s", platform.api_version)
    except (BotoCoreError, RosactlError) as err:
        LOGGER.error(str(err), exc_info=bool(ctx.obj.debug))
        ctx.exit(1)
