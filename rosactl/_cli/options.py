"""Click options."""

import click

debug = click.option(
    "--debug",
    count=True,
    envvar="DEBUG",
    help="Supply once to display rosactl debug logs. Supply twice to display all debug logs.",
)

no_color = click.option(
    "--no-color",
    default=False,
    envvar="ROSACTL_NO_COLOR",
    is_flag=True,
    help="Disable color in rosactl's logs.",
)

platform_api_url = click.option(
    "--platform-api-url",
    envvar="ROSACTL_PLATFORM_API_URL",
    metavar="<url>",
    help="Base URL of the platform API.",
)

profile = click.option(
    "--profile",
    envvar="AWS_PROFILE",
    metavar="<profile>",
    help="AWS profile to use.",
)

region = click.option(
    "--region",
    envvar="AWS_REGION",
    metavar="<region>",
    help="AWS region to use.",
)

verbose = click.option(
    "-v",
    "--verbose",
    default=False,
    envvar="VERBOSE",
    is_flag=True,
    help="Display rosactl verbose logs.",
)
