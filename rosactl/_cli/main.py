"""rosactl CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
from typing import Any

import click

from .. import __version__
from . import commands, options
from .logs import setup_logging
from .utils import CliContext

LOGGER = logging.getLogger("rosactl.cli")

CLICK_CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 999,
}


class _CliGroup(click.Group):
    """Extends the use of click.Group.

    This should only be used for the main application group.

    """

    def invoke(self, ctx: click.Context) -> Any:
        """Replace invoke command to pass along args."""
        ctx.meta["global.options"] = self.__parse_global_options(ctx)
        return super().invoke(ctx)

    @staticmethod
    def __parse_global_options(ctx: click.Context) -> dict[str, Any]:
        """Parse global options.

        These options are passed to subcommands but, should be parsed by the
        main application group. The value of these options are used for global
        configuration such as logging or context object setup.

        """
        parser = argparse.ArgumentParser(add_help=False)
        parser.add_argument("--debug", default=0, action="count")
        parser.add_argument("--no-color", action="store_true")
        parser.add_argument("--platform-api-url")
        parser.add_argument("--profile")
        parser.add_argument("--region")
        parser.add_argument("-v", "--verbose", action="store_true")
        args, _ = parser.parse_known_args(list(ctx.args))
        result = vars(args)
        # options before the subcommand and environment variables are resolved by click
        for key, value in ctx.params.items():
            if key in result and not result[key]:
                result[key] = value
        return result


@click.group(context_settings=CLICK_CONTEXT_SETTINGS, cls=_CliGroup)
@click.version_option(__version__, message="%(version)s")
@options.debug
@options.no_color
@options.platform_api_url
@options.profile
@options.region
@options.verbose
@click.pass_context
def cli(ctx: click.Context, **_: Any) -> None:
    """rosactl CLI.

    Prepares an AWS account to host the OIDC providers of ROSA clusters.

    """
    opts = ctx.meta["global.options"]
    setup_logging(debug=opts["debug"], no_color=opts["no_color"], verbose=opts["verbose"])
    ctx.obj = CliContext(**opts)


for cmd in commands.__all__:
    cli.add_command(getattr(commands, cmd))
