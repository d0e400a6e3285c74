# ABOUTME: CLI package for shelfgen, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import click

from shelfgen.cli.commands import build_cmd, series_cmd, views_cmd


@click.group()
@click.version_option(package_name="shelfgen")
def cli() -> None:
    """shelfgen - static HTML pages for a Calibre library."""


cli.add_command(build_cmd.build)
cli.add_command(views_cmd.views)
cli.add_command(series_cmd.series)
