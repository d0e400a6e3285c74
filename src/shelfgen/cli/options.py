# ABOUTME: Shared Click options for shelfgen CLI commands.
# ABOUTME: Provides reusable decorators for --library, --output and --verbose.

import logging
from pathlib import Path

import click
from rich.logging import RichHandler

from shelfgen.core.emitter import DEFAULT_OUTPUT_DIR
from shelfgen.db.connection import DEFAULT_LIBRARY_DIR

library_option = click.option(
    "--library",
    "library_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="SHELFGEN_LIBRARY",
    help=f"Calibre library directory (default: {DEFAULT_LIBRARY_DIR})",
)

output_option = click.option(
    "-o", "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_OUTPUT_DIR,
    show_default=True,
    envvar="SHELFGEN_OUTPUT",
    help="Directory the site is written to.",
)


def _configure_logging(ctx: click.Context, param: click.Parameter, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    default=False,
    expose_value=False,
    is_eager=True,
    callback=_configure_logging,
    help="Show debug logging.",
)
