# ABOUTME: The `shelfgen views` command for previewing planned pages.
# ABOUTME: Lists every page a build would write, without writing anything.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfgen.cli.options import library_option, verbose_option
from shelfgen.core.pipeline import load_site
from shelfgen.db.connection import DEFAULT_LIBRARY_DIR, CatalogUnavailableError

console = Console()


@click.command("views")
@library_option
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output the planned views as JSON.",
)
@verbose_option
def views(library_dir: Path | None, json_output: bool) -> None:
    """Show the pages a build would generate."""
    try:
        site = load_site(library_dir or DEFAULT_LIBRARY_DIR)
    except CatalogUnavailableError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    planned = site.plan()

    if json_output:
        data = [
            {
                "file": view.filename,
                "kind": view.kind.value,
                "heading": view.heading,
                "ordering": view.ordering.value,
                "books": [book.id for book in view.books],
            }
            for view in planned
        ]
        click.echo(json_lib.dumps(data, indent=2))
        return

    table = Table()
    table.add_column("File", style="bold")
    table.add_column("Kind")
    table.add_column("Heading")
    table.add_column("Books", justify="right")
    table.add_column("Order")

    for view in planned:
        table.add_row(
            view.filename,
            view.kind.value,
            escape(view.heading),
            str(len(view.books)),
            view.ordering.value,
        )

    console.print(table)
    console.print(f"\n[dim]{len(planned)} page(s)[/dim]")
