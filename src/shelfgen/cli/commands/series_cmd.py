# ABOUTME: The `shelfgen series` command for viewing the series hierarchy.
# ABOUTME: Prints the dotted series names of the catalog as a Rich tree.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from shelfgen.catalog.types import Series
from shelfgen.cli.options import library_option, verbose_option
from shelfgen.core.pipeline import load_site
from shelfgen.db.connection import DEFAULT_LIBRARY_DIR, CatalogUnavailableError

console = Console()


def _add_nodes(branch: Tree, nodes: list[Series]) -> None:
    for node in nodes:
        name = escape(node.name)
        label = name if not node.leaf else f"{name} [dim](leaf)[/dim]"
        _add_nodes(branch.add(label), node.children)


@click.command("series")
@library_option
@verbose_option
def series(library_dir: Path | None) -> None:
    """Show the series hierarchy of a library."""
    try:
        site = load_site(library_dir or DEFAULT_LIBRARY_DIR)
    except CatalogUnavailableError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if not site.series_tree:
        console.print("[yellow]No series in the library.[/yellow]")
        return

    tree = Tree("[bold]Series[/bold]")
    _add_nodes(tree, site.series_tree)
    console.print(tree)
