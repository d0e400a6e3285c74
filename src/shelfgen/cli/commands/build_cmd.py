# ABOUTME: The `shelfgen build` command for generating the static site.
# ABOUTME: Reads the catalog, writes every page and cover, and prints a summary.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfgen.cli.options import library_option, output_option, verbose_option
from shelfgen.core.emitter import EmitError
from shelfgen.core.pipeline import generate_site
from shelfgen.db.connection import DEFAULT_LIBRARY_DIR, CatalogUnavailableError

console = Console()


@click.command("build")
@library_option
@output_option
@click.option(
    "--allow-missing-covers",
    is_flag=True,
    default=False,
    help="Skip books whose cover.jpg is missing instead of failing the run.",
)
@verbose_option
def build(library_dir: Path | None, output_dir: Path, allow_missing_covers: bool) -> None:
    """Generate the index, author and series pages for a library."""
    library = library_dir or DEFAULT_LIBRARY_DIR

    try:
        result = generate_site(
            library, output_dir, allow_missing_covers=allow_missing_covers,
        )
    except CatalogUnavailableError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc
    except EmitError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        for target, cause in exc.failures:
            console.print(f"  [dim]{escape(str(target))}:[/dim] {escape(str(cause))}")
        raise SystemExit(1) from exc

    parts = [
        f"[green]{len(result.pages_written)} page(s) written[/green]",
        f"[green]{result.covers_copied} cover(s) copied[/green]",
    ]
    if result.covers_skipped:
        parts.append(f"[yellow]{len(result.covers_skipped)} cover(s) missing[/yellow]")
    console.print(", ".join(parts))

    if result.covers_skipped:
        console.print("\n[yellow]Books without a cover:[/yellow]")
        for book in result.covers_skipped:
            console.print(f"  {escape(book.title)} [dim]({book.id})[/dim]")

    console.print(f"\n[dim]Site written to {result.output_dir}[/dim]")
