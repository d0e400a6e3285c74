# ABOUTME: Site generation pipeline: catalog rows -> entities -> views -> pages.
# ABOUTME: Loads one immutable snapshot of the library and hands it to the emitter.

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from shelfgen.catalog.types import Author, Book, Series
from shelfgen.core.assembler import assemble_books
from shelfgen.core.emitter import EmitResult, emit_site
from shelfgen.core.hierarchy import build_series_tree
from shelfgen.core.planner import View, plan_views
from shelfgen.core.resolver import resolve_entities
from shelfgen.db.connection import open_catalog
from shelfgen.db.reader import CatalogReader, CatalogRows
from shelfgen.render.context import Renderer
from shelfgen.render.renderer import PageRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteData:
    """A fully resolved library snapshot, built once per run."""

    authors: list[Author]
    series_nodes: list[Series]
    series_tree: list[Series]
    books: list[Book]

    def plan(self) -> list[View]:
        return plan_views(self.books, self.authors, self.series_nodes)


def build_site_data(rows: CatalogRows, library_dir: Path) -> SiteData:
    """Resolve, build the series hierarchy, and assemble books from catalog rows."""
    resolved = resolve_entities(
        rows.authors, rows.series, rows.author_links, rows.series_links,
    )
    series_tree = build_series_tree(resolved.series_nodes)
    books = assemble_books(
        rows.books,
        author_links=resolved.author_links,
        series_links=resolved.series_links,
        series_nodes=resolved.series_nodes,
        library_dir=library_dir,
    )
    logger.info(
        "Loaded %d author(s), %d series node(s), %d book(s)",
        len(resolved.authors), len(resolved.series_nodes), len(books),
    )
    return SiteData(
        authors=list(resolved.authors.values()),
        series_nodes=list(resolved.series_nodes.values()),
        series_tree=series_tree,
        books=books,
    )


def load_site(library_dir: Path) -> SiteData:
    """Read the whole catalog of a library and build its snapshot.

    Raises:
        CatalogUnavailableError: If the catalog cannot be opened or queried.
    """
    conn = open_catalog(library_dir)
    try:
        rows = CatalogReader(conn).read_all()
    finally:
        conn.close()
    return build_site_data(rows, library_dir)


async def generate_site_async(
    site: SiteData,
    output_dir: Path,
    *,
    renderer: Renderer | None = None,
    allow_missing_covers: bool = False,
) -> EmitResult:
    views = site.plan()
    logger.info("Planned %d page(s)", len(views))
    return await emit_site(
        site.books,
        views,
        renderer or PageRenderer(),
        output_dir,
        authors=site.authors,
        series_tree=site.series_tree,
        allow_missing_covers=allow_missing_covers,
    )


def generate_site(
    library_dir: Path,
    output_dir: Path,
    *,
    renderer: Renderer | None = None,
    allow_missing_covers: bool = False,
) -> EmitResult:
    """Run a full generation: read the catalog, plan views, write the site.

    Raises:
        CatalogUnavailableError: Before any output is written.
        EmitError: If a cover or page phase failed.
    """
    site = load_site(library_dir)
    return asyncio.run(
        generate_site_async(
            site, output_dir,
            renderer=renderer, allow_missing_covers=allow_missing_covers,
        )
    )
