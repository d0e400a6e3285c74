# ABOUTME: Book assembly: joins book rows with resolved authors and series chains.
# ABOUTME: Computes slugs and the cover source path inside the library directory.

from collections.abc import Iterable
from pathlib import Path

from shelfgen.catalog.types import Author, Book, Series
from shelfgen.core.naming import make_slug
from shelfgen.db.mapping import BookRow

COVER_FILENAME = "cover.jpg"


def cover_source_path(library_dir: Path, book_path: str) -> Path:
    """Where Calibre keeps a book's cover: <library>/<book path>/cover.jpg."""
    return library_dir / book_path / COVER_FILENAME


def assemble_books(
    rows: Iterable[BookRow],
    *,
    author_links: dict[int, Author | None],
    series_links: dict[int, list[str] | None],
    series_nodes: dict[str, Series],
    library_dir: Path,
) -> list[Book]:
    """Build Book entities in catalog row order.

    A book without an author link (or whose link dangles) gets author None.
    A book without a resolvable series link gets an empty series chain.
    Cover files are not checked here.
    """
    books: list[Book] = []
    for row in rows:
        chain = series_links.get(row.id) or []
        books.append(
            Book(
                id=row.id,
                title=row.title,
                slug=make_slug(row.title),
                series_index=row.series_index,
                cover_source_path=cover_source_path(library_dir, row.path),
                author=author_links.get(row.id),
                series=[series_nodes[name] for name in chain],
            )
        )
    return books
