# ABOUTME: Read-only queries against the Calibre catalog tables.
# ABOUTME: Each method returns the full row set of one table as typed records.

import sqlite3
from dataclasses import dataclass

from shelfgen.db.connection import CatalogUnavailableError
from shelfgen.db.mapping import (
    AuthorRow,
    BookRow,
    LinkRow,
    SeriesRow,
    row_to_author,
    row_to_book,
    row_to_link,
    row_to_series,
)


@dataclass
class CatalogRows:
    """Every row set needed for one generation run."""

    authors: list[AuthorRow]
    series: list[SeriesRow]
    author_links: list[LinkRow]
    series_links: list[LinkRow]
    books: list[BookRow]


class CatalogReader:
    """Wraps a sqlite3 connection and reads the catalog tables in full."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def _fetch(self, query: str) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(query).fetchall()
        except sqlite3.Error as exc:
            raise CatalogUnavailableError(f"Catalog query failed: {exc}") from exc

    def authors(self) -> list[AuthorRow]:
        return [row_to_author(row) for row in self._fetch("SELECT id, name FROM authors")]

    def series(self) -> list[SeriesRow]:
        return [row_to_series(row) for row in self._fetch("SELECT id, name FROM series")]

    def author_links(self) -> list[LinkRow]:
        rows = self._fetch("SELECT book, author AS target FROM books_authors_link")
        return [row_to_link(row) for row in rows]

    def series_links(self) -> list[LinkRow]:
        rows = self._fetch("SELECT book, series AS target FROM books_series_link")
        return [row_to_link(row) for row in rows]

    def books(self) -> list[BookRow]:
        rows = self._fetch("SELECT id, title, series_index, path FROM books")
        return [row_to_book(row) for row in rows]

    def read_all(self) -> CatalogRows:
        """Run every catalog query, in order, and collect the results.

        Raises:
            CatalogUnavailableError: If any query fails.
        """
        return CatalogRows(
            authors=self.authors(),
            series=self.series(),
            author_links=self.author_links(),
            series_links=self.series_links(),
            books=self.books(),
        )
