# ABOUTME: Typed row records for the Calibre catalog tables read by shelfgen.
# ABOUTME: Converts sqlite3 rows into small dataclasses consumed by the resolver.

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AuthorRow:
    """A row of the authors table."""

    id: int
    name: str


@dataclass(frozen=True)
class SeriesRow:
    """A row of the series table. The name may hold `.`-delimited segments."""

    id: int
    name: str


@dataclass(frozen=True)
class LinkRow:
    """A row of a book link table: (book id, linked entity id)."""

    book: int
    target: int


@dataclass(frozen=True)
class BookRow:
    """A row of the books table. `path` is relative to the library directory."""

    id: int
    title: str
    series_index: float | None
    path: str


def row_to_author(row: Any) -> AuthorRow:
    return AuthorRow(id=row["id"], name=row["name"])


def row_to_series(row: Any) -> SeriesRow:
    return SeriesRow(id=row["id"], name=row["name"])


def row_to_link(row: Any) -> LinkRow:
    """Convert a link row selected as (book, target)."""
    return LinkRow(book=row["book"], target=row["target"])


def row_to_book(row: Any) -> BookRow:
    index = row["series_index"]
    return BookRow(
        id=row["id"],
        title=row["title"],
        series_index=float(index) if index is not None else None,
        path=row["path"],
    )
