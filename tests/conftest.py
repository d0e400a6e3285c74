# ABOUTME: Shared pytest fixtures for shelfgen tests.
# ABOUTME: Builds Calibre-shaped library directories (metadata.db plus covers) in tmp_path.

import sqlite3
from collections.abc import Callable
from pathlib import Path

import pytest

# The subset of the Calibre schema that shelfgen reads
CALIBRE_SCHEMA = """
CREATE TABLE authors (
    id   INTEGER PRIMARY KEY,
    name TEXT NOT NULL
);
CREATE TABLE series (
    id   INTEGER PRIMARY KEY,
    name TEXT NOT NULL
);
CREATE TABLE books (
    id           INTEGER PRIMARY KEY,
    title        TEXT NOT NULL,
    series_index REAL NOT NULL DEFAULT 1.0,
    path         TEXT NOT NULL DEFAULT ''
);
CREATE TABLE books_authors_link (
    id     INTEGER PRIMARY KEY,
    book   INTEGER NOT NULL,
    author INTEGER NOT NULL
);
CREATE TABLE books_series_link (
    id     INTEGER PRIMARY KEY,
    book   INTEGER NOT NULL,
    series INTEGER NOT NULL
);
"""

MakeLibrary = Callable[..., Path]


@pytest.fixture
def make_library(tmp_path: Path) -> MakeLibrary:
    """Factory that writes a Calibre library and returns its directory.

    Each book gets a cover.jpg under <library>/<path>/ unless its id is
    listed in ``without_covers``.
    """

    def _make(
        *,
        authors: list[tuple[int, str]] = (),
        series: list[tuple[int, str]] = (),
        books: list[tuple[int, str, float, str]] = (),
        author_links: list[tuple[int, int]] = (),
        series_links: list[tuple[int, int]] = (),
        without_covers: set[int] = frozenset(),
        name: str = "Calibre Library",
    ) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True)

        conn = sqlite3.connect(root / "metadata.db")
        conn.executescript(CALIBRE_SCHEMA)
        conn.executemany("INSERT INTO authors (id, name) VALUES (?, ?)", authors)
        conn.executemany("INSERT INTO series (id, name) VALUES (?, ?)", series)
        conn.executemany(
            "INSERT INTO books (id, title, series_index, path) VALUES (?, ?, ?, ?)", books
        )
        conn.executemany(
            "INSERT INTO books_authors_link (book, author) VALUES (?, ?)", author_links
        )
        conn.executemany(
            "INSERT INTO books_series_link (book, series) VALUES (?, ?)", series_links
        )
        conn.commit()
        conn.close()

        for book_id, _, _, book_path in books:
            if book_id in without_covers:
                continue
            book_dir = root / book_path
            book_dir.mkdir(parents=True, exist_ok=True)
            (book_dir / "cover.jpg").write_bytes(f"cover-{book_id}".encode())

        return root

    return _make


@pytest.fixture
def sample_library(make_library: MakeLibrary) -> Path:
    """A small library with two authors and a two-level series.

    Layout:
        Cthulhu Mythos        (container)
            Arkham Cycle      (leaf): The Dunwich Horror #2, At the Mountains of Madness #1
            Dreamlands        (leaf): The Dream-Quest of Unknown Kadath #1
        Standalone            (leaf): An Unrelated Novel #1
    Plus "Beowulf", with no series.
    """
    return make_library(
        authors=[(1, "H. P. Lovecraft"), (2, "Anonymous")],
        series=[
            (1, "Cthulhu Mythos.Arkham Cycle"),
            (2, "Cthulhu Mythos.Dreamlands"),
            (3, "Standalone"),
        ],
        books=[
            (1, "The Dunwich Horror", 2.0, "H. P. Lovecraft/The Dunwich Horror (1)"),
            (2, "At the Mountains of Madness", 1.0, "H. P. Lovecraft/At the Mountains (2)"),
            (3, "The Dream-Quest of Unknown Kadath", 1.0, "H. P. Lovecraft/Kadath (3)"),
            (4, "An Unrelated Novel", 1.0, "H. P. Lovecraft/Unrelated (4)"),
            (5, "Beowulf", 1.0, "Anonymous/Beowulf (5)"),
        ],
        author_links=[(1, 1), (2, 1), (3, 1), (4, 1), (5, 2)],
        series_links=[(1, 1), (2, 1), (3, 2), (4, 3)],
    )
