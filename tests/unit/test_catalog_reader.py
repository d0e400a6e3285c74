# ABOUTME: Unit tests for the read-only catalog connection and reader.
# ABOUTME: Validates row mapping, missing catalogs, failed queries, and read-only access.

import sqlite3
from pathlib import Path

import pytest

from shelfgen.db.connection import CatalogUnavailableError, open_catalog
from shelfgen.db.mapping import AuthorRow, BookRow, LinkRow, SeriesRow
from shelfgen.db.reader import CatalogReader


class TestOpenCatalog:
    def test_missing_library_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogUnavailableError, match="No catalog found"):
            open_catalog(tmp_path / "nowhere")

    def test_directory_without_metadata_db_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogUnavailableError):
            open_catalog(tmp_path)

    def test_connection_is_read_only(self, sample_library: Path) -> None:
        conn = open_catalog(sample_library)
        with pytest.raises(sqlite3.OperationalError):
            conn.execute("INSERT INTO authors (id, name) VALUES (99, 'Intruder')")
        conn.close()


class TestCatalogReader:
    def test_read_all(self, sample_library: Path) -> None:
        conn = open_catalog(sample_library)
        rows = CatalogReader(conn).read_all()
        conn.close()

        assert rows.authors[0] == AuthorRow(1, "H. P. Lovecraft")
        assert SeriesRow(1, "Cthulhu Mythos.Arkham Cycle") in rows.series
        assert LinkRow(book=5, target=2) in rows.author_links
        assert LinkRow(book=4, target=3) in rows.series_links
        assert rows.books[0] == BookRow(
            1, "The Dunwich Horror", 2.0, "H. P. Lovecraft/The Dunwich Horror (1)"
        )

    def test_missing_table_raises(self, tmp_path: Path) -> None:
        conn = sqlite3.connect(tmp_path / "metadata.db")
        conn.close()
        conn = open_catalog(tmp_path)
        with pytest.raises(CatalogUnavailableError, match="query failed"):
            CatalogReader(conn).authors()
        conn.close()
