# ABOUTME: Read-only SQLite connection management for a Calibre library catalog.
# ABOUTME: Locates metadata.db under the library directory and opens it without write access.

import sqlite3
from pathlib import Path

DEFAULT_LIBRARY_DIR = Path.home() / "calibre"
CATALOG_FILENAME = "metadata.db"


class CatalogUnavailableError(Exception):
    """Raised when the library catalog cannot be opened or queried."""


def catalog_path(library_dir: Path) -> Path:
    """Return the path of the catalog database inside a library directory."""
    return library_dir / CATALOG_FILENAME


def open_catalog(library_dir: Path | None = None) -> sqlite3.Connection:
    """Open a Calibre library catalog for reading.

    The database is opened through a ``mode=ro`` URI so a generation run can
    never modify the library. Rows use the sqlite3.Row factory for dict-like
    column access.

    Args:
        library_dir: The Calibre library directory. Defaults to ~/calibre.

    Returns:
        A read-only sqlite3.Connection.

    Raises:
        CatalogUnavailableError: If metadata.db is missing or cannot be opened.
    """
    db_path = catalog_path(library_dir or DEFAULT_LIBRARY_DIR)
    if not db_path.is_file():
        raise CatalogUnavailableError(f"No catalog found at {db_path}")

    try:
        conn = sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=ro", uri=True)
    except sqlite3.Error as exc:
        raise CatalogUnavailableError(f"Could not open {db_path}: {exc}") from exc

    conn.row_factory = sqlite3.Row
    return conn
