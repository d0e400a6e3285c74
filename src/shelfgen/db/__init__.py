# ABOUTME: Public API for the shelfgen catalog reader layer.
# ABOUTME: Exports read-only connection management, row records, and the reader.

from shelfgen.db.connection import (
    CATALOG_FILENAME,
    DEFAULT_LIBRARY_DIR,
    CatalogUnavailableError,
    open_catalog,
)
from shelfgen.db.mapping import AuthorRow, BookRow, LinkRow, SeriesRow
from shelfgen.db.reader import CatalogReader, CatalogRows

__all__ = [
    "CATALOG_FILENAME",
    "DEFAULT_LIBRARY_DIR",
    "AuthorRow",
    "BookRow",
    "CatalogReader",
    "CatalogRows",
    "CatalogUnavailableError",
    "LinkRow",
    "SeriesRow",
    "open_catalog",
]
