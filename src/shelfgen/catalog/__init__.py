# ABOUTME: Catalog entity package for shelfgen.
# ABOUTME: Exports the Author, Series and Book types shared by every pipeline stage.

from shelfgen.catalog.types import Author, Book, Series

__all__ = [
    "Author",
    "Book",
    "Series",
]
