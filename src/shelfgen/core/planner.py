# ABOUTME: View planning: decides which pages to generate and which books each lists.
# ABOUTME: Produces the index, per-author, and per-series views with their orderings.

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from shelfgen.catalog.types import Author, Book, Series
from shelfgen.core.naming import title_sort_key

logger = logging.getLogger(__name__)

INDEX_KEY = "index"


class Ordering(Enum):
    """How a view's book list is ordered."""

    BY_SORT_TITLE = "title"
    BY_SERIES_INDEX = "series_index"


class ViewKind(Enum):
    INDEX = "index"
    AUTHOR = "author"
    CONTAINER_SERIES = "container"
    LEAF_SERIES = "leaf"


@dataclass(frozen=True)
class View:
    """One planned output page."""

    output_key: str
    kind: ViewKind
    books: list[Book]
    ordering: Ordering
    heading: str

    @property
    def ordered(self) -> bool:
        """Whether the page shows the books as a numbered sequence."""
        return self.ordering is Ordering.BY_SERIES_INDEX

    @property
    def filename(self) -> str:
        return f"{self.output_key}.html"


def author_key(author: Author) -> str:
    return f"author--{author.slug}"


def series_key(series: Series) -> str:
    return f"series--{series.slug}"


def sort_by_title(books: Iterable[Book]) -> list[Book]:
    return sorted(books, key=lambda book: title_sort_key(book.title))


def _series_index_key(book: Book) -> tuple[bool, float]:
    # Books without an index go after every indexed book
    index = book.series_index
    return (index is None, index if index is not None else 0.0)


def sort_by_series_index(books: Iterable[Book]) -> list[Book]:
    """Order by series index; ties keep their incoming (title) order."""
    return sorted(books, key=_series_index_key)


def books_by_author(books: Iterable[Book], author: Author) -> list[Book]:
    """Books whose author has this author's name. Books without an author are skipped."""
    return [book for book in books if book.author is not None and book.author.name == author.name]


def books_in_series(books: Iterable[Book], series: Series) -> list[Book]:
    """Books whose series chain contains a node named like this series."""
    return [book for book in books if book.in_series(series.name)]


def plan_index(books: list[Book]) -> View:
    return View(
        output_key=INDEX_KEY,
        kind=ViewKind.INDEX,
        books=sort_by_title(books),
        ordering=Ordering.BY_SORT_TITLE,
        heading="All books",
    )


def plan_author_views(sorted_books: list[Book], authors: Iterable[Author]) -> list[View]:
    return [
        View(
            output_key=author_key(author),
            kind=ViewKind.AUTHOR,
            books=books_by_author(sorted_books, author),
            ordering=Ordering.BY_SORT_TITLE,
            heading=author.name,
        )
        for author in authors
    ]


def plan_series_views(sorted_books: list[Book], series_nodes: Iterable[Series]) -> list[View]:
    """One view per series node.

    Container nodes list every book anywhere below them in title order. Leaf
    nodes list their books by series index.
    """
    views: list[View] = []
    for series in series_nodes:
        members = books_in_series(sorted_books, series)
        if series.leaf:
            views.append(
                View(
                    output_key=series_key(series),
                    kind=ViewKind.LEAF_SERIES,
                    books=sort_by_series_index(members),
                    ordering=Ordering.BY_SERIES_INDEX,
                    heading=series.name,
                )
            )
        else:
            views.append(
                View(
                    output_key=series_key(series),
                    kind=ViewKind.CONTAINER_SERIES,
                    books=members,
                    ordering=Ordering.BY_SORT_TITLE,
                    heading=series.name,
                )
            )
    return views


def _resolve_duplicate_keys(phases: list[list[View]]) -> list[View]:
    """Give each output key to a single view.

    Within one phase the first view planned keeps a key. Across phases the
    later phase wins, so a leaf series page replaces a container page whose
    name slugifies the same way.
    """
    kept: dict[str, View] = {}
    for phase in phases:
        claimed: set[str] = set()
        for view in phase:
            previous = kept.get(view.output_key)
            if view.output_key in claimed:
                logger.warning(
                    "Output %s is claimed by %r and %r; keeping %r",
                    view.filename, previous.heading, view.heading, previous.heading,
                )
                continue
            if previous is not None:
                logger.warning(
                    "Output %s is claimed by %r and %r; keeping %r",
                    view.filename, previous.heading, view.heading, view.heading,
                )
            kept[view.output_key] = view
            claimed.add(view.output_key)
    return list(kept.values())


def plan_views(
    books: list[Book],
    authors: Iterable[Author],
    series_nodes: Iterable[Series],
) -> list[View]:
    """Plan every page of the site.

    Returns the index view first, then author views, container series views
    and leaf series views. Each output key appears once: inside one group the
    first view keeps it, and a later group (leaf series after container
    series) takes it over from an earlier one.
    """
    index = plan_index(books)
    nodes = list(series_nodes)
    return _resolve_duplicate_keys([
        [index],
        plan_author_views(index.books, authors),
        plan_series_views(index.books, [node for node in nodes if not node.leaf]),
        plan_series_views(index.books, [node for node in nodes if node.leaf]),
    ])
