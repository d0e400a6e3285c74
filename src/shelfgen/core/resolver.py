# ABOUTME: Entity resolution from raw catalog rows into author/series registries.
# ABOUTME: Expands dotted series names into hierarchy nodes and reduces link tables per book.

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TypeVar

from shelfgen.catalog.types import Author, Series
from shelfgen.core.naming import make_slug
from shelfgen.db.mapping import AuthorRow, LinkRow, SeriesRow

logger = logging.getLogger(__name__)

SERIES_DELIMITER = "."

T = TypeVar("T")


@dataclass
class ResolvedCatalog:
    """Registries and per-book association maps built from the catalog rows.

    The single-valued link maps are last-writer-wins reductions of the
    multi-valued ones: a book with several author (or series) link rows keeps
    only the association from the last row read. A link that points at a
    missing author or series id resolves to None.
    """

    authors: dict[int, Author] = field(default_factory=dict)
    series_chains: dict[int, list[str]] = field(default_factory=dict)
    series_nodes: dict[str, Series] = field(default_factory=dict)
    author_links_all: dict[int, list[Author | None]] = field(default_factory=dict)
    series_links_all: dict[int, list[list[str] | None]] = field(default_factory=dict)
    author_links: dict[int, Author | None] = field(default_factory=dict)
    series_links: dict[int, list[str] | None] = field(default_factory=dict)


def split_series_name(name: str) -> list[str]:
    """Split a catalog series name into its hierarchy segments."""
    return name.split(SERIES_DELIMITER)


def build_authors(rows: Iterable[AuthorRow]) -> dict[int, Author]:
    return {row.id: Author(id=row.id, name=row.name, slug=make_slug(row.name)) for row in rows}


def build_series_nodes(
    rows: Iterable[SeriesRow],
) -> tuple[dict[int, list[str]], dict[str, Series]]:
    """Expand every series row into a chain of segment nodes.

    Segment names are global keys. When the same segment appears in several
    rows, the node from the row read last replaces the earlier one, parent
    and leaf flag included.

    Returns:
        (series_chains, series_nodes): row id -> segment names, and
        segment name -> node.
    """
    chains: dict[int, list[str]] = {}
    nodes: dict[str, Series] = {}

    for row in rows:
        chain = split_series_name(row.name)
        chains[row.id] = chain
        last = len(chain) - 1
        for i, segment in enumerate(chain):
            node = Series(
                name=segment,
                parent=chain[i - 1] if i > 0 else None,
                slug=make_slug(segment),
                leaf=i == last,
            )
            previous = nodes.get(segment)
            if previous is not None and (
                previous.parent != node.parent or previous.leaf != node.leaf
            ):
                logger.debug(
                    "Series segment %r redefined by %r (parent %r -> %r, leaf %s -> %s)",
                    segment, row.name, previous.parent, node.parent, previous.leaf, node.leaf,
                )
            nodes[segment] = node

    return chains, nodes


def collect_links(
    rows: Iterable[LinkRow], lookup: dict[int, T]
) -> dict[int, list[T | None]]:
    """Group link rows by book, resolving each target through lookup.

    Rows are kept in read order. A target id missing from lookup is kept as
    None so it still takes part in the last-writer-wins reduction.
    """
    links: dict[int, list[T | None]] = defaultdict(list)
    for row in rows:
        links[row.book].append(lookup.get(row.target))
    return dict(links)


def last_wins(links: dict[int, list[T | None]]) -> dict[int, T | None]:
    """Reduce multi-valued associations to the last one read per book."""
    return {book: values[-1] for book, values in links.items() if values}


def resolve_entities(
    authors: Iterable[AuthorRow],
    series: Iterable[SeriesRow],
    author_links: Iterable[LinkRow],
    series_links: Iterable[LinkRow],
) -> ResolvedCatalog:
    """Build author and series registries and per-book associations.

    Dangling foreign keys never raise; they resolve to None.
    """
    resolved = ResolvedCatalog()
    resolved.authors = build_authors(authors)
    resolved.series_chains, resolved.series_nodes = build_series_nodes(series)

    resolved.author_links_all = collect_links(author_links, resolved.authors)
    resolved.series_links_all = collect_links(series_links, resolved.series_chains)
    resolved.author_links = last_wins(resolved.author_links_all)
    resolved.series_links = last_wins(resolved.series_links_all)

    multi_author = sum(1 for values in resolved.author_links_all.values() if len(values) > 1)
    if multi_author:
        logger.info("%d book(s) have several authors; keeping the last link", multi_author)

    return resolved
