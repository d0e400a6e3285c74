# ABOUTME: In-memory entity types built from a catalog snapshot.
# ABOUTME: Author, Series hierarchy node, and Book are what views and templates consume.

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Author:
    """An author row with its URL slug."""

    id: int
    name: str
    slug: str


@dataclass(eq=False)
class Series:
    """A node of the series hierarchy, keyed by segment name.

    A catalog series named ``"Mythos.Book One"`` becomes two nodes, ``Mythos``
    and ``Book One``, the second pointing at the first through ``parent``.
    Nodes compare by identity: a segment shared by several catalog rows is
    one node. ``children`` stays empty until the hierarchy builder runs.
    """

    name: str
    parent: str | None
    slug: str
    leaf: bool
    children: list["Series"] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent is None


@dataclass(eq=False)
class Book:
    """A book joined with its resolved author and series chain.

    ``series`` is the full chain from root to leaf for the book's series
    link, or empty when the book has none.
    """

    id: int
    title: str
    slug: str
    series_index: float | None
    cover_source_path: Path
    author: Author | None = None
    series: list[Series] = field(default_factory=list)

    @property
    def leaf_series(self) -> Series | None:
        """The last node of the series chain, if any."""
        return self.series[-1] if self.series else None

    def in_series(self, name: str) -> bool:
        """Whether any node of this book's series chain has the given name."""
        return any(node.name == name for node in self.series)
