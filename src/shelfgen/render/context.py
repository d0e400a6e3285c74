# ABOUTME: The data handed to the render collaborator for one page.
# ABOUTME: Also defines the Renderer callable type the page emitter accepts.

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

from shelfgen.catalog.types import Author, Book, Series


@dataclass(frozen=True)
class PageContext:
    """Everything a page template sees. Renderers must not mutate it."""

    books: Sequence[Book]
    authors: Sequence[Author]
    series_tree: Sequence[Series]
    ordered: bool = False
    heading: str | None = None


# A renderer maps a page context to HTML, either directly or via an awaitable
Renderer = Callable[[PageContext], str | Awaitable[str]]
