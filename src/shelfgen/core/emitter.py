# ABOUTME: Page emitter: copies covers and writes rendered pages to the output directory.
# ABOUTME: Each phase is a concurrent fan-out that completes or fails as a whole.

import asyncio
import inspect
import logging
import shutil
from collections.abc import Awaitable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from shelfgen.catalog.types import Author, Book, Series
from shelfgen.core.planner import View, ViewKind
from shelfgen.render.context import PageContext, Renderer

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("docs")
COVERS_DIRNAME = "covers"

# Page phases run in this order, after the cover phase
_PAGE_PHASES: tuple[tuple[str, ViewKind], ...] = (
    ("index", ViewKind.INDEX),
    ("author pages", ViewKind.AUTHOR),
    ("container series pages", ViewKind.CONTAINER_SERIES),
    ("leaf series pages", ViewKind.LEAF_SERIES),
)


class EmitError(Exception):
    """Raised when one or more items of an emit phase failed.

    Every item of the phase has finished by the time this is raised;
    ``failures`` lists each failed target with its exception.
    """

    def __init__(self, phase: str, failures: list[tuple[Path, BaseException]]) -> None:
        self.phase = phase
        self.failures = failures
        super().__init__(f"{len(failures)} failure(s) during {phase}")


@dataclass
class EmitResult:
    """Summary of a completed emit run."""

    output_dir: Path
    pages_written: list[Path] = field(default_factory=list)
    covers_copied: int = 0
    covers_skipped: list[Book] = field(default_factory=list)


def cover_target(output_dir: Path, book: Book) -> Path:
    return output_dir / COVERS_DIRNAME / f"{book.id}.jpg"


async def _run_phase(phase: str, jobs: Sequence[tuple[Path, Awaitable[object]]]) -> list[object]:
    """Run every job concurrently and wait for all of them.

    Raises:
        EmitError: If any job raised, after all jobs have finished.
    """
    outcomes = await asyncio.gather(*(job for _, job in jobs), return_exceptions=True)
    failures = [
        (target, outcome)
        for (target, _), outcome in zip(jobs, outcomes)
        if isinstance(outcome, BaseException)
    ]
    if failures:
        for target, exc in failures:
            logger.error("%s: %s failed: %s", phase, target, exc)
        raise EmitError(phase, failures)
    logger.debug("%s: %d item(s) done", phase, len(jobs))
    return list(outcomes)


def _copy_cover_file(source: Path, target: Path, allow_missing: bool) -> bool:
    """Copy one cover on a worker thread. Returns False when a missing cover was skipped."""
    if allow_missing and not source.is_file():
        logger.warning("Cover not found, skipping: %s", source)
        return False
    shutil.copyfile(source, target)
    return True


async def _copy_cover(source: Path, target: Path, allow_missing: bool) -> bool:
    return await asyncio.to_thread(_copy_cover_file, source, target, allow_missing)


async def copy_covers(
    books: Sequence[Book], output_dir: Path, *, allow_missing: bool = False
) -> tuple[int, list[Book]]:
    """Copy every book's cover to <output>/covers/<id>.jpg.

    Returns:
        (number copied, books whose missing cover was skipped).

    Raises:
        EmitError: If any copy failed.
    """
    (output_dir / COVERS_DIRNAME).mkdir(parents=True, exist_ok=True)
    jobs = [
        (
            cover_target(output_dir, book),
            _copy_cover(book.cover_source_path, cover_target(output_dir, book), allow_missing),
        )
        for book in books
    ]
    outcomes = await _run_phase("cover copies", jobs)
    skipped = [book for book, copied in zip(books, outcomes) if not copied]
    return len(books) - len(skipped), skipped


async def render_page(renderer: Renderer, context: PageContext) -> str:
    """Call the renderer, awaiting its result when it is asynchronous."""
    markup = renderer(context)
    if inspect.isawaitable(markup):
        markup = await markup
    return markup


async def _write_view(renderer: Renderer, context: PageContext, target: Path) -> Path:
    markup = await render_page(renderer, context)
    await asyncio.to_thread(target.write_text, markup, encoding="utf-8")
    return target


async def write_pages(
    views: Sequence[View],
    renderer: Renderer,
    output_dir: Path,
    *,
    authors: Sequence[Author],
    series_tree: Sequence[Series],
    phase: str = "pages",
) -> list[Path]:
    """Render and write a group of views concurrently.

    Raises:
        EmitError: If any render or write failed.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    jobs = []
    for view in views:
        target = output_dir / view.filename
        context = PageContext(
            books=view.books,
            authors=authors,
            series_tree=series_tree,
            ordered=view.ordered,
            heading=view.heading,
        )
        jobs.append((target, _write_view(renderer, context, target)))
    return await _run_phase(phase, jobs)


async def emit_site(
    books: Sequence[Book],
    views: Sequence[View],
    renderer: Renderer,
    output_dir: Path,
    *,
    authors: Sequence[Author],
    series_tree: Sequence[Series],
    allow_missing_covers: bool = False,
) -> EmitResult:
    """Copy covers, then write the index, author, and series pages.

    Phases run one after another; the items inside a phase run concurrently.
    A failing phase stops the run before the next phase starts.

    Raises:
        EmitError: From the first phase that had a failure.
    """
    result = EmitResult(output_dir=output_dir)
    result.covers_copied, result.covers_skipped = await copy_covers(
        books, output_dir, allow_missing=allow_missing_covers
    )

    for phase, kind in _PAGE_PHASES:
        group = [view for view in views if view.kind is kind]
        if not group:
            continue
        result.pages_written.extend(
            await write_pages(
                group, renderer, output_dir,
                authors=authors, series_tree=series_tree, phase=phase,
            )
        )

    return result
