# ABOUTME: Display-name helpers: URL slugs and article-insensitive title sort keys.
# ABOUTME: Shared by the resolver, the book assembler, and the view planner.

import re

from slugify import slugify

# A single leading English article followed by a space
_LEADING_ARTICLE_RE = re.compile(r"^(a|an|the) ", re.IGNORECASE)


def make_slug(text: str) -> str:
    """Lowercase, hyphen-separated slug used in output file names."""
    return slugify(text)


def title_sort_key(title: str) -> str:
    """Comparison key for title ordering.

    Strips one leading "a ", "an " or "the " (any case) and lowercases the
    rest, so "The Hobbit", "A Hobbit" and "hobbit" all sort as "hobbit".
    The stored title is never changed.
    """
    return _LEADING_ARTICLE_RE.sub("", title, count=1).lower()
