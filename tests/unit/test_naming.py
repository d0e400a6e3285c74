# ABOUTME: Unit tests for slug and title sort key helpers.
# ABOUTME: Validates article stripping, case folding, and slug formatting.

import pytest

from shelfgen.core.naming import make_slug, title_sort_key


class TestTitleSortKey:
    """title_sort_key ignores case and one leading article."""

    @pytest.mark.parametrize("title", ["The Hobbit", "hobbit", "A Hobbit", "HOBBIT", "an hobbit"])
    def test_hobbit_variants_share_a_key(self, title: str) -> None:
        assert title_sort_key(title) == "hobbit"

    def test_strips_only_one_article(self) -> None:
        assert title_sort_key("The The") == "the"

    def test_article_must_be_followed_by_space(self) -> None:
        assert title_sort_key("Theory of Everything") == "theory of everything"
        assert title_sort_key("Anathem") == "anathem"

    def test_article_only_at_start(self) -> None:
        assert title_sort_key("Lord of the Rings") == "lord of the rings"

    def test_title_is_not_modified(self) -> None:
        title = "The Hobbit"
        title_sort_key(title)
        assert title == "The Hobbit"


class TestMakeSlug:
    """make_slug produces lowercase, hyphenated file-name slugs."""

    def test_lowercases_and_hyphenates(self) -> None:
        assert make_slug("Jane Doe") == "jane-doe"

    def test_drops_punctuation(self) -> None:
        assert make_slug("H. P. Lovecraft") == "h-p-lovecraft"

    def test_keeps_article(self) -> None:
        assert make_slug("The Hobbit") == "the-hobbit"
