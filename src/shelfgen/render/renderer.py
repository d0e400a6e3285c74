# ABOUTME: Jinja2-backed page renderer for the generated site.
# ABOUTME: Loads the bundled templates and renders a PageContext to an HTML string.

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from shelfgen.render.context import PageContext

TEMPLATES_DIR = Path(__file__).parent / "templates"
PAGE_TEMPLATE = "page.html.j2"


def format_series_index(value: float | None) -> str:
    """Render 1.0 as "1" and 2.5 as "2.5"; None as an empty string."""
    if value is None:
        return ""
    return f"{value:g}"


class PageRenderer:
    """Renders pages from the bundled (or a custom) template directory.

    Instances are callable, so one can be passed wherever a Renderer is
    expected.
    """

    def __init__(self, template_dir: Path | None = None) -> None:
        self._env = Environment(
            loader=FileSystemLoader(template_dir or TEMPLATES_DIR),
            autoescape=select_autoescape(["html", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["series_index"] = format_series_index
        self._template = self._env.get_template(PAGE_TEMPLATE)

    def render(self, context: PageContext) -> str:
        return self._template.render(
            books=context.books,
            authors=context.authors,
            series=context.series_tree,
            ordered=context.ordered,
            heading=context.heading,
        )

    def __call__(self, context: PageContext) -> str:
        return self.render(context)
