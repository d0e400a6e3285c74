# ABOUTME: Rendering package for shelfgen pages.
# ABOUTME: Exports the page context, the Renderer type, and the Jinja2 PageRenderer.

from shelfgen.render.context import PageContext, Renderer
from shelfgen.render.renderer import PageRenderer

__all__ = [
    "PageContext",
    "PageRenderer",
    "Renderer",
]
