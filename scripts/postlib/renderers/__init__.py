"""
Pluggable renderers.

The compiler and job runner only see the two abstract interfaces, so tests
can swap in fakes and never start a browser.
"""
from postlib.renderers.base import MarkupRenderer, PageRenderer, RenderError
from postlib.renderers.markdown import MarkdownRenderer
from postlib.renderers.pdf import ChromiumPdfRenderer

__all__ = [
    "MarkupRenderer",
    "PageRenderer",
    "RenderError",
    "MarkdownRenderer",
    "ChromiumPdfRenderer",
]
