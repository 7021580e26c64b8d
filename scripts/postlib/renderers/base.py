"""
Base classes for the external renderers.

    MarkupRenderer:  markdown text → HTML fragment
    PageRenderer:    compiled HTML file → PDF file
"""

import os
from abc import ABC, abstractmethod


class RenderError(Exception):
    """Raised when an external renderer fails."""
    pass


class MarkupRenderer(ABC):
    """Converts a post body to HTML markup."""

    @abstractmethod
    def render(self, text):
        """Return HTML for the given markdown text."""
        ...


class PageRenderer(ABC):
    """
    Rasterizes a compiled HTML file.

    Subclasses implement `rasterize()`; `render()` handles the output path
    and the size report.
    """

    extension = ".pdf"

    def __init__(self, verbose=False):
        self.verbose = verbose

    def log(self, msg):
        if self.verbose:
            print(msg)

    def output_for(self, html_path):
        """Sibling output path with the same base name."""
        return os.path.splitext(html_path)[0] + self.extension

    def render(self, html_path, pdf_path=None):
        """
        Rasterize html_path. Returns the written path.

        Raises RenderError on failure.
        """
        pdf_path = pdf_path or self.output_for(html_path)
        self.rasterize(os.path.abspath(html_path), pdf_path)

        if not os.path.exists(pdf_path):
            raise RenderError(f"{type(self).__name__} produced no output for {html_path}")

        size = os.path.getsize(pdf_path) / 1024
        print(f"  ✓ {os.path.basename(pdf_path)} ({size:.0f} KB)")
        return pdf_path

    @abstractmethod
    def rasterize(self, html_path, pdf_path):
        """Write pdf_path from the HTML file at html_path."""
        ...
