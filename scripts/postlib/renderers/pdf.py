"""
PDF renderer.

Pipeline:
    1. Headless Chromium (Playwright) opens the compiled HTML file
    2. Print overrides are injected (smaller type, inner padding)
    3. The page is printed with backgrounds and zero page margins
"""

from pathlib import Path

from postlib.renderers.base import PageRenderer, RenderError


ZERO_MARGIN = {"top": "0", "right": "0", "bottom": "0", "left": "0"}


class ChromiumPdfRenderer(PageRenderer):

    def __init__(self, page_format="Letter", style_overrides="", wait_until="networkidle", verbose=False):
        super().__init__(verbose=verbose)
        self.page_format = page_format
        self.style_overrides = style_overrides
        self.wait_until = wait_until

    @classmethod
    def from_config(cls, config, verbose=False):
        pdf = config.pdf
        return cls(
            page_format=pdf.get("format"),
            style_overrides=pdf.get("style_overrides"),
            wait_until=pdf.get("wait_until"),
            verbose=verbose,
        )

    def rasterize(self, html_path, pdf_path):
        try:
            from playwright.sync_api import Error as PlaywrightError
            from playwright.sync_api import sync_playwright
        except ImportError:
            raise RenderError(
                "playwright is required for PDF output. "
                "Install with: pip install playwright && playwright install chromium"
            )

        self.log(f"  Rendering {html_path} ({self.page_format})")

        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=True)
                try:
                    page = browser.new_page()
                    page.goto(Path(html_path).resolve().as_uri(), wait_until=self.wait_until)
                    if self.style_overrides:
                        page.add_style_tag(content=self.style_overrides)
                    page.pdf(
                        path=str(pdf_path),
                        format=self.page_format,
                        print_background=True,
                        margin=ZERO_MARGIN,
                    )
                finally:
                    browser.close()
        except PlaywrightError as e:
            raise RenderError(f"PDF rendering failed for {html_path}: {e}")
