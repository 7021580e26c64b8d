"""
Job runner: collect posts, compile each, optionally rasterize each.

Everything runs sequentially. The first failure propagates and ends the
run; there is no partial-batch recovery.
"""

import os

from postlib.compiler import DocumentCompiler
from postlib.resolve import collect_sources
from postlib.renderers.pdf import ChromiumPdfRenderer


class JobRunner:
    """
    Usage:
        runner = JobRunner(config)
        outputs = runner.run(["hello.md"], pdf=True)
    """

    def __init__(self, config, markup_renderer=None, page_renderer=None, verbose=False):
        self.config = config
        self.markup_renderer = markup_renderer
        self.page_renderer = page_renderer
        self.verbose = verbose

    def collect(self, targets=None, build_all=False):
        return collect_sources(self.config.content_path, targets, build_all)

    def run(self, targets=None, build_all=False, pdf=False):
        """
        Build the selected posts.

        Returns: list of written paths (HTML files, then PDFs). Empty when
        there was nothing to build.
        """
        files = self.collect(targets, build_all)
        if not files:
            rel_dir = os.path.relpath(self.config.content_path, self.config.root)
            print(f"No markdown files found in {rel_dir}/. Add a .md file to get started.")
            return []

        print(f"\nBuilding {len(files)} post(s)...\n")
        compiler = DocumentCompiler(
            self.config,
            markup_renderer=self.markup_renderer,
            verbose=self.verbose,
        )
        html_paths = [compiler.compile(path) for path in files]

        pdf_paths = []
        if pdf:
            print("\nGenerating PDFs...\n")
            renderer = self.page_renderer or ChromiumPdfRenderer.from_config(
                self.config, verbose=self.verbose
            )
            for html_path in html_paths:
                pdf_paths.append(renderer.render(html_path))

        print("\nDone.\n")
        return html_paths + pdf_paths
