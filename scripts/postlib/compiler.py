"""
Document compiler.

Pipeline for one post:
    1. Split front matter from the markdown body
    2. Render the body to HTML
    3. Inline the cover image if it is a local file
    4. Fill in a reading-time estimate when the post has none
    5. Substitute everything into the template
    6. Inline local <img> sources in the result
    7. Write <output_dir>/<slug>.html
"""

import math
import os

from postlib.assets import inline_asset, inline_images
from postlib.frontmatter import load_document
from postlib.renderers.markdown import MarkdownRenderer
from postlib.template import render_template


WORDS_PER_MINUTE = 230

# Front matter fields copied into the template context as text
CONTEXT_FIELDS = [
    "subtitle",
    "author",
    "date",
    "category",
    "og_image",
    "footer",
]


def reading_time(text, words_per_minute=WORDS_PER_MINUTE):
    """Estimate reading time as "<n> min read", never less than one minute."""
    words = len(text.split())
    minutes = max(1, math.ceil(words / words_per_minute))
    return f"{minutes} min read"


class DocumentCompiler:
    """
    Compiles posts into self-contained HTML files.

    The template and stylesheet are read once, when the compiler is
    created, and shared by every post it compiles.

    Usage:
        compiler = DocumentCompiler(config)
        out_path = compiler.compile("content/hello.md")
    """

    extension = ".html"

    def __init__(self, config, markup_renderer=None, verbose=False):
        self.config = config
        self.verbose = verbose
        self.markup_renderer = markup_renderer or MarkdownRenderer(config.markdown_rules)

        with open(config.template_path, "r", encoding="utf-8") as f:
            self.template = f.read()
        with open(config.styles_path, "r", encoding="utf-8") as f:
            self.styles = f.read()

        self.log(f"  Template: {config.template_path}")
        self.log(f"  Styles:   {config.styles_path}")

    # ── Logging ────────────────────────────────────────────

    def log(self, msg):
        if self.verbose:
            print(msg)

    # ── Pipeline steps ─────────────────────────────────────

    def resolve_cover(self, document):
        """Cover image as a data URI when it is a local file, else as written."""
        cover = document.value("cover_image")
        if not cover:
            return ""
        data_uri = inline_asset(cover, document.source_dir)
        if data_uri:
            self.log(f"  Inlined cover image {cover}")
            return data_uri
        return cover

    def build_context(self, document, content):
        """Flat template context for one post."""
        context = {field: document.value(field) for field in CONTEXT_FIELDS}
        context["title"] = document.title
        context["cover_image"] = self.resolve_cover(document)
        context["read_time"] = document.value("read_time") or reading_time(
            document.body, self.config.words_per_minute
        )
        context["styles"] = self.styles
        context["content"] = content
        return context

    def slug_for(self, document):
        slug = document.value("slug")
        if slug:
            return slug
        return os.path.splitext(os.path.basename(document.source_path))[0]

    def output_file(self, document):
        return os.path.join(self.config.output_path, f"{self.slug_for(document)}{self.extension}")

    # ── Compile ────────────────────────────────────────────

    def render(self, document):
        """Compiled HTML text for a parsed post."""
        content = self.markup_renderer.render(document.body)
        context = self.build_context(document, content)
        output = render_template(self.template, context)

        # A cover that failed to inline is not retried
        cover = document.value("cover_image")
        skip = {cover} if cover and context["cover_image"] == cover else set()

        output, count = inline_images(output, document.source_dir, skip=skip)
        if count:
            print(f"  Inlined {count} image(s)")
        return output

    def compile(self, source_path):
        """
        Compile one post and write it to the output directory.

        Returns the path of the written HTML file. A missing or unreadable
        source raises OSError.
        """
        document = load_document(source_path)
        output = self.render(document)

        out_path = self.output_file(document)
        os.makedirs(os.path.dirname(out_path), exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(output)

        size = os.path.getsize(out_path) / 1024
        rel_path = os.path.relpath(out_path, self.config.root)
        print(f"  {os.path.basename(source_path)} -> {rel_path} ({size:.0f} KB)")
        return out_path
