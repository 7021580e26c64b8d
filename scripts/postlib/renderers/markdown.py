"""
Markdown renderer.

markdown-it-py with the CommonMark preset, so lists that follow a
paragraph directly and two-space nested lists render the way CommonMark
says they should. Extra rules ("table", "strikethrough" by default) are
enabled on top; build.yaml can change the list.
"""

from markdown_it import MarkdownIt

from postlib.renderers.base import MarkupRenderer, RenderError


DEFAULT_RULES = ["table", "strikethrough"]


class MarkdownRenderer(MarkupRenderer):

    def __init__(self, rules=None):
        self.rules = list(DEFAULT_RULES if rules is None else rules)
        self.md = MarkdownIt("commonmark")
        if self.rules:
            try:
                self.md.enable(self.rules)
            except ValueError as e:
                raise RenderError(f"Unknown markdown rule in {self.rules}: {e}")

    def render(self, text):
        return self.md.render(text)
