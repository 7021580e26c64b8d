"""Shared fixtures for the postlib test suite."""

import base64
import os

# Smallest valid PNG: one transparent pixel
PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

TEMPLATE = """<title>{{title}}</title>
{{#if subtitle}}<h2 class="subtitle">{{subtitle}}</h2>{{/if}}
{{#if author}}<span class="author">{{author}}</span>{{/if}}
{{#if date}}<time>{{date}}</time>{{/if}}
{{#if cover_image}}<img class="cover" src="{{cover_image}}">{{/if}}
<span class="read-time">{{read_time}}</span>
<style>{{styles}}</style>
<main>{{content}}</main>
{{#if footer}}<footer>{{footer}}</footer>{{/if}}
"""

STYLES = "body { color: #123456; }"


def write_file(path, content, mode="w"):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    if "b" in mode:
        with open(path, mode) as f:
            f.write(content)
    else:
        with open(path, mode, encoding="utf-8") as f:
            f.write(content)
    return path


def make_project(root, posts=None, template=TEMPLATE, styles=STYLES):
    """
    Lay out a minimal project under root: template, stylesheet, and
    content/<name> for each entry in posts.
    """
    write_file(os.path.join(root, "template.html"), template)
    write_file(os.path.join(root, "styles.css"), styles)
    for name, text in (posts or {}).items():
        write_file(os.path.join(root, "content", name), text)
    return root
