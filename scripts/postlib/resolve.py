"""
Source file collection.

Resolves command-line targets against the content directory, or scans it
for posts when no targets are given.
"""

import os


SOURCE_EXTENSION = ".md"


def scan_content_dir(content_dir):
    """
    Markdown files directly inside content_dir, in directory-listing order.

    A missing directory is treated as empty.
    """
    if not os.path.isdir(content_dir):
        return []
    return [
        os.path.join(content_dir, entry)
        for entry in os.listdir(content_dir)
        if entry.endswith(SOURCE_EXTENSION)
        and os.path.isfile(os.path.join(content_dir, entry))
    ]


def collect_sources(content_dir, targets=None, build_all=False):
    """
    Decide which posts to build.

    Accepts:
        - No targets, or build_all:  every post in content_dir
        - Relative names:            hello.md → content_dir/hello.md
        - Absolute paths:            used as-is

    Explicit targets are not checked for existence here; a missing file
    fails when it is compiled.
    """
    if build_all or not targets:
        return scan_content_dir(content_dir)
    return [
        target if os.path.isabs(target) else os.path.join(content_dir, target)
        for target in targets
    ]
