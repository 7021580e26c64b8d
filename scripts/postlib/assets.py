"""
Local asset inlining.

Turns image references into base64 data URIs so the compiled HTML has no
sibling files. Remote URLs and existing data URIs are never touched, and a
local path that doesn't exist on disk is left as written.
"""

import base64
import os
import re
import sys


MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".avif": "image/avif",
}

REMOTE_PREFIXES = ("http://", "https://", "//")
INLINE_PREFIX = "data:"

# <img ... src="...">, either quote style
IMG_SRC_RE = re.compile(r"(<img\s[^>]*src=[\"'])([^\"']+)([\"'][^>]*>)", re.IGNORECASE)


def classify_reference(ref):
    """Return "remote", "inline", or "local" for an asset reference."""
    lowered = ref.strip().lower()
    if lowered.startswith(INLINE_PREFIX):
        return "inline"
    if lowered.startswith(REMOTE_PREFIXES):
        return "remote"
    return "local"


def resolve_asset_path(ref, base_dir):
    """
    Resolve a local reference relative to base_dir.

    Returns: absolute path if it names an existing file, else None.
    Remote and already-inlined references always return None.
    """
    if not ref or classify_reference(ref) != "local":
        return None
    path = os.path.abspath(os.path.join(base_dir, ref))
    if os.path.isfile(path):
        return path
    return None


def to_data_uri(file_path):
    """
    Encode a file as a data URI.

    Returns None (after a warning) for extensions outside MIME_TYPES.
    A file that can't be read raises OSError.
    """
    ext = os.path.splitext(file_path)[1].lower()
    mime = MIME_TYPES.get(ext)
    if not mime:
        print(f"  Warning: Unsupported image type: {ext or '(none)'} ({file_path})", file=sys.stderr)
        return None

    with open(file_path, "rb") as f:
        data = f.read()
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def inline_asset(ref, base_dir):
    """Data URI for a local, resolvable, supported reference; otherwise None."""
    path = resolve_asset_path(ref, base_dir)
    if not path:
        return None
    return to_data_uri(path)


def inline_images(html, base_dir, skip=()):
    """
    Replace local <img> src values in html with data URIs.

    References in skip are left as written without another attempt.

    Returns: (new_html, number_of_images_inlined)
    """
    count = 0

    def _replace(match):
        nonlocal count
        if match.group(2) in skip:
            return match.group(0)
        data_uri = inline_asset(match.group(2), base_dir)
        if not data_uri:
            return match.group(0)
        count += 1
        return f"{match.group(1)}{data_uri}{match.group(3)}"

    return IMG_SRC_RE.sub(_replace, html), count
