"""
Source documents: split YAML front matter from the markdown body.

A post starts with a `---` line, a YAML mapping, and a closing `---`
(or `...`) line. Everything after the closing line is the body. Files
without a leading `---` have no metadata and the whole text is the body.
"""

import os
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

import yaml


# Front matter fields a post may carry; title is the only required one
FIELDS = [
    "title",
    "subtitle",
    "author",
    "date",
    "category",
    "slug",
    "cover_image",
    "og_image",
    "read_time",
    "footer",
]

DEFAULT_TITLE = "Untitled"

FRONT_MATTER_RE = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)^(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


class FrontMatterError(ValueError):
    """Raised when a post's front matter cannot be parsed."""
    pass


@dataclass(frozen=True)
class Document:
    """One parsed source post."""

    metadata: Mapping = field(default_factory=dict)
    body: str = ""
    source_path: Optional[str] = None

    def __post_init__(self):
        # Read-only copy; later changes to the caller's dict don't leak in
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def source_dir(self):
        """Directory that local asset references resolve against."""
        if self.source_path is None:
            return os.getcwd()
        return os.path.dirname(os.path.abspath(self.source_path))

    def value(self, name):
        """
        Front matter value as text, or "" when absent.

        YAML turns some scalars into dates or numbers; the template only
        deals in strings.
        """
        value = self.metadata.get(name)
        if value is None:
            return ""
        return str(value)

    @property
    def title(self):
        return self.value("title") or DEFAULT_TITLE


def parse_document(text, source_path=None):
    """
    Parse post text into a Document.

    Raises FrontMatterError if the leading block is not a YAML mapping.
    """
    match = FRONT_MATTER_RE.match(text)
    if not match:
        return Document(metadata={}, body=text, source_path=source_path)

    where = source_path or "<string>"
    try:
        metadata = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid front matter in {where}: {e}")

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise FrontMatterError(
            f"Front matter in {where} must be a YAML mapping, got {type(metadata).__name__}"
        )

    return Document(metadata=metadata, body=text[match.end():], source_path=source_path)


def load_document(path):
    """Read and parse a post from disk. Missing or unreadable files raise OSError."""
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return parse_document(text, source_path=path)
