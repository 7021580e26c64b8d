#!/usr/bin/env python3
"""
Build script for markdown-post-pipeline.

Compiles markdown posts with YAML front matter into single self-contained
HTML files, with images and styles inlined, and optionally renders each
one to PDF.

Usage:
    python scripts/build.py                     Build every post in content/
    python scripts/build.py hello.md            Build content/hello.md
    python scripts/build.py --all --pdf         Build all, plus PDFs

Requires: PyYAML, markdown-it-py
Optional: playwright + chromium (PDF)
"""

import os
import sys

# Ensure postlib is importable from the scripts/ directory
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from postlib.cli import main


if __name__ == "__main__":
    sys.exit(main())
