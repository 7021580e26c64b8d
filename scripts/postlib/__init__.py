"""
postlib — markdown-to-single-file-HTML post compiler.

Public API:
    from postlib.config import BuildConfig
    from postlib.compiler import DocumentCompiler, reading_time
    from postlib.template import render_template
    from postlib.assets import inline_images, to_data_uri
    from postlib.runner import JobRunner
"""

__version__ = "0.1.0"
