"""
Command-line entry point.

Usage:
    postbuild                      Build every post in content/
    postbuild hello.md             Build content/hello.md
    postbuild --all --pdf          Build every post, then a PDF of each
    postbuild --root site/ -v      Use site/ as the project root
"""

import os
import sys
import argparse
import traceback

from postlib.config import BuildConfig, ConfigError
from postlib.frontmatter import FrontMatterError
from postlib.renderers.base import RenderError
from postlib.runner import JobRunner


ERROR_LOG = "build_error.log"


def build_parser():
    parser = argparse.ArgumentParser(
        description="Compile markdown posts into self-contained HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s                        Build every post in content/
  %(prog)s hello.md about.md      Build selected posts
  %(prog)s --all --pdf            Build every post and a PDF of each
        """,
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Post filenames, relative to the content directory, or absolute paths",
    )

    fmt = parser.add_argument_group("output")
    fmt.add_argument("--all", action="store_true", help="Build every post in the content directory")
    fmt.add_argument("--pdf", action="store_true", help="Also render each post to PDF (requires playwright)")

    opts = parser.add_argument_group("options")
    opts.add_argument("--root", default=None, help="Project root (default: current directory)")
    opts.add_argument("--output-dir", help="Override output directory")
    opts.add_argument("--verbose", "-v", action="store_true")
    return parser


def cmd_build(args):
    """Run one build. Returns the process exit code."""
    root = args.root or os.getcwd()
    config = BuildConfig.load(root, overrides={"output_dir": args.output_dir})

    if args.verbose:
        config.summary()

    runner = JobRunner(config, verbose=args.verbose)
    runner.run(args.files, build_all=args.all, pdf=args.pdf)
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        return cmd_build(args)
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 1
    except (ConfigError, FrontMatterError, RenderError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        log_dir = args.root if args.root and os.path.isdir(args.root) else os.getcwd()
        log_path = os.path.join(log_dir, ERROR_LOG)
        with open(log_path, "w") as f:
            traceback.print_exc(file=f)
        print(f"\nUnexpected error: {e}", file=sys.stderr)
        print(f"Full traceback written to {log_path}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
