"""
Build configuration: load, validate, and provide defaults for build.yaml.
"""

import os
import sys

try:
    import yaml
except ImportError:
    print("Error: PyYAML is required. Install with: pip install pyyaml")
    sys.exit(1)


CONFIG_FILENAME = "build.yaml"

# Defaults applied if missing
DEFAULTS = {
    "content_dir": "content",
    "output_dir": "dist",
    "template": "template.html",
    "styles": "styles.css",
    "words_per_minute": 230,
    "markdown_rules": ["table", "strikethrough"],
    "pdf": {},
}

# Defaults within the pdf sub-config
PDF_DEFAULTS = {
    "format": "Letter",
    # Scale down text and add inner padding; background stays edge-to-edge
    "style_overrides": "html { font-size: 90%; } .blog-wrapper { padding: 1in; }",
    "wait_until": "networkidle",
}


class ConfigError(Exception):
    """Raised when build.yaml is invalid."""
    pass


class BuildConfig:
    """
    Loaded, validated build configuration.

    Every path is resolved against the project root, so components never
    look at module-level directory constants.

    Usage:
        config = BuildConfig.load(project_root)
        config.content_path      # "/abs/root/content"
        config.pdf["format"]     # "Letter"
        config.get("footer")     # None if not set
    """

    def __init__(self, data, root):
        self._data = data
        self.root = root

    @classmethod
    def load(cls, root, overrides=None):
        """
        Load build.yaml from a project root, if present, and apply defaults.

        Args:
            root:      Project root directory
            overrides: Optional dict of keys that win over the file
                       (e.g. an --output-dir from the command line)
        """
        root = os.path.abspath(root)
        yaml_path = os.path.join(root, CONFIG_FILENAME)

        data = {}
        if os.path.exists(yaml_path):
            with open(yaml_path, encoding="utf-8") as f:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ConfigError(f"{CONFIG_FILENAME} is not valid YAML: {e}")
            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ConfigError(
                    f"{CONFIG_FILENAME} must be a YAML mapping, got {type(data).__name__}"
                )

        for key, value in (overrides or {}).items():
            if value is not None:
                data[key] = value

        # Apply top-level defaults
        for key, default in DEFAULTS.items():
            data.setdefault(key, default if not isinstance(default, (list, dict)) else type(default)(default))

        if not isinstance(data["pdf"], dict):
            raise ConfigError("'pdf' must be a mapping")
        for key, default in PDF_DEFAULTS.items():
            data["pdf"].setdefault(key, default)

        wpm = data["words_per_minute"]
        if isinstance(wpm, bool) or not isinstance(wpm, int) or wpm <= 0:
            raise ConfigError(f"words_per_minute must be a positive integer, got {wpm!r}")

        if not isinstance(data["markdown_rules"], list):
            raise ConfigError("markdown_rules must be a list")

        return cls(data, root)

    # ── Attribute access ───────────────────────────────────

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(f"BuildConfig has no field '{name}'")

    def get(self, key, default=None):
        return self._data.get(key, default)

    def __getitem__(self, key):
        return self._data[key]

    def __contains__(self, key):
        return key in self._data

    # ── Resolved paths ─────────────────────────────────────

    def resolve_path(self, path):
        """Resolve a configured path against the project root."""
        return os.path.normpath(os.path.join(self.root, path))

    @property
    def content_path(self):
        return self.resolve_path(self.content_dir)

    @property
    def output_path(self):
        return self.resolve_path(self.output_dir)

    @property
    def template_path(self):
        return self.resolve_path(self.template)

    @property
    def styles_path(self):
        return self.resolve_path(self.styles)

    def summary(self):
        """Print a short config summary."""
        print(f"\n  Content:  {self.content_path}")
        print(f"  Output:   {self.output_path}")
        print(f"  Template: {self.template_path}")
        print(f"  Styles:   {self.styles_path}")
