"""Pathspec-based traversal filtering.

This module uses the pathspec library so build-output and dependency
directories can be excluded with gitignore-style patterns, including
double-star globs and negations supplied by the user.
"""

from pathlib import Path

import pathspec


# Directories that hold generated or third-party files rather than project config
DEFAULT_IGNORE_PATTERNS: list[str] = [
    "build/",
    "target/",
    "out/",
    "bin/",
    "dist/",
    "node_modules/",
    "vendor/",
    "venv/",
    "__pycache__/",
    "*.egg-info/",
]


class PathspecFilter:
    """Path filter for one scan root."""

    def __init__(self, root: Path, extra_patterns: list[str] | None = None):
        """
        Initialize the filter.

        Args:
            root: Scan root; patterns are matched relative to it
            extra_patterns: User supplied patterns appended after the defaults
        """
        self.root = root
        self._patterns = DEFAULT_IGNORE_PATTERNS + list(extra_patterns or [])
        self._spec = pathspec.PathSpec.from_lines("gitwildmatch", self._patterns)

    def should_ignore(self, path: Path, is_dir: bool = False) -> bool:
        """
        Check if a path should be skipped.

        Hidden entries (leading dot) are always skipped. Directories are
        matched with a trailing slash so directory-only patterns apply.
        """
        if path.name.startswith("."):
            return True

        try:
            relative = path.relative_to(self.root)
        except ValueError:
            return False

        relative_str = relative.as_posix()
        if relative_str == ".":
            return False
        if is_dir:
            relative_str += "/"
        return self._spec.match_file(relative_str)

    def get_patterns(self) -> list[str]:
        """Get the active ignore patterns."""
        return list(self._patterns)
