"""File filtering for env-validator.

This module provides pathspec-based exclusion of build-output and
hidden paths during traversal.
"""

from env_validator.filters.pathspec_filter import (
    PathspecFilter,
    DEFAULT_IGNORE_PATTERNS,
)

__all__ = [
    "PathspecFilter",
    "DEFAULT_IGNORE_PATTERNS",
]
