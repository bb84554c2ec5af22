"""Project configuration loading.

Reads the optional ``[tool.env-validator]`` table from a project's
``pyproject.toml``::

    [tool.env-validator]
    scan-roots = ["src/main/resources", "config"]
    ignore-variables = ["OPTIONAL_VAR"]
    ignore-defaults = true
    exclude = ["generated/"]

Values passed explicitly (e.g. from the command line) override the file.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Optional

from env_validator.core.errors import ConfigError
from env_validator.core.validator import ValidationConfig

logger = logging.getLogger(__name__)

TOOL_TABLE = "env-validator"

# Candidate roots, in scan order, used when nothing is configured
DEFAULT_SCAN_ROOTS: list[str] = ["src", "config"]


def read_tool_table(project_dir: Path) -> dict[str, Any]:
    """Return the ``[tool.env-validator]`` table, or an empty dict."""
    pyproject_path = project_dir / "pyproject.toml"
    if not pyproject_path.is_file():
        return {}

    try:
        content = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {pyproject_path}: {e}") from e

    table = content.get("tool", {}).get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TOOL_TABLE}] in {pyproject_path} must be a table")
    return table


def _string_list(table: dict[str, Any], key: str) -> Optional[list[str]]:
    if key not in table:
        return None
    value = table[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"[tool.{TOOL_TABLE}] {key} must be a list of strings")
    return value


def default_scan_roots(project_dir: Path) -> list[Path]:
    """Existing conventional roots under ``project_dir``, else the project itself."""
    chosen = [project_dir / c for c in DEFAULT_SCAN_ROOTS if (project_dir / c).is_dir()]
    return chosen or [project_dir]


def resolve_scan_roots(project_dir: Path, roots: list[str]) -> list[Path]:
    """Resolve configured roots against ``project_dir`` and check they exist."""
    resolved: list[Path] = []
    for root in roots:
        path = Path(root)
        if not path.is_absolute():
            path = project_dir / path
        if not path.exists():
            raise ConfigError(f"Scan root does not exist: {root}")
        if path not in resolved:
            resolved.append(path)
    return resolved


def load_config(
    project_dir: Path,
    scan_roots: Optional[list[str]] = None,
    ignore_names: Optional[list[str]] = None,
    ignore_defaulted_vars: Optional[bool] = None,
    exclude: Optional[list[str]] = None,
) -> ValidationConfig:
    """
    Build the run configuration for ``project_dir``.

    Args:
        project_dir: Project root; relative scan roots resolve against it
        scan_roots: Overrides ``scan-roots``
        ignore_names: Overrides ``ignore-variables``
        ignore_defaulted_vars: Overrides ``ignore-defaults``
        exclude: Overrides ``exclude``

    Raises:
        ConfigError: if the project dir, the file or a configured root is invalid
    """
    if not project_dir.is_dir():
        raise ConfigError(f"Project directory does not exist: {project_dir}")

    table = read_tool_table(project_dir)

    if scan_roots is None:
        scan_roots = _string_list(table, "scan-roots")
    if ignore_names is None:
        ignore_names = _string_list(table, "ignore-variables") or []
    if exclude is None:
        exclude = _string_list(table, "exclude") or []
    if ignore_defaulted_vars is None:
        ignore_defaulted_vars = table.get("ignore-defaults", False)
        if not isinstance(ignore_defaulted_vars, bool):
            raise ConfigError(f"[tool.{TOOL_TABLE}] ignore-defaults must be a boolean")

    if scan_roots:
        roots = resolve_scan_roots(project_dir, scan_roots)
    else:
        roots = default_scan_roots(project_dir)
    logger.debug(f"Scan roots: {', '.join(str(r) for r in roots)}")

    return ValidationConfig(
        scan_roots=tuple(roots),
        ignore_names=frozenset(ignore_names),
        ignore_defaulted_vars=ignore_defaulted_vars,
        exclude=tuple(exclude),
    )
