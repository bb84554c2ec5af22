"""Shared pytest fixtures for env-validator tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_file(tmp_path):
    """Create a file under tmp_path, making parent directories as needed."""

    def _write(relative: str, content: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
