"""Shared fixtures for ConfigStore tests."""

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_conf(tmp_path: Path) -> Callable[[str], Path]:
    """Write text to a fresh override file and return its path."""

    def _write(text: str, name: str = "app.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
