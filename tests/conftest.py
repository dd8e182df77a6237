"""Shared fixtures for netrcparse tests."""

import os
from pathlib import Path
from typing import Callable
import pytest


@pytest.fixture
def netrc_write(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a test .netrc with the given mode."""

    def _write(content: str, mode: int = 0o600, name: str = "netrc") -> Path:
        path: Path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        os.chmod(path, mode)
        return path

    return _write
