"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_log(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes *data* to a fresh file under *tmp_path*."""
    counter = 0

    def _write(data: bytes, name: str | None = None) -> Path:
        nonlocal counter
        counter += 1
        path = tmp_path / (name or f"sample-{counter}.log")
        path.write_bytes(data)
        return path

    return _write
