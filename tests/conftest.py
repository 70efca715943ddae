"""Shared fixtures for seasonspin tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_seasonspin_dir(temp_project: Path) -> Path:
    """Create a temporary .seasonspin directory."""
    seasonspin_dir = temp_project / ".seasonspin"
    seasonspin_dir.mkdir()
    return seasonspin_dir
