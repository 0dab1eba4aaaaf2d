"""Shared test fixtures for proximity-sort."""

from __future__ import annotations

import io

import pytest

from proximity_sort.utils.config import LoggingConfig, ProximitySortConfig


@pytest.fixture
def sample_paths():
    """Candidates around bar/main.txt, in input order."""
    return ["test.txt", "bar/test.txt", "bar/main.txt", "misc/test.txt"]


@pytest.fixture
def quiet_config():
    """Default configuration with console logging disabled."""
    return ProximitySortConfig(logging=LoggingConfig(level="WARNING", file="", console=False))


@pytest.fixture
def make_stdin():
    """Build a binary stdin stream from records joined by a delimiter."""

    def _make(records, delimiter=b"\n"):
        return io.BytesIO(b"".join(r + delimiter for r in records))

    return _make
