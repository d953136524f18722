"""Ensure project root is on sys.path for test imports."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from collect_args import Args  # noqa: E402


@pytest.fixture
def foo_bar() -> Args:
    return Args(["foo", "bar"])


@pytest.fixture
def make_args():
    """Build a snapshot from positional tokens."""

    def _make(*tokens: str) -> Args:
        return Args(list(tokens))

    return _make
