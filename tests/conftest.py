"""Pytest configuration - shared fixtures for the identicon pipeline tests."""
from __future__ import annotations

import pytest

from identicon.models.identicon import RawHash

BANANA_HEX = (114, 179, 2, 191, 41, 122, 34, 138, 117, 115, 1, 35, 239, 239, 124, 65)


@pytest.fixture
def banana_hex():
    """MD5 of "banana" as 16 ints."""
    return BANANA_HEX


@pytest.fixture
def banana_raw():
    return RawHash(hex=BANANA_HEX)


@pytest.fixture
def sample_inputs():
    """A spread of inputs: empty, ascii, unicode, long, path-like."""
    return ["", "banana", "Banana", "alice@example.com", "日本語", "x" * 1000, "../etc/passwd"]
