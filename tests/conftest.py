"""
Pytest configuration and shared fixtures for all tests.

This module provides:
- minimal_payload: a small valid blog payload loaded from tests/fixtures
- write_payload: writes any payload to a temporary JSON file
- minimal_blog_data: the minimal payload as typed BlogData
"""
import copy
import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def minimal_payload():
    """Return a fresh copy of the minimal valid payload.

    Each test gets its own copy, so tests may mutate it to build broken
    payloads without affecting each other.
    """
    with open(FIXTURES_DIR / "minimal_blog_data.json", "r", encoding="utf-8") as f:
        return copy.deepcopy(json.load(f))


@pytest.fixture
def write_payload(tmp_path):
    """Return a helper that writes a payload to a temporary JSON file.

    Example:
        def test_something(write_payload, minimal_payload):
            path = write_payload(minimal_payload)
            data = load_blog_data(path)
    """
    def _write(payload, name="blog_data.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def minimal_blog_data(minimal_payload):
    """Return the minimal payload as typed BlogData."""
    from content import BlogData

    return BlogData.from_dict(minimal_payload)
