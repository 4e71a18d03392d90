"""pytest integration. Enable it from a conftest.py:

pytest_plugins = ["stubble.pytest_plugin"]
"""
from typing import Iterator

import pytest

from .registry import Registry, initialize


@pytest.fixture
def doubles() -> Iterator[Registry]:
    """A Registry scoped to one test; its doubles are discarded at teardown."""
    registry = initialize()
    try:
        yield registry
    finally:
        registry.close()
