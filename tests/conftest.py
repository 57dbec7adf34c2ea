"""
Test configuration and fixtures
"""
from typing import Callable, Dict, List

import pytest


def build_items(count: int) -> List[Dict[str, str]]:
    """Build ``count`` simple row records numbered from 1."""
    return [{"id": str(index), "name": f"Item {index}"} for index in range(1, count + 1)]


@pytest.fixture
def make_items() -> Callable[[int], List[Dict[str, str]]]:
    """Provide a factory for numbered row records."""
    return build_items


@pytest.fixture
def items_25() -> List[Dict[str, str]]:
    """Twenty-five rows: three pages of ten with a remainder of five."""
    return build_items(25)
