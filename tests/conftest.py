"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from graphwalk import Graph
from graphwalk.observability import reset_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _isolate_logging() -> Iterator[None]:
    """Hand the graphwalk logger back to its defaults after every test."""
    yield
    reset_logging()


@pytest.fixture
def small_tree_pairs() -> list[int]:
    """Edge list 1-2, 1-3, 3-4 used by the traversal order tests."""
    return [1, 2, 1, 3, 3, 4]


@pytest.fixture
def triangle() -> Graph:
    """Undirected triangle 1-2-3."""
    return Graph(False, [1, 2, 2, 3, 1, 3])


@pytest.fixture
def two_components() -> Graph:
    """Undirected graph with components {1, 2, 3, 4} and {5, 6}."""
    return Graph(False, [1, 2, 1, 3, 3, 4, 5, 6])


@pytest.fixture(params=["iterative", "recursive"])
def dfs_strategy(request: pytest.FixtureRequest) -> str:
    """Both depth-first strategies."""
    return str(request.param)
