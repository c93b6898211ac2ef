"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import logging

import matplotlib
import pytest

from graph import Graph

matplotlib.use("Agg")

EXAMPLE_EDGES = [
    "A-B:7",
    "B-C:3",
    "A-C:15",
    "B-D:2",
    "C-D:4",
]


@pytest.fixture
def example_lines() -> list[str]:
    """Return the five-edge undirected example graph as edge-list lines."""
    return list(EXAMPLE_EDGES)


@pytest.fixture
def example_graph() -> Graph:
    """Return the example graph: A-B:7, B-C:3, A-C:15, B-D:2, C-D:4."""
    return Graph([("A", "B", 7), ("B", "C", 3), ("A", "C", 15), ("B", "D", 2), ("C", "D", 4)])


@pytest.fixture
def graph_file(tmp_path, example_lines):
    """Write the example graph to a temporary file and return its path."""
    path = tmp_path / "graph.txt"
    path.write_text("\n".join(example_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def restore_logging():
    """Undo the root logger changes made by the CLI's logging setup."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
