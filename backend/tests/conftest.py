"""Pytest configuration and shared fixtures for backend tests."""
import pytest
import sys
import os

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dataflow.core import ValueIsolation, add_node
from dataflow.store import DagStore
from tests.test_utils import build_graph, constant, sum_values


@pytest.fixture
def abc_graph():
    """a = 1, b = 2, c = a + b."""
    return build_graph([
        ("a", [], constant(1)),
        ("b", [], constant(2)),
        ("c", ["a", "b"], sum_values),
    ])


@pytest.fixture
def layered_graph(abc_graph):
    """abc_graph plus d = a + c, e = b + d, f = d + e + c."""
    snapshot = add_node(abc_graph, "d", ["a", "c"], sum_values)
    snapshot = add_node(snapshot, "e", ["b", "d"], sum_values)
    return add_node(snapshot, "f", ["d", "e", "c"], sum_values)


@pytest.fixture
def store(abc_graph):
    """Store seeded with abc_graph that verifies every transition."""
    return DagStore(abc_graph, isolation=ValueIsolation.SHALLOW, verify=True)
