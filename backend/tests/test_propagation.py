"""Tests for the ancestor walk, value computation and dependent replay."""
import pytest

from dataflow.core import ValueIsolation, recompute_node, add_node
from dataflow.core.propagation import walk_ancestors, dependency_values, compute_value, propagate
from dataflow.models import Node, clone_node_map, clone_value_map
from tests.test_utils import build_graph, constant, sum_values


def test_walk_ancestors_visits_each_ancestor_once(layered_graph):
    visited = list(walk_ancestors(layered_graph.nodes, "f"))

    assert sorted(visited) == ["a", "b", "c", "d", "e"]
    assert len(visited) == len(set(visited))
    assert "f" not in visited


def test_walk_ancestors_is_breadth_first(layered_graph):
    visited = list(walk_ancestors(layered_graph.nodes, "f"))

    # direct dependencies of f come first, in declaration order
    assert visited[:3] == ["d", "e", "c"]


def test_walk_ancestors_of_root_is_empty(abc_graph):
    assert list(walk_ancestors(abc_graph.nodes, "a")) == []


def test_walk_ancestors_does_not_modify_nodes(layered_graph):
    before = clone_node_map(layered_graph.nodes)
    list(walk_ancestors(layered_graph.nodes, "f"))

    assert layered_graph.nodes == before


def test_dependency_values_contains_exactly_dependencies(layered_graph):
    node = layered_graph.node("e")
    values = dependency_values(node, layered_graph.values)

    assert values == {"b": 2, "d": 4}
    assert values is not layered_graph.values


def test_dependency_values_with_repeated_dependency(abc_graph):
    snapshot = add_node(abc_graph, "d", ["a", "a"], sum_values)

    assert snapshot.node("d").dependencies == ["a", "a"]
    assert dependency_values(snapshot.node("d"), snapshot.values) == {"a": 1}
    assert snapshot.value("d") == 1


def test_compute_value_returns_result_verbatim():
    marker = object()
    node = Node(id="x", recompute=constant(marker))

    assert compute_value(node, {}) is marker


def test_propagate_writes_into_given_mapping(layered_graph):
    nodes = clone_node_map(layered_graph.nodes)
    values = clone_value_map(layered_graph.values)
    nodes["b"].recompute = constant(0)

    recomputed = propagate(nodes, values, "b")

    assert recomputed == ["b", "c", "d", "e", "f"]
    assert values["e"] == values["b"] + values["d"]
    assert layered_graph.value("b") == 2


def test_shallow_isolation_shares_compound_values():
    def append_and_count(values):
        values["items"].append("leaked")
        return len(values["items"])

    snapshot = build_graph([("items", [], constant(["x"]))])
    snapshot = add_node(snapshot, "count", ["items"], append_and_count, isolation=ValueIsolation.SHALLOW)

    assert snapshot.value("count") == 2
    assert snapshot.value("items") == ["x", "leaked"]


def test_shallow_isolation_protects_the_mapping_itself(abc_graph):
    def clobber(values):
        values["a"] = 1000
        values["extra"] = 1
        return 0

    snapshot = add_node(abc_graph, "d", ["a"], clobber, isolation=ValueIsolation.SHALLOW)

    assert snapshot.value("a") == 1
    assert "extra" not in snapshot.values


def test_deep_isolation_copies_compound_values():
    def append_and_count(values):
        values["items"].append("leaked")
        return len(values["items"])

    snapshot = build_graph([("items", [], constant(["x"]))])
    snapshot = add_node(snapshot, "count", ["items"], append_and_count, isolation=ValueIsolation.DEEP)
    snapshot = recompute_node(snapshot, "items", constant(["y", "z"]), isolation=ValueIsolation.DEEP)

    assert snapshot.value("count") == 3
    assert snapshot.value("items") == ["y", "z"]


@pytest.mark.parametrize("isolation", list(ValueIsolation))
def test_isolation_policies_agree_on_plain_values(layered_graph, isolation):
    snapshot = recompute_node(layered_graph, "a", constant(10), isolation=isolation)

    assert snapshot.value("f") == 58
