"""Consistency checks for graph snapshots, backed by networkx."""
import networkx as nx

from ..models import GraphSnapshot
from .errors import SnapshotInconsistentError


def to_networkx(snapshot: GraphSnapshot) -> nx.DiGraph:
    """
    Export a snapshot as a DiGraph.

    Edge from A to B means "B depends on A". Each node carries its current
    value under the ``value`` attribute.
    """
    graph = nx.DiGraph()
    for node_id in snapshot.order:
        graph.add_node(node_id, value=snapshot.values.get(node_id))
    for node_id in snapshot.order:
        node = snapshot.nodes.get(node_id)
        if node is None:
            continue
        for dep_id in node.dependencies:
            graph.add_edge(dep_id, node_id)
    return graph


def verify_snapshot(snapshot: GraphSnapshot) -> None:
    """
    Check every structural invariant of a snapshot.

    Raises:
        SnapshotInconsistentError: Describing the first violation found
    """
    order_ids = set(snapshot.order)
    if len(order_ids) != len(snapshot.order):
        duplicate = next(i for i in snapshot.order if snapshot.order.count(i) > 1)
        raise SnapshotInconsistentError(duplicate, "id appears more than once in order")

    for label, keys in (("node", set(snapshot.nodes)), ("value", set(snapshot.values))):
        mismatch = order_ids ^ keys
        if mismatch:
            raise SnapshotInconsistentError(min(mismatch), f"order and {label} mapping disagree")

    for node_id, node in snapshot.nodes.items():
        if node.id != node_id:
            raise SnapshotInconsistentError(node_id, f"node is keyed under the wrong id {node.id!r}")
        for dep_id in node.dependencies:
            if dep_id not in snapshot.nodes:
                raise SnapshotInconsistentError(node_id, f"unknown dependency {dep_id!r}")

    graph = to_networkx(snapshot)
    if not nx.is_directed_acyclic_graph(graph):
        cycle = nx.find_cycle(graph)
        raise SnapshotInconsistentError(cycle[0][0], f"cycle detected: {cycle}")

    position = {node_id: i for i, node_id in enumerate(snapshot.order)}
    for dep_id, node_id in graph.edges():
        if position[dep_id] >= position[node_id]:
            raise SnapshotInconsistentError(node_id, f"ordered before its dependency {dep_id!r}")

    for node_id in snapshot.order:
        stored = snapshot.nodes[node_id].dependents
        if set(stored) != nx.descendants(graph, node_id) or len(stored) != len(set(stored)):
            raise SnapshotInconsistentError(node_id, f"dependents {stored} are incomplete")
        if [position[d] for d in stored] != sorted(position[d] for d in stored):
            raise SnapshotInconsistentError(node_id, f"dependents {stored} are out of order")
