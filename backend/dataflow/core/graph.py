"""
Graph transitions.

Every function takes a snapshot and returns a new one. Validation runs before
anything is cloned, so a failed call leaves the caller's snapshot exactly as
it was. These functions have no side effects beyond the returned snapshot.
"""
from typing import Iterable, Optional

from ..models import GraphSnapshot, Node, RecomputeFunction, clone_node_map, clone_value_map
from .config import ValueIsolation, settings
from .errors import (
    NodeAlreadyExistsError,
    NodeHasDependentsError,
    NodeNotFoundError,
    UnknownDependencyError,
)
from .propagation import compute_value, propagate, walk_ancestors


def _isolation(isolation: Optional[ValueIsolation]) -> ValueIsolation:
    return settings.VALUE_ISOLATION if isolation is None else isolation


def add_node(
    snapshot: GraphSnapshot,
    node_id: str,
    dependency_ids: Iterable[str],
    recompute: RecomputeFunction,
    *,
    isolation: Optional[ValueIsolation] = None,
) -> GraphSnapshot:
    """
    Add a node, compute its value and register it with all its ancestors.

    Args:
        snapshot: The current graph
        node_id: Id of the new node
        dependency_ids: Ids the new node reads from, in call order
        recompute: Function from dependency values to the node's value
        isolation: Copy policy for dependency values (defaults to settings)

    Raises:
        NodeAlreadyExistsError: If node_id is already in the graph
        UnknownDependencyError: For the first dependency not in the graph
    """
    deps = list(dependency_ids)

    if node_id in snapshot.nodes:
        raise NodeAlreadyExistsError(node_id)

    for dep_id in deps:
        if dep_id not in snapshot.nodes:
            raise UnknownDependencyError(dep_id)

    node = Node(id=node_id, recompute=recompute, dependencies=deps)

    order = [*snapshot.order, node_id]
    nodes = clone_node_map(snapshot.nodes)
    values = clone_value_map(snapshot.values)

    nodes[node_id] = node
    values[node_id] = compute_value(node, values, _isolation(isolation))

    for ancestor_id in walk_ancestors(nodes, node_id):
        nodes[ancestor_id].dependents.append(node_id)

    return GraphSnapshot(order=order, nodes=nodes, values=values)


def delete_node(snapshot: GraphSnapshot, node_id: str) -> GraphSnapshot:
    """
    Remove a node nothing depends on.

    Raises:
        NodeNotFoundError: If node_id is not in the graph
        NodeHasDependentsError: If other nodes still depend on node_id
    """
    if node_id not in snapshot.nodes:
        raise NodeNotFoundError(node_id)

    if snapshot.nodes[node_id].dependents:
        raise NodeHasDependentsError(node_id)

    order = [other_id for other_id in snapshot.order if other_id != node_id]
    nodes = clone_node_map(snapshot.nodes)
    values = clone_value_map(snapshot.values)

    for ancestor_id in list(walk_ancestors(nodes, node_id)):
        ancestor = nodes[ancestor_id]
        ancestor.dependents = [desc_id for desc_id in ancestor.dependents if desc_id != node_id]

    del nodes[node_id]
    del values[node_id]

    return GraphSnapshot(order=order, nodes=nodes, values=values)


def recompute_node(
    snapshot: GraphSnapshot,
    node_id: str,
    recompute: RecomputeFunction,
    *,
    isolation: Optional[ValueIsolation] = None,
) -> GraphSnapshot:
    """
    Replace a node's recompute function and propagate the new value downstream.

    The node is recomputed first, then each of its dependents in stored order,
    each using its own unchanged function.

    Raises:
        NodeNotFoundError: If node_id is not in the graph
    """
    if node_id not in snapshot.nodes:
        raise NodeNotFoundError(node_id)

    order = list(snapshot.order)
    nodes = clone_node_map(snapshot.nodes)
    values = clone_value_map(snapshot.values)

    nodes[node_id].recompute = recompute
    propagate(nodes, values, node_id, _isolation(isolation))

    return GraphSnapshot(order=order, nodes=nodes, values=values)
