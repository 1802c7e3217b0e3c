"""Graph walks used by the graph transitions."""
import copy
from collections import deque
from typing import Any, Dict, Iterator, List

from ..models import Node, ValueMap
from .config import ValueIsolation


def walk_ancestors(nodes: Dict[str, Node], source_id: str) -> Iterator[str]:
    """
    Yield every node the source depends on, directly or transitively.

    Breadth-first over dependency edges. Each ancestor is yielded exactly
    once, before it is enqueued; the source itself is never yielded.

    Args:
        nodes: Node mapping containing the source and all its ancestors
        source_id: The node to start from

    Yields:
        Ancestor ids in breadth-first order
    """
    to_visit = deque([source_id])
    seen = {source_id}

    while to_visit:
        current = nodes[to_visit.popleft()]
        for dep_id in current.dependencies:
            if dep_id not in seen:
                yield dep_id
                seen.add(dep_id)
                to_visit.append(dep_id)


def dependency_values(
    node: Node,
    values: ValueMap,
    isolation: ValueIsolation = ValueIsolation.SHALLOW,
) -> ValueMap:
    """Build the mapping handed to a node's recompute function."""
    dep_values = {dep_id: values[dep_id] for dep_id in node.dependencies}
    if isolation == ValueIsolation.DEEP:
        return copy.deepcopy(dep_values)
    return dep_values


def compute_value(
    node: Node,
    values: ValueMap,
    isolation: ValueIsolation = ValueIsolation.SHALLOW,
) -> Any:
    """Call the node's recompute function; the result is stored verbatim."""
    return node.recompute(dependency_values(node, values, isolation))


def propagate(
    nodes: Dict[str, Node],
    values: ValueMap,
    source_id: str,
    isolation: ValueIsolation = ValueIsolation.SHALLOW,
) -> List[str]:
    """
    Recompute a node and then every node downstream of it.

    Dependents are replayed in their stored order, which is a subsequence of
    the global insertion order and therefore already topological, so no sort
    is needed and each node is recomputed exactly once.

    Warning: writes into ``values``, which must be a cloned mapping.

    Returns:
        The recomputed ids, in the order they were recomputed
    """
    source = nodes[source_id]
    values[source_id] = compute_value(source, values, isolation)

    recomputed = [source_id]
    for desc_id in source.dependents:
        values[desc_id] = compute_value(nodes[desc_id], values, isolation)
        recomputed.append(desc_id)

    return recomputed
