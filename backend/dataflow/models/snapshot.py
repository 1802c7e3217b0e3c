from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

from .node import Node, ValueMap


def clone_node_map(nodes: Dict[str, Node]) -> Dict[str, Node]:
    return {node_id: node.clone() for node_id, node in nodes.items()}


def clone_value_map(values: ValueMap) -> ValueMap:
    # Shallow: compound values are shared with the source mapping
    return dict(values)


@dataclass(frozen=True)
class GraphSnapshot:
    """
    Immutable view of the whole graph at one point in time.

    - order: every live node id, in a valid topological order
    - nodes: node id -> Node
    - values: node id -> current value

    Transitions never touch these containers; they build new ones.
    """
    order: List[str] = field(default_factory=list)
    nodes: Dict[str, Node] = field(default_factory=dict)
    values: ValueMap = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "GraphSnapshot":
        return cls()

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.order)

    def __iter__(self) -> Iterator[str]:
        return iter(self.order)

    def node(self, node_id: str) -> Node:
        return self.nodes[node_id]

    def value(self, node_id: str) -> Any:
        return self.values[node_id]
