from .node import Node, RecomputeFunction, ValueMap
from .snapshot import GraphSnapshot, clone_node_map, clone_value_map

__all__ = [
    "Node", "RecomputeFunction", "ValueMap",
    "GraphSnapshot", "clone_node_map", "clone_value_map"
]
