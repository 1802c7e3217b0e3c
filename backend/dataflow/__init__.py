"""Incrementally maintained dataflow graph of named computation nodes."""
from .models import GraphSnapshot, Node
from .core import (
    ValueIsolation,
    DagError,
    NodeAlreadyExistsError,
    UnknownDependencyError,
    NodeNotFoundError,
    NodeHasDependentsError,
    add_node,
    delete_node,
    recompute_node,
)
from .store import DagStore, dag_reducer

__all__ = [
    "GraphSnapshot", "Node", "ValueIsolation",
    "DagError", "NodeAlreadyExistsError", "UnknownDependencyError",
    "NodeNotFoundError", "NodeHasDependentsError",
    "add_node", "delete_node", "recompute_node",
    "DagStore", "dag_reducer"
]

__version__ = "0.1.0"
