from .config import settings, Settings, ValueIsolation, load_settings
from .errors import (
    DagError,
    NodeAlreadyExistsError,
    UnknownDependencyError,
    NodeNotFoundError,
    NodeHasDependentsError,
    SnapshotInconsistentError,
)
from .graph import add_node, delete_node, recompute_node
from .invariants import to_networkx, verify_snapshot

__all__ = [
    "settings", "Settings", "ValueIsolation", "load_settings",
    "DagError", "NodeAlreadyExistsError", "UnknownDependencyError",
    "NodeNotFoundError", "NodeHasDependentsError", "SnapshotInconsistentError",
    "add_node", "delete_node", "recompute_node",
    "to_networkx", "verify_snapshot"
]
