"""Failures raised by graph transitions."""


class DagError(Exception):
    """Base class for all graph failures."""

    def __init__(self, node_id: str, message: str):
        super().__init__(message)
        self.node_id = node_id


class NodeAlreadyExistsError(DagError):
    """Raised when adding a node whose id is already in the graph."""

    def __init__(self, node_id: str):
        super().__init__(node_id, f"Node {node_id} already exists")


class UnknownDependencyError(DagError):
    """Raised when adding a node that depends on a missing node."""

    def __init__(self, node_id: str):
        super().__init__(node_id, f"The dependency {node_id} does not exist")


class NodeNotFoundError(DagError):
    """Raised when deleting or recomputing a missing node."""

    def __init__(self, node_id: str):
        super().__init__(node_id, f"Node {node_id} does not exist")


class NodeHasDependentsError(DagError):
    """Raised when deleting a node that other nodes still read from."""

    def __init__(self, node_id: str):
        super().__init__(node_id, f"Cannot delete {node_id} since it has dependents")


class SnapshotInconsistentError(DagError):
    """Raised by the invariant checker when a snapshot is malformed."""

    def __init__(self, node_id: str, reason: str):
        super().__init__(node_id, f"Snapshot inconsistent at {node_id}: {reason}")
        self.reason = reason
