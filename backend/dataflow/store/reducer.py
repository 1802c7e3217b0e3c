from typing import Optional

from ..core import ValueIsolation, add_node, delete_node, recompute_node
from ..models import GraphSnapshot
from .actions import AddNodeAction, DagAction, DeleteNodeAction, UpdateNodeAction


def dag_reducer(
    state: Optional[GraphSnapshot],
    action: DagAction,
    *,
    isolation: Optional[ValueIsolation] = None,
) -> GraphSnapshot:
    """Apply one action to a snapshot. ``None`` stands for the empty graph."""
    if state is None:
        state = GraphSnapshot.empty()

    if isinstance(action, AddNodeAction):
        return add_node(state, action.id, action.deps, action.update_function, isolation=isolation)

    if isinstance(action, DeleteNodeAction):
        return delete_node(state, action.id)

    if isinstance(action, UpdateNodeAction):
        return recompute_node(state, action.id, action.update_function, isolation=isolation)

    return state
