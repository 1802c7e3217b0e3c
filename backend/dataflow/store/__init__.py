from .actions import (
    ADD_NODE_ACTION, DELETE_NODE_ACTION, UPDATE_NODE_ACTION,
    AddNodeAction, DeleteNodeAction, UpdateNodeAction, DagAction,
    create_add_node_action, create_delete_node_action, create_update_node_action,
)
from .reducer import dag_reducer
from .store import DagStore

__all__ = [
    "ADD_NODE_ACTION", "DELETE_NODE_ACTION", "UPDATE_NODE_ACTION",
    "AddNodeAction", "DeleteNodeAction", "UpdateNodeAction", "DagAction",
    "create_add_node_action", "create_delete_node_action", "create_update_node_action",
    "dag_reducer", "DagStore"
]
