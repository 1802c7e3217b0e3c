"""Intents accepted by the reducer."""
from typing import Annotated, Any, Callable, List, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

ADD_NODE_ACTION = "add_node"
DELETE_NODE_ACTION = "delete_node"
UPDATE_NODE_ACTION = "update_node"

UpdateFunction = Callable[[Mapping[str, Any]], Any]


class DagActionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)


class AddNodeAction(DagActionBase):
    """Add a node reading from ``deps``."""
    type: Literal["add_node"] = ADD_NODE_ACTION
    deps: List[str] = Field(default_factory=list)
    update_function: UpdateFunction


class DeleteNodeAction(DagActionBase):
    """Delete a node nothing depends on."""
    type: Literal["delete_node"] = DELETE_NODE_ACTION


class UpdateNodeAction(DagActionBase):
    """Replace a node's function and propagate."""
    type: Literal["update_node"] = UPDATE_NODE_ACTION
    update_function: UpdateFunction


DagAction = Annotated[
    Union[AddNodeAction, DeleteNodeAction, UpdateNodeAction],
    Field(discriminator="type"),
]


def create_add_node_action(node_id: str, deps: List[str], update_function: UpdateFunction) -> AddNodeAction:
    return AddNodeAction(id=node_id, deps=deps, update_function=update_function)


def create_delete_node_action(node_id: str) -> DeleteNodeAction:
    return DeleteNodeAction(id=node_id)


def create_update_node_action(node_id: str, update_function: UpdateFunction) -> UpdateNodeAction:
    return UpdateNodeAction(id=node_id, update_function=update_function)
