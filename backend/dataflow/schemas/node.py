from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from ..models import GraphSnapshot

Number = Union[int, float]


class CreateNodeRequest(BaseModel):
    id: str = Field(min_length=1)
    value: Optional[Number] = None  # only used when there are no dependencies
    dependencies: List[str] = Field(default_factory=list)


class UpdateNodeRequest(BaseModel):
    value: Number


class NodeResponse(BaseModel):
    id: str
    value: Any = None
    dependencies: List[str]
    dependents: List[str]


class ListNodesResponse(BaseModel):
    nodes: List[NodeResponse]


def render_value(value: Any) -> Any:
    """Values are opaque; anything that is not a JSON scalar is shown by repr."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return repr(value)


def node_response(snapshot: GraphSnapshot, node_id: str) -> NodeResponse:
    node = snapshot.node(node_id)
    return NodeResponse(
        id=node.id,
        value=render_value(snapshot.value(node_id)),
        dependencies=list(node.dependencies),
        dependents=list(node.dependents),
    )
