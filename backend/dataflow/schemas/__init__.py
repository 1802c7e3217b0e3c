from .node import (
    CreateNodeRequest, UpdateNodeRequest,
    NodeResponse, ListNodesResponse,
    render_value, node_response
)

__all__ = [
    "CreateNodeRequest", "UpdateNodeRequest",
    "NodeResponse", "ListNodesResponse",
    "render_value", "node_response"
]
