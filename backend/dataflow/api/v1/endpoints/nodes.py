import logging
from typing import Any, List, Mapping

from fastapi import APIRouter, Depends, HTTPException, status

from dataflow.core import (
    DagError,
    NodeAlreadyExistsError,
    NodeHasDependentsError,
    NodeNotFoundError,
    SnapshotInconsistentError,
    UnknownDependencyError,
)
from dataflow.schemas import (
    CreateNodeRequest,
    ListNodesResponse,
    NodeResponse,
    UpdateNodeRequest,
    node_response,
)
from dataflow.store import (
    DagStore,
    create_add_node_action,
    create_delete_node_action,
    create_update_node_action,
)
from dataflow.api.deps import get_store

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_STATUS = {
    NodeAlreadyExistsError: status.HTTP_409_CONFLICT,
    UnknownDependencyError: status.HTTP_400_BAD_REQUEST,
    NodeNotFoundError: status.HTTP_404_NOT_FOUND,
    NodeHasDependentsError: status.HTTP_409_CONFLICT,
    SnapshotInconsistentError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class NonNumericValueError(ValueError):
    """Raised when a summing node reads a dependency that is not a number."""

    def __init__(self, node_id: str, value: Any):
        super().__init__(f"Dependency {node_id} holds a non-numeric value: {value!r}")
        self.node_id = node_id


def constant(value: Any):
    """Function for a free node: always returns ``value``."""
    def update_function(values: Mapping[str, Any]) -> Any:
        return value
    return update_function


def sum_of(deps: List[str]):
    """Function for a dependent node: sums its dependency values."""
    def update_function(values: Mapping[str, Any]) -> Any:
        total = 0
        for dep_id in deps:
            value = values[dep_id]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise NonNumericValueError(dep_id, value)
            total += value
        return total
    return update_function


def to_http_error(error: DagError) -> HTTPException:
    return HTTPException(
        status_code=ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST),
        detail=str(error),
    )


@router.get("/nodes", response_model=ListNodesResponse)
def list_nodes(store: DagStore = Depends(get_store)):
    """List all nodes in topological order"""
    snapshot = store.get_state()
    return ListNodesResponse(nodes=[node_response(snapshot, node_id) for node_id in snapshot.order])


@router.get("/nodes/{node_id}", response_model=NodeResponse)
def get_node(node_id: str, store: DagStore = Depends(get_store)):
    snapshot = store.get_state()
    if node_id not in snapshot:
        raise to_http_error(NodeNotFoundError(node_id))
    return node_response(snapshot, node_id)


@router.post("/nodes", response_model=NodeResponse, status_code=status.HTTP_201_CREATED)
def create_node(request_body: CreateNodeRequest, store: DagStore = Depends(get_store)):
    """Add a node: a constant when it has no dependencies, otherwise the sum of them"""
    deps = list(request_body.dependencies)
    if not deps and request_body.value is None:
        raise HTTPException(status_code=422, detail="A node without dependencies needs a value")

    update_function = sum_of(deps) if deps else constant(request_body.value)

    try:
        snapshot = store.dispatch(create_add_node_action(request_body.id, deps, update_function))
    except DagError as e:
        raise to_http_error(e)
    except NonNumericValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    logger.info("Added node %s (dependencies: %s)", request_body.id, deps or "none")
    return node_response(snapshot, request_body.id)


@router.put("/nodes/{node_id}", response_model=NodeResponse)
def update_node(node_id: str, request_body: UpdateNodeRequest, store: DagStore = Depends(get_store)):
    """Set a node to a constant value and propagate to its dependents"""
    try:
        snapshot = store.dispatch(create_update_node_action(node_id, constant(request_body.value)))
    except DagError as e:
        raise to_http_error(e)
    except NonNumericValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    logger.info("Updated node %s, %d dependent(s) recomputed", node_id, len(snapshot.node(node_id).dependents))
    return node_response(snapshot, node_id)


@router.delete("/nodes/{node_id}")
def delete_node(node_id: str, store: DagStore = Depends(get_store)):
    try:
        store.dispatch(create_delete_node_action(node_id))
    except DagError as e:
        raise to_http_error(e)

    logger.info("Deleted node %s", node_id)
    return {"status": "ok"}
