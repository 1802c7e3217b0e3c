from fastapi import Request

from ..store import DagStore


def get_store(request: Request) -> DagStore:
    """The store owned by the running application."""
    return request.app.state.store


__all__ = ["get_store"]
