from .v1 import api_router
from .deps import get_store

__all__ = ["api_router", "get_store"]
