from fastapi import APIRouter
from .endpoints import nodes_router

api_router = APIRouter()

api_router.include_router(nodes_router, tags=["nodes"])
