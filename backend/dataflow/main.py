import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dataflow.core import settings
from dataflow.api import api_router
from dataflow.store import DagStore

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Route package logs to stderr at the configured level."""
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle manager."""
    logger.info("Starting %s (value isolation: %s)", settings.APP_TITLE, settings.VALUE_ISOLATION.value)
    yield
    logger.info("Shutting down with %d node(s) in the graph", len(app.state.store.get_state()))


def create_app(store: Optional[DagStore] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.APP_TITLE,
        lifespan=lifespan,
        debug=settings.DEBUG
    )
    app.state.store = store if store is not None else DagStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000)
