"""FastAPI application for the vita-harmony JSON API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..db.engine import get_db_path, init_db
from .routers import catalog, gate, history, profile


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize the database on startup."""
    db_path = get_db_path()
    if not db_path.exists():
        await init_db(db_path)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="vita-harmony",
        description="Workouts, guided meditation and streak tracking",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(profile.router)
    app.include_router(catalog.router)
    app.include_router(history.router)
    app.include_router(gate.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
