"""Todos API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodosError → structured JSON responses
    - ServiceContext built in lifespan from Settings, closed on shutdown
    - Static files mounted AFTER API routes, only when the directory exists
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from todos.api.error_handlers import register_error_handlers
from todos.api.routes import health, todos
from todos.config import Settings, get_settings
from todos.context import ServiceContext
from todos.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        app.state.context = ServiceContext.from_settings(settings)
        logger.info(
            f"Todos API started (redis {settings.redis_host}:{settings.redis_port})",
        )
        yield
        logger.info("Todos API shutting down")
        await app.state.context.close()

    app = FastAPI(title="Todos API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(todos.router)

    # html=True serves index.html for directory paths
    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
