"""FastAPI application exposing the Lambda dispatch for local runs."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dmsnotify.api.routes import events, health
from dmsnotify.core.config import AppSettings
from dmsnotify.core.exceptions import MalformedEventError, MissingTokenError
from dmsnotify.core.log import configure_logging
from dmsnotify.handler import NotificationHandler, create_handler


def create_app(handler: NotificationHandler | None = None,
               settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    A pre-built ``handler`` skips the production wiring (used by tests).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app_settings = settings or AppSettings()
        configure_logging(app_settings.log_level)
        app.state.settings = app_settings
        app.state.handler = handler or create_handler(app_settings)
        yield

    app = FastAPI(
        title="DMS Step Functions Notifier",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(events.router)

    @app.exception_handler(MalformedEventError)
    async def malformed_event(request: Request, exc: MalformedEventError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": "malformed_event", "detail": str(exc)})

    @app.exception_handler(MissingTokenError)
    async def missing_token(request: Request, exc: MissingTokenError) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"error": "missing_token", "detail": str(exc), "task_arn": exc.task_arn},
        )

    return app
