"""
FastAPI application for the PushPullRun data layer.

create_app() builds a fresh app from a Settings object so tests can run it
against fakes without touching the environment. The module-level `app` is
what uvicorn serves:

    uvicorn backend.main:app --reload
    python -m backend

Any application error a router does not translate itself is caught by the
app-level handler and mapped through api.errors.http_error.
"""

import logging
import time
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.errors import http_error
from application.exceptions import PushPullRunError
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API.

    Args:
        settings: Settings to configure the app with. Defaults to get_settings().

    Returns:
        FastAPI instance with middleware, error handlers and routers attached.
    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(level=settings.log_level)
    _init_sentry(settings)

    app = FastAPI(
        title="PushPullRun API",
        description="Profiles, exercise library and workout history",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(PushPullRunError)
    async def handle_app_error(request: Request, exc: PushPullRunError):
        error = http_error(exc)
        logger.error("Unhandled %s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(
            status_code=error.status_code,
            content={"success": False, "detail": error.detail},
        )

    from api.routers import (
        exercises_router,
        health_router,
        profile_router,
        workouts_router,
    )

    for router in (health_router, profile_router, exercises_router, workouts_router):
        app.include_router(router)

    if not settings.supabase_configured:
        logger.warning("Supabase is not configured; data endpoints will return 503")

    return app


def _init_sentry(settings: Settings) -> None:
    if not settings.sentry_dsn:
        return
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=0.1,
    )
    logger.info("Sentry initialized (%s)", settings.environment)


app = create_app()
