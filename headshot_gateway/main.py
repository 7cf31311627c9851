"""
Headshot Transform Gateway — FastAPI application.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from headshot_gateway.api.routes import error_response, router
from headshot_gateway.core.config import Settings, get_settings
from headshot_gateway.core.errors import GatewayError
from headshot_gateway.schemas import TransformResponse
from headshot_gateway.services.transform_service import build_transform_gateway, get_transform_gateway

logging.basicConfig(
    level=getattr(logging, get_settings().log_level),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)

_GENERIC_FAILURE = "Failed to process image. Please try again."


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: report configuration (never the key itself). Shutdown: log."""
    settings: Settings = app.state.settings
    logger.info(
        "Gateway starting: env=%s model=%s timeout=%ss max_upload=%sMB",
        settings.environment,
        settings.gemini_model,
        settings.upstream_timeout_seconds or "default",
        settings.upload_max_size_mb,
    )
    if not settings.credential_configured:
        logger.warning("GEMINI_API_KEY is not set; transform requests will fail with a configuration error")
    yield
    logger.info("Shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Explicit settings replace the cached, environment-derived ones.
    if settings is not get_settings():
        gateway = build_transform_gateway(settings)
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_transform_gateway] = lambda: gateway

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start
        logger.info("%s %s %s %.3fs", request.method, request.url.path, response.status_code, duration)
        return response

    app.include_router(router)

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content=TransformResponse.failed("Malformed upload request").to_payload(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=TransformResponse.failed(str(exc.detail)).to_payload(),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=TransformResponse.failed(_GENERIC_FAILURE).to_payload(),
        )

    return app


app = create_app()
