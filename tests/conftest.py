"""
Pytest configuration and shared fixtures.

No test talks to the real Gemini API: the SDK client is replaced by a
MagicMock whose ``aio.models.generate_content`` is an AsyncMock.
"""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from headshot_gateway.core.config import Settings
from headshot_gateway.main import create_app
from headshot_gateway.services.transform_service import TransformGateway, get_transform_gateway
from tests.factories import image_part, make_response, text_part

# Minimal JPEG framing (SOI ... EOI); the gateway never decodes pixels.
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00" + b"\x00" * 64 + b"\xff\xd9"


@pytest.fixture
def jpeg_bytes() -> bytes:
    return JPEG_BYTES


@pytest.fixture
def genai_client() -> MagicMock:
    """Fake google-genai client; default response holds one image part b'XYZ'."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=make_response(text_part("Here is your portrait."), image_part(b"XYZ"))
    )
    return client


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="test-key", upstream_timeout_seconds=5.0)


@pytest.fixture
def gateway(settings: Settings, genai_client: MagicMock) -> TransformGateway:
    return TransformGateway(
        api_key=settings.gemini_api_key,
        model_name=settings.gemini_model,
        timeout_seconds=settings.upstream_timeout_seconds,
        client=genai_client,
    )


@pytest.fixture
def build_app() -> Callable[..., FastAPI]:
    """Build an app from explicit settings, optionally swapping in a gateway."""

    def _build(settings: Settings, gateway: Any = None) -> FastAPI:
        app = create_app(settings)
        if gateway is not None:
            app.dependency_overrides[get_transform_gateway] = lambda: gateway
        return app

    return _build


@pytest.fixture
def client(build_app: Callable[..., FastAPI], settings: Settings, gateway: TransformGateway) -> TestClient:
    return TestClient(build_app(settings, gateway), raise_server_exceptions=False)
