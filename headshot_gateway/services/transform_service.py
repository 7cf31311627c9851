"""
Transform gateway: one upload + fixed instruction -> Gemini image model -> data URI.
Stateless per request. No retries; every failure is raised as a GatewayError.
"""

from __future__ import annotations

import asyncio
import base64
import logging
import time
from functools import lru_cache
from typing import Any, Sequence

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from headshot_gateway.core.config import Settings, get_settings
from headshot_gateway.core.errors import (
    ConfigurationError,
    EmptyResponse,
    GatewayError,
    InvalidCredential,
    MalformedResponse,
    NoImageInResponse,
    QuotaExceeded,
    UpstreamFailure,
    UpstreamTimeout,
)
from headshot_gateway.models.portrait_prompt import OUTPUT_MEDIA_TYPE, PORTRAIT_INSTRUCTION
from headshot_gateway.schemas import ImagePart, ResponsePart, TextPart, TransformRequest, UploadedImage
from headshot_gateway.utils.file_handler import to_data_uri

logger = logging.getLogger(__name__)

_CREDENTIAL_CODES = {401, 403}
_CREDENTIAL_STATUSES = {"UNAUTHENTICATED", "PERMISSION_DENIED"}
_QUOTA_CODES = {429}
_QUOTA_STATUSES = {"RESOURCE_EXHAUSTED"}


def classify_upstream_error(exc: BaseException) -> GatewayError:
    """
    Map an upstream failure to InvalidCredential, QuotaExceeded or UpstreamFailure.

    Structured SDK fields (HTTP code, RPC status) are checked first. Substring
    matching on the message is kept only as a fallback for errors that carry
    no structure; its wording is not guaranteed by the upstream service.
    """
    code = getattr(exc, "code", None)
    status = str(getattr(exc, "status", "") or "").upper()
    message = getattr(exc, "message", None) or str(exc)

    if isinstance(exc, genai_errors.APIError) or code is not None or status:
        if code in _CREDENTIAL_CODES or status in _CREDENTIAL_STATUSES or "API_KEY_INVALID" in str(exc):
            return InvalidCredential()
        if code in _QUOTA_CODES or status in _QUOTA_STATUSES:
            return QuotaExceeded()

    if "API key" in message:
        return InvalidCredential()
    if "quota" in message.lower():
        return QuotaExceeded()
    return UpstreamFailure(message or None)


def extract_parts(response: Any) -> list[ResponsePart]:
    """
    Turn the first candidate of a generate_content response into ordered parts.
    Raises EmptyResponse / MalformedResponse when the shape is unusable.
    An empty parts list is not malformed; it simply holds no image.
    """
    candidates = getattr(response, "candidates", None)
    if not candidates:
        raise EmptyResponse()
    content = getattr(candidates[0], "content", None)
    raw_parts = getattr(content, "parts", None) if content is not None else None
    if raw_parts is None:
        raise MalformedResponse()

    parts: list[ResponsePart] = []
    for part in raw_parts:
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            data = inline.data
            # Raw REST payloads carry base64 text; the SDK types carry bytes.
            if isinstance(data, str):
                data = base64.b64decode(data)
            parts.append(ImagePart(data=data, mime_type=getattr(inline, "mime_type", None)))
        elif getattr(part, "text", None):
            parts.append(TextPart(text=part.text))
    return parts


def first_image_data_uri(parts: Sequence[ResponsePart]) -> str:
    """First ImagePart wins, in upstream order. Raises NoImageInResponse if none."""
    for part in parts:
        if isinstance(part, ImagePart):
            return to_data_uri(part.data, OUTPUT_MEDIA_TYPE)
    raise NoImageInResponse()


class TransformGateway:
    """
    Relays one image to the upstream image model and normalizes the outcome.

    The credential is injected at construction; the gateway never reads the
    environment. The SDK client is created lazily from it, or injected (tests).
    """

    def __init__(
        self,
        api_key: str | None,
        model_name: str,
        instruction: str = PORTRAIT_INSTRUCTION,
        timeout_seconds: float | None = None,
        client: Any = None,
    ) -> None:
        self.api_key = (api_key or "").strip()
        self.model_name = model_name
        self.instruction = instruction
        self.timeout_seconds = timeout_seconds or None
        self._client = client

    def ensure_configured(self) -> None:
        if not self.api_key:
            raise ConfigurationError()

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def build_request(self, image: UploadedImage) -> TransformRequest:
        return TransformRequest(image=image.data, mime_type=image.mime_type, instruction=self.instruction)

    async def _generate(self, request: TransformRequest) -> Any:
        client = self._get_client()
        call = client.aio.models.generate_content(
            model=self.model_name,
            contents=[
                types.Part.from_bytes(data=request.image, mime_type=request.mime_type),
                request.instruction,
            ],
            config=types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"]),
        )
        if self.timeout_seconds is None:
            return await call
        return await asyncio.wait_for(call, timeout=self.timeout_seconds)

    async def transform(self, image: UploadedImage) -> str:
        """
        Run one transformation. Returns the data URI of the generated image.
        Raises a GatewayError subclass on any failure.
        """
        self.ensure_configured()
        request = self.build_request(image)

        start = time.perf_counter()
        try:
            response = await self._generate(request)
        except asyncio.TimeoutError as e:
            logger.warning("Upstream call timed out after %.1fs", self.timeout_seconds or 0.0)
            raise UpstreamTimeout() from e
        except Exception as e:
            mapped = classify_upstream_error(e)
            logger.warning("Upstream call failed (%s): %s", mapped.code, e)
            raise mapped from e
        elapsed = time.perf_counter() - start

        parts = extract_parts(response)
        logger.info(
            "Upstream %s responded in %.2fs with %d part(s)",
            self.model_name,
            elapsed,
            len(parts),
        )
        return first_image_data_uri(parts)


def build_transform_gateway(settings: Settings) -> TransformGateway:
    return TransformGateway(
        api_key=settings.gemini_api_key,
        model_name=settings.gemini_model,
        timeout_seconds=settings.upstream_timeout_seconds,
    )


@lru_cache
def get_transform_gateway() -> TransformGateway:
    """Process-wide gateway built from settings (FastAPI dependency)."""
    return build_transform_gateway(get_settings())
