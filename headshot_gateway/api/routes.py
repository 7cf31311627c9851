"""
Transform API routes: POST /api/transform-image, GET /api/health.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from headshot_gateway.core.config import Settings, get_settings
from headshot_gateway.core.errors import GatewayError, MissingFile
from headshot_gateway.schemas import HealthResponse, TransformResponse
from headshot_gateway.services.transform_service import TransformGateway, get_transform_gateway
from headshot_gateway.utils.file_handler import generate_request_id, read_upload
from headshot_gateway.utils.upload_validator import validate_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def error_response(exc: GatewayError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=TransformResponse.failed(exc.message).to_payload(),
    )


@router.post("/transform-image", response_model=TransformResponse, response_model_exclude_none=True)
async def transform_image(
    gateway: Annotated[TransformGateway, Depends(get_transform_gateway)],
    settings: Annotated[Settings, Depends(get_settings)],
    image: Annotated[UploadFile | None, File(description="JPEG headshot to transform")] = None,
) -> JSONResponse:
    """
    Upload one JPEG headshot and get back the professional portrait as a PNG data URI.
    Always answers with {success, processedImageData} or {success, error}.
    """
    request_id = generate_request_id()
    try:
        if image is None or not image.filename:
            logger.info("request_id=%s received: hasFile=False", request_id)
            raise MissingFile()

        upload = await read_upload(image, settings.upload_max_bytes)
        logger.info(
            "request_id=%s received: hasFile=True filename=%s mimetype=%s size=%d",
            request_id,
            upload.filename,
            upload.mime_type,
            upload.size,
        )
        if upload.size == 0:
            raise MissingFile()

        # Deployment precondition; checked before the file itself is judged.
        gateway.ensure_configured()
        validate_upload(upload.mime_type, upload.size, max_bytes=settings.upload_max_bytes)

        data_uri = await gateway.transform(upload)
    except GatewayError as e:
        if e.status_code >= 500:
            logger.warning("request_id=%s failed: %s (%s)", request_id, e.message, e.code)
        else:
            logger.info("request_id=%s rejected: %s (%s)", request_id, e.message, e.code)
        return error_response(e)

    logger.info("request_id=%s transformed", request_id)
    return JSONResponse(status_code=200, content=TransformResponse.ok(data_uri).to_payload())


@router.get("/health", response_model=HealthResponse)
async def health(settings: Annotated[Settings, Depends(get_settings)]) -> HealthResponse:
    configured = settings.credential_configured
    return HealthResponse(
        status="ok" if configured else "degraded",
        model=settings.gemini_model,
        credential_configured=configured,
    )
