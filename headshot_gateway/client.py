"""
HTTP client for the transform endpoint. Validates locally before uploading anything.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from headshot_gateway.schemas import TransformResponse
from headshot_gateway.utils.file_handler import save_data_uri
from headshot_gateway.utils.upload_validator import DEFAULT_MAX_BYTES, validate_path

logger = logging.getLogger(__name__)

TRANSFORM_PATH = "/api/transform-image"


class HeadshotClient:
    """
    Thin wrapper over httpx.Client.

    transform_file() raises InvalidFileType / FileTooLarge before opening the
    file or the connection; server-side failures come back as a
    TransformResponse with success=False.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:5000",
        timeout: float = 120.0,
        max_bytes: int = DEFAULT_MAX_BYTES,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.max_bytes = max_bytes
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def __enter__(self) -> "HeadshotClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def transform_file(self, path: str | Path) -> TransformResponse:
        p = Path(path)
        mime = validate_path(p, max_bytes=self.max_bytes)
        with p.open("rb") as fh:
            response = self._client.post(
                TRANSFORM_PATH,
                files={"image": (p.name, fh, mime)},
            )
        logger.debug("POST %s -> %s", TRANSFORM_PATH, response.status_code)
        try:
            return TransformResponse.model_validate(response.json())
        except ValueError:
            return TransformResponse.failed(
                f"Unexpected response from server (HTTP {response.status_code})"
            )


def transform_and_save(client: HeadshotClient, source: str | Path, destination: str | Path) -> TransformResponse:
    """Transform source and, on success, write the generated image to destination."""
    result = client.transform_file(source)
    if result.success and result.processed_image_data:
        save_data_uri(result.processed_image_data, destination)
    return result
