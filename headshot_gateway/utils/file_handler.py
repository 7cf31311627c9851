"""
In-memory upload handling and data URI helpers. Nothing touches the disk server-side.
"""

from __future__ import annotations

import base64
import binascii
import re
import uuid
from pathlib import Path

from fastapi import UploadFile

from headshot_gateway.schemas import UploadedImage

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$", re.DOTALL)


def generate_request_id() -> str:
    """Return a short unique request ID for logging."""
    return uuid.uuid4().hex[:12]


async def read_upload(upload: UploadFile, max_bytes: int) -> UploadedImage:
    """
    Buffer an upload, reading at most max_bytes + 1 bytes.
    The extra byte is enough for the caller to detect an oversize file.
    """
    content = await upload.read(max_bytes + 1)
    return UploadedImage(
        data=content,
        mime_type=(upload.content_type or "").strip(),
        filename=upload.filename,
    )


def to_data_uri(data: bytes | str, media_type: str = "image/png") -> str:
    """Embed image bytes as a base64 data URI. A str is taken as already base64-encoded."""
    if isinstance(data, bytes):
        encoded = base64.b64encode(data).decode("ascii")
    else:
        encoded = data
    return f"data:{media_type};base64,{encoded}"


def decode_data_uri(uri: str) -> tuple[str, bytes]:
    """Split a base64 data URI into (media type, raw bytes). Raises ValueError otherwise."""
    match = _DATA_URI_RE.match(uri.strip())
    if match is None:
        raise ValueError("Not a base64 data URI")
    try:
        payload = base64.b64decode(match.group("payload"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
    return match.group("mime"), payload


def save_data_uri(uri: str, path: str | Path) -> Path:
    """Decode a data URI and write it to path. Returns the written path."""
    _, payload = decode_data_uri(uri)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(payload)
    return out
