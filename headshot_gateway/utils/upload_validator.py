"""
Upload pre-check: JPEG only, bounded size. Runs before any bytes go over the wire.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path

from headshot_gateway.core.errors import FileTooLarge, InvalidFileType

ALLOWED_MIME_TYPES: frozenset[str] = frozenset({"image/jpeg", "image/jpg"})
DEFAULT_MAX_BYTES: int = 10 * 1024 * 1024

_JPEG_SUFFIXES = {".jpg", ".jpeg", ".jpe", ".jfif"}


def is_jpeg_mime(mime_type: str | None) -> bool:
    if not mime_type:
        return False
    return mime_type.strip().lower() in ALLOWED_MIME_TYPES


def validate_upload(mime_type: str | None, size: int, max_bytes: int = DEFAULT_MAX_BYTES) -> None:
    """
    Accept a candidate file or raise.

    Type is checked first, then size. Raises InvalidFileType or FileTooLarge;
    returns None when the file may be sent.
    """
    if not is_jpeg_mime(mime_type):
        raise InvalidFileType()
    if size > max_bytes:
        max_mb = max_bytes / (1024 * 1024)
        raise FileTooLarge(f"File too large: file size must be less than {max_mb:g}MB")


def guess_mime_type(path: str | Path) -> str | None:
    """Declared type of a local file, from its extension."""
    suffix = Path(path).suffix.lower()
    if suffix in _JPEG_SUFFIXES:
        return "image/jpeg"
    mime, _ = mimetypes.guess_type(str(path))
    return mime


def validate_path(path: str | Path, max_bytes: int = DEFAULT_MAX_BYTES) -> str:
    """
    Validate a file on disk without reading its content.
    Returns the declared MIME type on success.
    """
    p = Path(path)
    mime = guess_mime_type(p)
    validate_upload(mime, p.stat().st_size, max_bytes=max_bytes)
    return mime or "image/jpeg"
