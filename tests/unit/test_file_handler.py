"""
Unit tests for upload buffering and data URI helpers.
"""

import io
from pathlib import Path

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from headshot_gateway.utils.file_handler import (
    decode_data_uri,
    generate_request_id,
    read_upload,
    save_data_uri,
    to_data_uri,
)


def _upload(content: bytes, content_type: str = "image/jpeg", filename: str = "me.jpg") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


class TestReadUpload:
    @pytest.mark.asyncio
    async def test_reads_whole_small_upload(self, jpeg_bytes: bytes) -> None:
        image = await read_upload(_upload(jpeg_bytes), max_bytes=1024)
        assert image.data == jpeg_bytes
        assert image.mime_type == "image/jpeg"
        assert image.filename == "me.jpg"
        assert image.size == len(jpeg_bytes)

    @pytest.mark.asyncio
    async def test_stops_one_byte_past_limit(self) -> None:
        image = await read_upload(_upload(b"x" * 100), max_bytes=10)
        assert image.size == 11


class TestDataUri:
    def test_bytes_are_base64_encoded(self) -> None:
        assert to_data_uri(b"XYZ") == "data:image/png;base64,WFla"

    def test_str_is_taken_as_already_encoded(self) -> None:
        assert to_data_uri("WFla") == "data:image/png;base64,WFla"

    def test_decode(self) -> None:
        assert decode_data_uri("data:image/png;base64,WFla") == ("image/png", b"XYZ")

    @pytest.mark.parametrize("value", ["WFla", "data:image/png,WFla", "data:image/png;base64,@@@"])
    def test_decode_rejects_non_base64_data_uri(self, value: str) -> None:
        with pytest.raises(ValueError):
            decode_data_uri(value)

    def test_save_writes_decoded_bytes(self, tmp_path: Path) -> None:
        out = save_data_uri("data:image/png;base64,WFla", tmp_path / "out" / "result.png")
        assert out.read_bytes() == b"XYZ"


def test_request_id_is_short_hex() -> None:
    rid = generate_request_id()
    assert len(rid) == 12
    int(rid, 16)
