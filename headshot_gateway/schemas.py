"""
Pydantic v2 models for the transform pipeline and its wire contract.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class UploadedImage(BaseModel):
    """One upload, alive only for the request that received it."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    mime_type: str
    filename: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)


class TransformRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    image: bytes
    mime_type: str
    instruction: str


class TextPart(BaseModel):
    kind: Literal["text"] = "text"
    text: str


class ImagePart(BaseModel):
    kind: Literal["image"] = "image"
    data: bytes
    mime_type: str | None = None


ResponsePart = Union[TextPart, ImagePart]


class TransformResponse(BaseModel):
    """Normalized JSON body returned for every transform request."""

    success: bool
    processed_image_data: str | None = Field(default=None, alias="processedImageData")
    error: str | None = None

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def ok(cls, data_uri: str) -> "TransformResponse":
        return cls(success=True, processed_image_data=data_uri)

    @classmethod
    def failed(cls, message: str) -> "TransformResponse":
        return cls(success=False, error=message)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"]
    model: str
    credential_configured: bool
