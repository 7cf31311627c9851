"""
Failure taxonomy for the transform pipeline.

Every failure is terminal for its request. The API layer renders any
GatewayError as ``{"success": false, "error": message}`` with ``status_code``.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base class: carries the HTTP status, a classification code and a user-facing message."""

    status_code: int = 500
    code: str = "gateway_error"
    default_message: str = "Failed to process image. Please try again."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFile(GatewayError):
    status_code = 400
    code = "missing_file"
    default_message = "No image file provided"


class UploadRejected(GatewayError):
    """Upload failed the JPEG / size pre-check."""

    status_code = 400
    code = "upload_rejected"


class InvalidFileType(UploadRejected):
    status_code = 400
    code = "invalid_file_type"
    default_message = "Invalid file type: please upload a JPEG or JPG file"


class FileTooLarge(UploadRejected):
    status_code = 400
    code = "file_too_large"
    default_message = "File too large: file size must be less than 10MB"


class ConfigurationError(GatewayError):
    status_code = 500
    code = "configuration_error"
    default_message = "Server configuration error: API key not found"


class EmptyResponse(GatewayError):
    status_code = 500
    code = "empty_response"
    default_message = "No response generated from AI model"


class MalformedResponse(GatewayError):
    status_code = 500
    code = "malformed_response"
    default_message = "Invalid response format from AI model"


class NoImageInResponse(GatewayError):
    status_code = 500
    code = "no_image_in_response"
    default_message = "No image data found in AI response"


class InvalidCredential(GatewayError):
    status_code = 401
    code = "invalid_credential"
    default_message = "Invalid API key. Please check your Gemini API key and try again."


class QuotaExceeded(GatewayError):
    status_code = 429
    code = "quota_exceeded"
    default_message = "API quota exceeded. Please try again later."


class UpstreamFailure(GatewayError):
    status_code = 500
    code = "upstream_failure"


class UpstreamTimeout(UpstreamFailure):
    """Upstream did not answer within the configured timeout."""

    status_code = 500
    code = "upstream_timeout"
    default_message = "AI model did not respond in time. Please try again."
