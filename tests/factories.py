"""
Builders for google-genai response objects used across the test suites.
"""

from __future__ import annotations

from google.genai import types


def make_response(*parts: types.Part) -> types.GenerateContentResponse:
    """Single-candidate response carrying the given parts, in order."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def image_part(data: bytes, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(mime_type=mime_type, data=data))


def text_part(text: str) -> types.Part:
    return types.Part(text=text)
