"""
Headshot transform gateway: JPEG upload -> Gemini image model -> PNG data URI.
"""

__version__ = "1.0.0"
