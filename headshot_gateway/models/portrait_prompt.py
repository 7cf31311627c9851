"""
Fixed transformation instruction sent with every upload. Not user-editable.
"""

from __future__ import annotations

PORTRAIT_INSTRUCTION: str = """Transform this headshot photo into a professional portrait while preserving the person's identity and facial features. Make the following enhancements:

1. Replace the background with a clean, neutral, professional studio-like background (soft gradient or solid professional color)
2. Transform clothing to professional business attire (business suit or formal shirt/blouse, professional colors)
3. Enhance hair styling and grooming to professional standards
4. Improve lighting, color balance, and overall image clarity
5. Maintain natural skin tone and facial features exactly as they are
6. Ensure the person looks polished and professional while keeping their authentic appearance
7. Ensure the person is looking directly into the camera
8. Ensure the person is standing straight and confidently
9. Ensure the person is wearing a professional tie or bow tie if appropriate
10. Ensure the person is wearing professional watches and glasses if appropriate

The result should look like a high-quality professional headshot suitable for LinkedIn, corporate websites, or business cards."""

# Media type stamped on the returned data URI.
OUTPUT_MEDIA_TYPE: str = "image/png"
