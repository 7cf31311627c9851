#!/usr/bin/env python3
"""
Run the headshot transform gateway (FastAPI).
Example:
  GEMINI_API_KEY=... python run_gateway.py
"""
from __future__ import annotations

import uvicorn

from headshot_gateway.core.config import get_settings
from headshot_gateway.main import app

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        workers=1,
        log_level=settings.log_level.lower(),
    )
