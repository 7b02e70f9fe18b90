# routes/health.py

from fastapi import APIRouter

import app as backend

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
def health():
    # Presence only; never echo the keys
    return {
        "ok": True,
        "text_configured": bool(backend.ANTHROPIC_API_KEY),
        "image_configured": bool(backend.GEMINI_API_KEY),
    }
