# config.py
# Environment & tunable knobs shared by the pipeline modules and the routes.

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

# ----------------------------
# Environment
# ----------------------------

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
ANTHROPIC_BASE_URL = os.getenv("ANTHROPIC_BASE_URL", "https://api.anthropic.com/v1")
ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-5-20250929")
ANTHROPIC_VERSION = os.getenv("ANTHROPIC_VERSION", "2023-06-01")

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")
GEMINI_IMAGE_MODEL = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image")

FRONT_ORIGIN = os.getenv("FRONT_ORIGIN", "http://localhost:5173")


# ----------------------------
# Config knobs (tunable)
# ----------------------------

class Settings(BaseModel):
    # Rate limiting (per client, per process)
    rate_limit_window_s: int = int(os.getenv("RATE_LIMIT_WINDOW_S", "60"))
    excuse_rate_limit: int = int(os.getenv("EXCUSE_RATE_LIMIT", "20"))
    image_rate_limit: int = int(os.getenv("IMAGE_RATE_LIMIT", "10"))
    rate_limit_sweep_probability: float = 0.01

    # Input caps
    max_scenario_chars: int = 1000
    max_excuse_text_chars: int = 2000
    max_headshot_base64_chars: int = 7 * 1024 * 1024  # ~5MB decoded

    # Upstream calls (single attempt each)
    text_timeout_s: float = float(os.getenv("TEXT_TIMEOUT_S", "30"))
    image_timeout_s: float = float(os.getenv("IMAGE_TIMEOUT_S", "60"))
    text_max_tokens: int = 2000
    image_aspect_ratio: str = "16:9"

    # Limited-time narrative elements are evaluated against this calendar
    calendar_timezone: str = os.getenv("CALENDAR_TIMEZONE", "Europe/London")


settings = Settings()
