import datetime as dt
from typing import Dict
from zoneinfo import ZoneInfo


def local_today(tz_name: str) -> dt.date:
    """Current calendar date in the given timezone."""
    return dt.datetime.now(ZoneInfo(tz_name)).date()


def preview(text: str, limit: int = 200) -> str:
    """Short prefix of an upstream body, safe to put in a log line."""
    return (text or "")[:limit]


def build_anthropic_headers(api_key: str, version: str) -> Dict[str, str]:
    """HTTP headers for the Anthropic Messages API."""
    return {
        "x-api-key": api_key,
        "anthropic-version": version,
        "Content-Type": "application/json",
    }


def build_gemini_headers(api_key: str) -> Dict[str, str]:
    """HTTP headers for the Gemini API (key in header, not in the URL)."""
    return {
        "x-goog-api-key": api_key,
        "Content-Type": "application/json",
    }
