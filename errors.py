"""Closed set of pipeline failure kinds and their caller-facing rendering."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ErrorKind(str, Enum):
    INPUT_ERROR = "input_error"
    RATE_LIMITED = "rate_limited"
    CONFIGURATION = "configuration"
    UPSTREAM_REJECTED = "upstream_rejected"
    UPSTREAM_RATE_LIMITED = "upstream_rate_limited"
    UPSTREAM_ERROR = "upstream_error"
    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"
    CONTENT_BLOCKED = "content_blocked"
    CONTENT_RESTRICTED = "content_restricted"
    GENERATION_STOPPED = "generation_stopped"
    NO_CANDIDATES = "no_candidates"
    NO_CONTENT = "no_content"
    NO_IMAGE_DATA = "no_image_data"
    PARSE_ERROR = "parse_error"
    SCHEMA_ERROR = "schema_error"
    INTERNAL = "internal"


# kind -> (status, default user-facing message)
ERROR_CATALOG: Dict[ErrorKind, Tuple[int, str]] = {
    ErrorKind.INPUT_ERROR: (400, "Invalid request. Please check your input and try again."),
    ErrorKind.RATE_LIMITED: (429, "Too many requests. Please try again in a few moments."),
    ErrorKind.CONFIGURATION: (500, "Server configuration error. Please contact support."),
    ErrorKind.UPSTREAM_REJECTED: (
        400,
        "Invalid request to the generation service. Please try a different prompt.",
    ),
    ErrorKind.UPSTREAM_RATE_LIMITED: (429, "Rate limit exceeded. Please try again in a few moments."),
    ErrorKind.UPSTREAM_ERROR: (500, "Failed to generate a response. Please try again."),
    ErrorKind.NETWORK_ERROR: (500, "An unexpected error occurred. Please try again."),
    ErrorKind.TIMEOUT: (504, "Request timed out. Please try again."),
    ErrorKind.CONTENT_BLOCKED: (
        400,
        "Image generation blocked by safety filters. Please try a different excuse or omit the photo.",
    ),
    ErrorKind.CONTENT_RESTRICTED: (
        500,
        "Image generation failed due to content restrictions. "
        "Please try without uploading a photo, or try a different excuse.",
    ),
    ErrorKind.GENERATION_STOPPED: (
        500,
        "Failed to generate image. Please try again with a different prompt.",
    ),
    ErrorKind.NO_CANDIDATES: (500, "Failed to generate image. Please try again."),
    ErrorKind.NO_CONTENT: (
        500,
        "Failed to generate image. The API returned no content. Please try again.",
    ),
    ErrorKind.NO_IMAGE_DATA: (
        500,
        "Failed to generate image. The model may not support image generation.",
    ),
    ErrorKind.PARSE_ERROR: (500, "Failed to process excuses. Please try again."),
    ErrorKind.SCHEMA_ERROR: (500, "Received invalid response format. Please try again."),
    ErrorKind.INTERNAL: (500, "An unexpected error occurred. Please try again."),
}


class PipelineError(Exception):
    """A classified failure of the excuse/image pipeline.

    ``message`` is safe to show to the caller. ``detail`` is diagnostic data
    for the server log only and is never rendered into a response.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        *,
        detail: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        status, default_message = ERROR_CATALOG[kind]
        self.kind = kind
        self.status_code = status
        self.message = message or default_message
        self.detail = detail or {}
        self.headers = headers
        super().__init__(self.message)

    def to_body(self) -> Dict[str, str]:
        return {"error": self.message}
