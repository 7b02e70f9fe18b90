"""Structural and semantic validation of inbound payloads.

Rules run in a fixed order and the first failure wins; every failure carries
its own user-facing reason. Nothing here touches the network.
"""
from __future__ import annotations

import base64
import binascii
import datetime as dt
import json
import re
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel

from comedy_styles import is_surprise_me, resolve_style_name
from config import settings
from custom_options import MAX_NARRATIVE_ELEMENTS, available_elements_by_id, get_focus
from models import CustomOptions, GenerationRequest, Headshot, ImageRequest

ALLOWED_HEADSHOT_MIME_TYPES = ("image/jpeg", "image/jpg", "image/png")
# Non-standard spellings browsers send, mapped before forwarding upstream
_MIME_ALIASES = {"image/jpg": "image/jpeg"}

_BASE64_RE = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")


class ValidationResult(BaseModel):
    request: Optional[Union[GenerationRequest, ImageRequest]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def accepted(cls, request: Union[GenerationRequest, ImageRequest]) -> "ValidationResult":
        return cls(request=request)

    @classmethod
    def rejected(cls, reason: str) -> "ValidationResult":
        return cls(error=reason)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


INVALID_BODY = "Invalid request body. Please send a JSON object."


def decode_json_body(raw: Any) -> Tuple[Any, Optional[str]]:
    """Decode a raw request body. Already-decoded values pass through."""
    if not isinstance(raw, (bytes, bytearray, str)):
        return raw, None
    try:
        return json.loads(raw), None
    except ValueError:
        return None, INVALID_BODY


# ----------------------------
# Excuse requests
# ----------------------------

def validate_excuse_request(raw: Any, today: dt.date) -> ValidationResult:
    if not isinstance(raw, dict):
        return ValidationResult.rejected("Request body must be a JSON object.")

    scenario = raw.get("scenario")
    audience = raw.get("audience")

    # 1. presence
    if _is_blank(scenario):
        return ValidationResult.rejected("Scenario is required. Please describe what happened.")
    if _is_blank(audience):
        return ValidationResult.rejected("Audience is required. Please choose who the excuse is for.")

    # 2. types
    if not isinstance(scenario, str):
        return ValidationResult.rejected("Scenario must be a non-empty string.")
    if not isinstance(audience, str):
        return ValidationResult.rejected("Audience must be a non-empty string.")

    # 3. size
    if len(scenario) > settings.max_scenario_chars:
        return ValidationResult.rejected(
            f"Scenario is too long. Please limit to {settings.max_scenario_chars} characters."
        )

    # 4. custom options
    custom_raw = raw.get("customOptions")
    custom: Optional[CustomOptions] = None
    if custom_raw is not None:
        custom, error = _validate_custom_options(custom_raw, today)
        if error:
            return ValidationResult.rejected(error)

    return ValidationResult.accepted(
        GenerationRequest(
            scenario=scenario.strip(),
            audience=audience.strip(),
            custom_options=custom,
        )
    )


def _validate_custom_options(raw: Any, today: dt.date) -> tuple[Optional[CustomOptions], Optional[str]]:
    if not isinstance(raw, dict):
        return None, "Custom options must be an object."

    # style
    style: Optional[str] = None
    style_raw = raw.get("style")
    if style_raw is not None and style_raw != "":
        if not isinstance(style_raw, str):
            return None, "Comedic style must be a string."
        if not is_surprise_me(style_raw):
            style = resolve_style_name(style_raw)
            if style is None:
                return None, f"Unknown comedic style: {style_raw.strip()}."

    # narrative elements
    element_ids: List[str] = []
    elements_raw = raw.get("narrativeElements")
    if elements_raw is not None:
        if not isinstance(elements_raw, list) or not all(isinstance(e, str) for e in elements_raw):
            return None, "Narrative elements must be a list of element ids."
        if len(elements_raw) > MAX_NARRATIVE_ELEMENTS:
            return None, f"Please choose at most {MAX_NARRATIVE_ELEMENTS} narrative elements."
        if len(set(elements_raw)) != len(elements_raw):
            return None, "Narrative elements must not contain duplicates."
        available = available_elements_by_id(today)
        unknown = [e for e in elements_raw if e not in available]
        if unknown:
            return None, f"Narrative element not available: {', '.join(unknown)}."
        element_ids = list(elements_raw)

    # focus
    focus_id: Optional[str] = None
    focus_raw = raw.get("excuseFocus")
    if focus_raw is not None and focus_raw != "":
        if not isinstance(focus_raw, str) or get_focus(focus_raw) is None:
            return None, "Unknown excuse focus."
        focus_id = focus_raw

    return CustomOptions(style=style, narrative_element_ids=tuple(element_ids), focus_id=focus_id), None


# ----------------------------
# Image requests
# ----------------------------

def validate_image_request(raw: Any) -> ValidationResult:
    if not isinstance(raw, dict):
        return ValidationResult.rejected("Request body must be a JSON object.")

    excuse_text = raw.get("excuseText")
    comedic_style = raw.get("comedicStyle")

    if _is_blank(excuse_text):
        return ValidationResult.rejected("Excuse text is required.")
    if _is_blank(comedic_style):
        return ValidationResult.rejected("Comedic style is required.")

    if not isinstance(excuse_text, str):
        return ValidationResult.rejected("Excuse text must be a non-empty string.")
    if not isinstance(comedic_style, str):
        return ValidationResult.rejected("Comedic style must be a string.")

    if len(excuse_text) > settings.max_excuse_text_chars:
        return ValidationResult.rejected(
            f"Excuse text is too long. Please limit to {settings.max_excuse_text_chars} characters."
        )

    style = resolve_style_name(comedic_style)
    if style is None:
        return ValidationResult.rejected("Invalid comedic style provided.")

    headshot, error = _validate_headshot(raw.get("headshotBase64"), raw.get("headshotMimeType"))
    if error:
        return ValidationResult.rejected(error)

    return ValidationResult.accepted(
        ImageRequest(excuse_text=excuse_text.strip(), comedic_style=style, headshot=headshot)
    )


def _validate_headshot(data: Any, mime_type: Any) -> tuple[Optional[Headshot], Optional[str]]:
    has_mime = not _is_blank(mime_type)
    if has_mime and (not isinstance(mime_type, str) or mime_type not in ALLOWED_HEADSHOT_MIME_TYPES):
        return None, "Invalid image type. Only JPG and PNG are allowed."

    if _is_blank(data):
        return None, None

    if not has_mime:
        return None, "Headshot MIME type is required when providing a headshot."
    if not isinstance(data, str):
        return None, "Invalid image format. Please upload a valid image file."
    if len(data) > settings.max_headshot_base64_chars:
        return None, "Image is too large. Please use an image under 5MB."
    if not _BASE64_RE.match(data):
        return None, "Invalid image format. Please upload a valid image file."
    try:
        decoded = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        return None, "Invalid image format. Please upload a valid image file."
    if not decoded:
        return None, "Invalid image format. Please upload a valid image file."

    return Headshot(base64=data, mime_type=_MIME_ALIASES.get(mime_type, mime_type)), None
