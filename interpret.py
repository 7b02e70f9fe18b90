"""Turn raw upstream responses into validated results.

The model is asked for bare JSON but sometimes wraps it in a fenced block;
the fences are stripped before decoding. Anything that still does not match
the expected shape fails outright instead of being partially returned.
"""
from __future__ import annotations

import json
import re
from typing import Any, Dict, List

import structlog
from pydantic import ValidationError

from errors import ErrorKind, PipelineError
from models import ExcusePair, GeneratedImage

logger = structlog.get_logger("interpret")

_FENCE_RE = re.compile(r"```(?:json)?[ \t]*\n?", re.IGNORECASE)

# Finish reasons that mean a policy/safety refusal rather than a crash
SAFETY_FINISH_REASONS = {"SAFETY"}
RESTRICTED_FINISH_REASONS = {"IMAGE_OTHER", "IMAGE_SAFETY", "PROHIBITED_CONTENT", "BLOCKLIST"}


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text or "").strip()


def extract_text_payload(data: Dict[str, Any]) -> str:
    """Concatenate the text blocks of a Messages API response."""
    blocks = data.get("content")
    if not isinstance(blocks, list):
        raise PipelineError(ErrorKind.PARSE_ERROR, detail={"reason": "no content blocks"})
    texts: List[str] = [
        b["text"]
        for b in blocks
        if isinstance(b, dict) and b.get("type", "text") == "text" and isinstance(b.get("text"), str)
    ]
    if not texts:
        raise PipelineError(ErrorKind.PARSE_ERROR, detail={"reason": "no text block"})
    return "".join(texts)


def parse_excuse_pair(text: str, comedic_style: str) -> ExcusePair:
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error("response_parse_failed", reason="invalid_json", length=len(cleaned))
        raise PipelineError(ErrorKind.PARSE_ERROR, detail={"reason": "invalid json"}) from e

    if not isinstance(data, dict):
        logger.error("response_parse_failed", reason="not_an_object")
        raise PipelineError(ErrorKind.SCHEMA_ERROR, detail={"reason": "not an object"})

    try:
        return ExcusePair.model_validate(
            {
                "excuse1": data.get("excuse1"),
                "excuse2": data.get("excuse2"),
                "comedicStyle": comedic_style,
            }
        )
    except ValidationError as e:
        logger.error("response_parse_failed", reason="schema", errors=e.error_count())
        raise PipelineError(ErrorKind.SCHEMA_ERROR, detail={"reason": "schema"}) from e


def interpret_excuse_response(data: Dict[str, Any], comedic_style: str) -> ExcusePair:
    return parse_excuse_pair(extract_text_payload(data), comedic_style)


def interpret_image_response(data: Dict[str, Any]) -> GeneratedImage:
    feedback = data.get("promptFeedback") or {}
    block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
    if block_reason:
        logger.warning("image_generation_blocked", reason=block_reason, stage="prompt")
        raise PipelineError(ErrorKind.CONTENT_BLOCKED, detail={"reason": block_reason})

    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        logger.error("image_no_candidates")
        raise PipelineError(ErrorKind.NO_CANDIDATES)

    candidate = candidates[0] if isinstance(candidates[0], dict) else {}
    finish_reason = candidate.get("finishReason")
    if finish_reason and finish_reason != "STOP":
        logger.warning("image_generation_blocked", reason=finish_reason, stage="candidate")
        if finish_reason in SAFETY_FINISH_REASONS:
            raise PipelineError(ErrorKind.CONTENT_BLOCKED, detail={"reason": finish_reason})
        if finish_reason in RESTRICTED_FINISH_REASONS:
            raise PipelineError(ErrorKind.CONTENT_RESTRICTED, detail={"reason": finish_reason})
        raise PipelineError(ErrorKind.GENERATION_STOPPED, detail={"reason": finish_reason})

    content = candidate.get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        logger.error("image_no_content", finish_reason=finish_reason)
        raise PipelineError(ErrorKind.NO_CONTENT)

    for part in parts:
        if not isinstance(part, dict):
            continue
        inline = part.get("inlineData") or part.get("inline_data")
        if isinstance(inline, dict) and inline.get("data"):
            mime = inline.get("mimeType") or inline.get("mime_type") or "image/png"
            return GeneratedImage(mime_type=mime, base64=inline["data"])

    logger.error("image_no_inline_data", parts=len(parts))
    raise PipelineError(ErrorKind.NO_IMAGE_DATA)
