# generation.py
# Single-attempt calls to the upstream text and image models.
# Every failure leaves this module as a classified PipelineError.

import json
import socket
import threading
import time
from typing import Any, Dict, List, Optional

import requests
import structlog

from errors import ErrorKind, PipelineError
from models import Headshot
from utils import build_anthropic_headers, build_gemini_headers, preview

logger = structlog.get_logger("generation")


def classify_upstream_status(status: int, service: str) -> PipelineError:
    """Map a non-2xx upstream status to a pipeline error kind."""
    if status in (400, 413, 422):
        kind = ErrorKind.UPSTREAM_REJECTED
    elif status in (401, 403, 404):
        # Bad key or model name: a server problem, never the caller's
        kind = ErrorKind.CONFIGURATION
    elif status == 429:
        kind = ErrorKind.UPSTREAM_RATE_LIMITED
    else:
        kind = ErrorKind.UPSTREAM_ERROR

    message = None
    if kind == ErrorKind.UPSTREAM_ERROR:
        message = (
            "Failed to generate image. Please try again."
            if service == "image"
            else "Failed to generate excuses. Please try again."
        )
    return PipelineError(kind, message, detail={"service": service, "status": status})


_CHUNK_BYTES = 64 * 1024


def _response_socket(r: requests.Response) -> Optional[socket.socket]:
    conn = getattr(r.raw, "connection", None) or getattr(r.raw, "_connection", None)
    return getattr(conn, "sock", None)


def _abort_response(r: requests.Response, service: str) -> None:
    """Deadline watchdog: shut the socket so a blocked body read returns at once."""
    sock = _response_socket(r)
    if sock is None:
        return
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError as e:
        # Already closed by the reader
        logger.debug("upstream_abort_skipped", service=service, error=type(e).__name__)


def _timed_out(service: str, timeout_s: float) -> PipelineError:
    logger.error("upstream_timeout", service=service, timeout_s=timeout_s)
    return PipelineError(ErrorKind.TIMEOUT, detail={"service": service})


def _read_body(r: requests.Response, deadline: float, *, timeout_s: float, service: str) -> bytes:
    """Collect the streamed body, giving up once the wall-clock deadline passes.

    ``requests`` only bounds each socket wait, so a body trickled in slowly
    would never time out on its own. A timer shuts the socket at the deadline,
    and the deadline is re-checked after every chunk.
    """
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        r.close()
        raise _timed_out(service, timeout_s)

    watchdog = threading.Timer(remaining, _abort_response, args=(r, service))
    watchdog.daemon = True
    watchdog.start()
    chunks: List[bytes] = []
    try:
        for chunk in r.iter_content(chunk_size=_CHUNK_BYTES):
            if time.monotonic() >= deadline:
                raise _timed_out(service, timeout_s)
            if chunk:
                chunks.append(chunk)
    except (requests.RequestException, OSError) as e:
        if time.monotonic() >= deadline or isinstance(e, requests.Timeout):
            raise _timed_out(service, timeout_s) from e
        logger.error("upstream_network_error", service=service, error=type(e).__name__)
        raise PipelineError(ErrorKind.NETWORK_ERROR, detail={"service": service}) from e
    finally:
        watchdog.cancel()
        r.close()
    return b"".join(chunks)


def _post_json(
    url: str,
    payload: Dict[str, Any],
    headers: Dict[str, str],
    *,
    timeout_s: float,
    service: str,
) -> Dict[str, Any]:
    """One POST, bounded end to end by ``timeout_s`` seconds of wall-clock time."""
    deadline = time.monotonic() + timeout_s
    try:
        r = requests.post(url, json=payload, headers=headers, timeout=timeout_s, stream=True)
    except requests.Timeout as e:
        raise _timed_out(service, timeout_s) from e
    except requests.RequestException as e:
        logger.error("upstream_network_error", service=service, error=type(e).__name__)
        raise PipelineError(ErrorKind.NETWORK_ERROR, detail={"service": service}) from e

    body = _read_body(r, deadline, timeout_s=timeout_s, service=service)

    if not 200 <= r.status_code < 300:
        # Only a short prefix of the body; it may echo the prompt
        logger.error(
            "upstream_http_error",
            service=service,
            status=r.status_code,
            error_preview=preview(body.decode("utf-8", errors="replace")),
        )
        raise classify_upstream_status(r.status_code, service)

    try:
        data = json.loads(body)
    except ValueError as e:
        logger.error("upstream_invalid_json", service=service, status=r.status_code)
        raise PipelineError(ErrorKind.PARSE_ERROR, detail={"service": service}) from e
    if not isinstance(data, dict):
        raise PipelineError(ErrorKind.PARSE_ERROR, detail={"service": service})
    return data



def invoke_text_model(
    prompt: str,
    *,
    api_key: str,
    base_url: str,
    model: str,
    version: str,
    max_tokens: int,
    timeout_s: float,
) -> Dict[str, Any]:
    """One Messages API call. Returns the decoded response body."""
    url = f"{base_url}/messages"
    payload = {
        "model": model,
        "max_tokens": max_tokens,
        "messages": [{"role": "user", "content": prompt}],
    }
    return _post_json(
        url,
        payload,
        build_anthropic_headers(api_key, version),
        timeout_s=timeout_s,
        service="text",
    )


def invoke_image_model(
    prompt: str,
    headshot: Optional[Headshot] = None,
    *,
    api_key: str,
    base_url: str,
    model: str,
    aspect_ratio: str,
    timeout_s: float,
) -> Dict[str, Any]:
    """One generateContent call with image output. Returns the decoded response body."""
    url = f"{base_url}/models/{model}:generateContent"

    parts: List[Dict[str, Any]] = []
    if headshot is not None:
        # Reference image must precede the text prompt
        parts.append({"inline_data": {"mime_type": headshot.mime_type, "data": headshot.base64}})
    parts.append({"text": prompt})

    payload = {
        "contents": [{"parts": parts}],
        "generationConfig": {
            "responseModalities": ["Image"],
            "imageConfig": {"aspectRatio": aspect_ratio},
        },
    }
    return _post_json(
        url,
        payload,
        build_gemini_headers(api_key),
        timeout_s=timeout_s,
        service="image",
    )
