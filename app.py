# app.py
# FastAPI backend for the excuse generator
# Goals:
# - Two contrasting excuses per request (one mundane, one in a comedic style)
# - Optional "photo evidence" image, with or without the caller's headshot
# - Per-client rate limiting before any validation or upstream work
# - One upstream attempt per request, bounded by a hard timeout
# - Every failure mapped to a closed set of error kinds with safe messages

import random
import time
from typing import Any, Optional
import datetime as dt

import logging
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# --- Configure structlog + stdlib logging
logging.basicConfig(format="%(message)s",level=logging.INFO,)
structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),processors=[structlog.processors.TimeStamper(fmt="iso"),structlog.processors.JSONRenderer(), ],)
logger = structlog.get_logger("app")
logger.info("Starting excuse generator backend")

from config import (
    ANTHROPIC_API_KEY,
    ANTHROPIC_BASE_URL,
    ANTHROPIC_MODEL,
    ANTHROPIC_VERSION,
    GEMINI_API_KEY,
    GEMINI_BASE_URL,
    GEMINI_IMAGE_MODEL,
    FRONT_ORIGIN,
    settings,
)
from errors import ErrorKind, PipelineError
from generation import invoke_image_model, invoke_text_model
from interpret import interpret_excuse_response, interpret_image_response
from models import ExcusePair, GeneratedImage, GenerationRequest, ImageRequest
from prompts import compose_excuse_prompt, compose_image_prompt
from rate_limit import RateLimiter
from stores import EXCUSE_WINDOWS, IMAGE_WINDOWS
from utils import local_today
from validation import decode_json_body, validate_excuse_request, validate_image_request


# ----------------------------
# Rate limiters (one per endpoint)
# ----------------------------

excuse_limiter = RateLimiter(
    EXCUSE_WINDOWS,
    max_requests=settings.excuse_rate_limit,
    window_seconds=settings.rate_limit_window_s,
    sweep_probability=settings.rate_limit_sweep_probability,
)
image_limiter = RateLimiter(
    IMAGE_WINDOWS,
    max_requests=settings.image_rate_limit,
    window_seconds=settings.rate_limit_window_s,
    sweep_probability=settings.rate_limit_sweep_probability,
)


def _elapsed_ms(started: float) -> int:
    return int((time.time() - started) * 1000)


def _enforce_rate_limit(limiter: RateLimiter, client_key: str, endpoint: str, started: float) -> None:
    decision = limiter.check(client_key)
    if decision.limited:
        logger.info(
            "rate_limited",
            endpoint=endpoint,
            client=client_key,
            duration_ms=_elapsed_ms(started),
        )
        headers = {"Retry-After": str(decision.retry_after_s)} if decision.retry_after_s else None
        raise PipelineError(ErrorKind.RATE_LIMITED, headers=headers)


def _reject_invalid(reason: str, endpoint: str, client_key: str) -> PipelineError:
    logger.info("validation_failed", endpoint=endpoint, client=client_key, reason=reason)
    return PipelineError(ErrorKind.INPUT_ERROR, reason)


# ----------------------------
# Excuse pipeline
# ----------------------------

def generate_excuses(
    payload: Any,
    client_key: str,
    *,
    today: Optional[dt.date] = None,
    rng: Optional[random.Random] = None,
) -> ExcusePair:
    """Rate limit -> validate -> compose -> call -> interpret."""
    endpoint = "/api/generate-excuses"
    started = time.time()

    _enforce_rate_limit(excuse_limiter, client_key, endpoint, started)

    payload, error = decode_json_body(payload)
    if error:
        raise _reject_invalid(error, endpoint, client_key)

    today = today or local_today(settings.calendar_timezone)
    result = validate_excuse_request(payload, today)
    if not result.ok:
        raise _reject_invalid(result.error, endpoint, client_key)
    request: GenerationRequest = result.request

    if not ANTHROPIC_API_KEY:
        logger.error("ANTHROPIC_API_KEY is not configured")
        raise PipelineError(ErrorKind.CONFIGURATION)

    opts = request.custom_options
    logger.info(
        "request_received",
        endpoint=endpoint,
        client=client_key,
        scenario_length=len(request.scenario),
        requested_style=opts.style if opts else None,
        narrative_elements=list(opts.narrative_element_ids) if opts else [],
        focus=opts.focus_id if opts else None,
    )

    composed = compose_excuse_prompt(request, rng=rng, today=today)
    logger.info("style_selected", endpoint=endpoint, comedic_style=composed.resolved_style)

    try:
        data = invoke_text_model(
            composed.prompt,
            api_key=ANTHROPIC_API_KEY,
            base_url=ANTHROPIC_BASE_URL,
            model=ANTHROPIC_MODEL,
            version=ANTHROPIC_VERSION,
            max_tokens=settings.text_max_tokens,
            timeout_s=settings.text_timeout_s,
        )
        pair = interpret_excuse_response(data, composed.resolved_style)
    except PipelineError as e:
        logger.info(
            "request_failed",
            endpoint=endpoint,
            client=client_key,
            kind=e.kind.value,
            duration_ms=_elapsed_ms(started),
        )
        raise
    except Exception as e:
        logger.error("Error generating excuses", endpoint=endpoint, exc_info=True)
        raise PipelineError(ErrorKind.INTERNAL) from e

    logger.info(
        "success",
        endpoint=endpoint,
        client=client_key,
        comedic_style=pair.comedicStyle,
        duration_ms=_elapsed_ms(started),
    )
    return pair


# ----------------------------
# Image pipeline
# ----------------------------

def generate_image(payload: Any, client_key: str) -> GeneratedImage:
    """Rate limit -> validate -> compose -> call -> interpret."""
    endpoint = "/api/generate-image"
    started = time.time()

    _enforce_rate_limit(image_limiter, client_key, endpoint, started)

    payload, error = decode_json_body(payload)
    if error:
        raise _reject_invalid(error, endpoint, client_key)

    if isinstance(payload, dict):
        text = payload.get("excuseText")
        logger.info(
            "request_received",
            endpoint=endpoint,
            client=client_key,
            excuse_text_length=len(text) if isinstance(text, str) else 0,
            comedic_style=payload.get("comedicStyle"),
            has_headshot=bool(payload.get("headshotBase64")),
            headshot_mime_type=payload.get("headshotMimeType") if payload.get("headshotBase64") else None,
        )

    result = validate_image_request(payload)
    if not result.ok:
        raise _reject_invalid(result.error, endpoint, client_key)
    request: ImageRequest = result.request

    if not GEMINI_API_KEY:
        logger.error("GEMINI_API_KEY is not configured")
        raise PipelineError(ErrorKind.CONFIGURATION)

    prompt = compose_image_prompt(request)

    try:
        data = invoke_image_model(
            prompt,
            request.headshot,
            api_key=GEMINI_API_KEY,
            base_url=GEMINI_BASE_URL,
            model=GEMINI_IMAGE_MODEL,
            aspect_ratio=settings.image_aspect_ratio,
            timeout_s=settings.image_timeout_s,
        )
        image = interpret_image_response(data)
    except PipelineError as e:
        logger.info(
            "request_failed",
            endpoint=endpoint,
            client=client_key,
            kind=e.kind.value,
            duration_ms=_elapsed_ms(started),
        )
        raise
    except Exception as e:
        logger.error("Error generating image", endpoint=endpoint, exc_info=True)
        raise PipelineError(ErrorKind.INTERNAL) from e

    logger.info(
        "success",
        endpoint=endpoint,
        client=client_key,
        comedic_style=request.comedic_style,
        has_headshot=request.headshot is not None,
        image_mime_type=image.mime_type,
        image_size_bytes=len(image.base64),
        duration_ms=_elapsed_ms(started),
    )
    return image


# ----------------------------
# FastAPI app
# ----------------------------
from routes.excuses import router as excuses_router
from routes.images import router as images_router
from routes.options import router as options_router
from routes.health import router as health_router
app = FastAPI(title="Excuse Generator Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[FRONT_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PipelineError)
async def pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    if exc.detail:
        logger.info("pipeline_error_detail", kind=exc.kind.value, **exc.detail)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=exc.headers)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = str(exc.detail)
    if exc.status_code == 405:
        message = "Method not allowed. Please use POST."
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


app.include_router(excuses_router)
app.include_router(images_router)
app.include_router(options_router)
app.include_router(health_router)
