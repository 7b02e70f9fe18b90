# routes/excuses.py
# Excuse generation endpoint. All work happens in app.generate_excuses.

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool

from app import generate_excuses as run_excuse_pipeline
from rate_limit import client_key_from_request

router = APIRouter(prefix="/api", tags=["excuses"])


@router.post("/generate-excuses")
async def generate_excuses(request: Request):
    # Raw bytes: decoding happens after the rate limit
    body = await request.body()
    client_key = client_key_from_request(
        request.headers, request.client.host if request.client else None
    )
    pair = await run_in_threadpool(run_excuse_pipeline, body, client_key)
    return pair.model_dump()
