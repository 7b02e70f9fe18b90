# routes/images.py
# "Photo evidence" endpoint. Returns the image inline as a data URI.

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool

from app import generate_image as run_image_pipeline
from models import ImageResponse
from rate_limit import client_key_from_request

router = APIRouter(prefix="/api", tags=["images"])


@router.post("/generate-image", response_model=ImageResponse)
async def generate_image(request: Request):
    body = await request.body()
    client_key = client_key_from_request(
        request.headers, request.client.host if request.client else None
    )
    image = await run_in_threadpool(run_image_pipeline, body, client_key)
    return ImageResponse(imageUrl=image.data_uri)
