"""Request dependencies shared by the API routes"""
from typing import Callable

from fastapi import HTTPException, Request
from pydantic import ValidationError

from sensor_graph.config.settings import MAX_SUBMIT_BYTES, SharedConfig
from sensor_graph.models.schemas import Reading
from sensor_graph.services.storage import SlidingWindow


def get_window(request: Request) -> SlidingWindow:
    return request.app.state.window


def get_config(request: Request) -> SharedConfig:
    return request.app.state.config


def get_clock(request: Request) -> Callable[[], float]:
    return request.app.state.clock


async def read_limited_body(request: Request, limit: int = MAX_SUBMIT_BYTES) -> bytes:
    """Read the request body, rejecting anything larger than limit bytes"""
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise HTTPException(status_code=413, detail=f"Payload exceeds {limit} bytes")

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise HTTPException(status_code=413, detail=f"Payload exceeds {limit} bytes")
    return bytes(body)


async def submitted_reading(request: Request) -> Reading:
    """Parse the submit body into a Reading"""
    body = await read_limited_body(request)
    try:
        return Reading.model_validate_json(body)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise HTTPException(status_code=400, detail=f"Invalid reading: {messages}")
