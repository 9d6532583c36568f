"""API routes"""
from datetime import datetime
from typing import Callable, List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from sensor_graph.config.logger import logger
from sensor_graph.config.settings import ACK_TEXT, SharedConfig
from sensor_graph.models.schemas import HealthResponse, Reading, WindowEntry
from sensor_graph.routes.dependencies import (
    get_clock,
    get_config,
    get_window,
    submitted_reading,
)
from sensor_graph.services.storage import SlidingWindow, epoch_seconds

router = APIRouter()


@router.post("/submit", response_class=PlainTextResponse)
async def submit(
    reading: Reading = Depends(submitted_reading),
    window: SlidingWindow = Depends(get_window),
    config: SharedConfig = Depends(get_config),
    clock: Callable[[], float] = Depends(get_clock),
):
    """Append a reading to the window, evicting the oldest entry"""
    entry = WindowEntry(data=reading.data, time=epoch_seconds(clock))
    resulting = window.push(entry)

    if config.debug:
        logger.info(f"{reading!r} | {resulting!r}")
    return ACK_TEXT


# Any method triggers a reset, the dashboard only ever sends GET
@router.api_route(
    "/reset",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    response_class=PlainTextResponse,
)
async def reset(
    window: SlidingWindow = Depends(get_window),
    config: SharedConfig = Depends(get_config),
):
    """Refill the whole window with the configured default value"""
    window.reset_all(config.value_default)

    if config.debug:
        logger.info("data reset")
    return ACK_TEXT


@router.get("/get_data", response_model=List[WindowEntry])
async def get_data(window: SlidingWindow = Depends(get_window)):
    """Current window contents, oldest first"""
    return window.snapshot()


@router.get("/health", response_model=HealthResponse)
async def health(config: SharedConfig = Depends(get_config)):
    """Health check endpoint"""
    return {
        "status": "ok",
        "timestamp": datetime.now().isoformat(),
        "value_count": config.value_count,
        "debug": config.debug,
    }
