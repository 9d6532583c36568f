"""FastAPI application factory"""
import time
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from sensor_graph import __version__
from sensor_graph.config.logger import logger
from sensor_graph.config.settings import Settings, SharedConfig
from sensor_graph.context.lifespan import lifespan
from sensor_graph.middleware.logging import log_requests
from sensor_graph.routes import api_router, static_router
from sensor_graph.services.storage import SlidingWindow


def create_app(
    settings: Settings,
    window: Optional[SlidingWindow] = None,
    clock: Callable[[], float] = time.time,
) -> FastAPI:
    """Build the server around one shared sliding window"""
    app = FastAPI(
        title="Sensor Graph Server",
        version=__version__,
        lifespan=lifespan
    )

    app.state.config = SharedConfig(settings)
    if window is None:
        window = SlidingWindow(settings.value_count, settings.value_default)
    app.state.window = window
    app.state.clock = clock

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request logging middleware
    app.middleware("http")(log_requests)

    # Include routers
    app.include_router(api_router)
    app.include_router(static_router)

    # Client bundle
    if settings.pkg_dir.is_dir():
        app.mount("/pkg", StaticFiles(directory=settings.pkg_dir), name="pkg")
    else:
        logger.warning(f"Client bundle directory {settings.pkg_dir} not found, /pkg disabled")

    return app
