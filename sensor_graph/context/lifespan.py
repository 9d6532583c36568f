"""Application lifespan management"""
from contextlib import asynccontextmanager

from sensor_graph.config.logger import logger


@asynccontextmanager
async def lifespan(app):
    """
    Manage application lifespan (startup and shutdown).
    The window itself is built by the app factory and simply dropped on shutdown.
    """
    config = app.state.config
    logger.info("Starting sensor graph server...")
    logger.info(
        f"Window ready: {config.value_count} entries "
        f"(default {config.value_default}, debug={config.debug})"
    )

    yield  # Application is running

    logger.info("Shutting down sensor graph server...")
    logger.info("Window discarded, server shut down successfully")
