"""Request logging middleware"""
import time

from fastapi import Request

from sensor_graph.config.logger import logger


async def log_requests(request: Request, call_next):
    """Log failed requests, and every request while debug is on"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    client_host = request.client.host if request.client else "Unknown"
    line = f"{request.method} {request.url.path} from {client_host} - Status: {response.status_code} ({elapsed_ms:.1f} ms)"
    if response.status_code >= 400:
        logger.warning(line)
    elif request.app.state.config.debug:
        logger.info(line)
    return response
