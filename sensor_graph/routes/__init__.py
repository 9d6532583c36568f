from sensor_graph.routes.api import router as api_router
from sensor_graph.routes.static import router as static_router

__all__ = ["api_router", "static_router"]
