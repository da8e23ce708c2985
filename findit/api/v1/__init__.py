from .health_controller import router as health_router
from .media_controller import router as media_router


__all__ = ["health_router", "media_router"]
