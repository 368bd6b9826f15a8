from stuff_api.api.http.health import router as health_router
from stuff_api.api.http.stuff import router as stuff_router

__all__ = [
    "health_router",
    "stuff_router"
]
