from scoopdash.api.analysis import router as analysis_router
from scoopdash.api.health import router as health_router

__all__ = [
    "analysis_router",
    "health_router",
]
