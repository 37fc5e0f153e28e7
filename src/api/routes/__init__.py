from .cuisine import router as cuisine_router
from .regions import router as regions_router

__all__ = ["cuisine_router", "regions_router"]
