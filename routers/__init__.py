from .colorCode import router as colorCode_router

__all__ = ["colorCode_router"]
