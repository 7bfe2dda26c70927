"""API routers."""

from .summarize import router as summarize_router
from .transcribe import router as transcribe_router

__all__ = ["summarize_router", "transcribe_router"]
