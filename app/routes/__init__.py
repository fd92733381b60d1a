"""Route handlers."""

from .analysis import router as analysis_router
from .context_roots import router as context_roots_router
from .edit import router as edit_router
from .health import router as health_router
from .root import router as root_router

__all__ = ["root_router", "health_router", "analysis_router", "edit_router", "context_roots_router"]
