"""Services for the finder integration."""

from .finder import FinderService

__all__ = ["FinderService"]
