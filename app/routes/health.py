"""Health check route."""

from fastapi import APIRouter

from ..utils import finder_svc

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check, with the number of roots whose settings are cached."""
    return {"status": "ok", "cached_roots": finder_svc.cached_root_count()}
