"""Context root route: drop cached options and ARB lookups."""

from fastapi import APIRouter

from ..schemas import InvalidateRequest, InvalidateResponse
from ..utils import finder_svc

router = APIRouter()


@router.post("/context_roots/invalidate", response_model=InvalidateResponse)
def invalidate(req: InvalidateRequest) -> InvalidateResponse:
    """Call after analysis_options.yaml, l10n.yaml or the ARB file changed."""
    return InvalidateResponse(invalidated=finder_svc.invalidate(req.root))
