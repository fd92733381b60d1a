"""Edit route: fixes at a cursor offset."""

from fastapi import APIRouter

from ..schemas import GetFixesRequest, GetFixesResponse
from ..utils import finder_svc, validate_paths

router = APIRouter()


@router.post("/edit/fixes", response_model=GetFixesResponse)
def edit_fixes(req: GetFixesRequest) -> GetFixesResponse:
    """Diagnostics covering `offset`, with their fixes."""
    validate_paths(req)
    return finder_svc.get_fixes(req)
