"""Analysis routes: diagnostics and text report for one file."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..schemas import AnalysisErrorsResponse, AnalyzeRequest
from ..utils import finder_svc, validate_paths

router = APIRouter()


@router.post("/analysis/errors", response_model=AnalysisErrorsResponse)
def analysis_errors(req: AnalyzeRequest) -> AnalysisErrorsResponse:
    """All diagnostics of the file. The result replaces anything sent before for it."""
    validate_paths(req)
    return finder_svc.analyze(req)


@router.post("/analysis/report", response_class=PlainTextResponse)
def analysis_report(req: AnalyzeRequest) -> str:
    """Same analysis as /analysis/errors, rendered as text."""
    validate_paths(req)
    return finder_svc.report(req)
