"""Utility functions for the API."""

from deps import HTTPException, Path

from .schemas import AnalyzeRequest
from .services import FinderService

finder_svc = FinderService()


def validate_paths(req: AnalyzeRequest) -> None:
    """File and root must be absolute, and the file must live under the root."""
    file_path = Path(req.file)
    root = Path(req.root)
    if not file_path.is_absolute() or not root.is_absolute():
        raise HTTPException(400, "file and root must be absolute paths")
    if root != file_path and root not in file_path.parents:
        raise HTTPException(400, f"{req.file} is not inside {req.root}")
