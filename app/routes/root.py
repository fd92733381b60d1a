"""Root route."""

from fastapi import APIRouter

from ..schemas import PluginInfo
from ..utils import finder_svc

router = APIRouter()


@router.get("/", response_model=PluginInfo)
def root() -> PluginInfo:
    """Plugin name, version and the files it analyzes."""
    plugin = finder_svc.plugin
    return PluginInfo(name=plugin.name, version=plugin.version, file_globs=list(plugin.file_globs))
