"""
Host-facing adapter: per-root settings, exclusions and failure reporting.
"""

import logging
import os
import threading
import traceback
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .arb import find_arb_file
from .finder import StringLiteralFinder
from .issue import AnalysisErrorFixes, PluginError
from .options import AnalysisOptions, load_options
from .source import SourceUnit
from .utils import is_generated_file, setup_debug_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RootSettings:
    """What was loaded for one analysis root."""
    options: AnalysisOptions
    arb_file: Optional[Path]


@dataclass
class AnalysisResult:
    """Full replacement set of diagnostics for one file."""
    file: str
    errors: List[AnalysisErrorFixes] = field(default_factory=list)
    plugin_error: Optional[PluginError] = None


class StringLiteralFinderPlugin:
    """Runs the finder for files of analysis roots on behalf of the host."""

    name = "String Literal Finder"
    version = "1.0.0"
    file_globs = ["**/*.dart"]

    def __init__(self, finder: Optional[StringLiteralFinder] = None):
        self.finder = finder or StringLiteralFinder()
        self._settings: Dict[str, RootSettings] = {}
        self._settings_lock = threading.Lock()

    def settings_for(self, root: str) -> RootSettings:
        """Cached per root until `invalidate` drops it."""
        key = os.path.normpath(root)
        with self._settings_lock:
            settings = self._settings.get(key)
            if settings is None:
                settings = RootSettings(load_options(Path(key)), find_arb_file(Path(key)))
                if settings.options.debug:
                    setup_debug_logging()
                self._settings[key] = settings
        return settings

    def cached_roots(self) -> List[str]:
        with self._settings_lock:
            return sorted(self._settings)

    def invalidate(self, root: Optional[str] = None) -> List[str]:
        """Forget cached settings of `root`, or of every root when None."""
        key = None if root is None else os.path.normpath(root)
        with self._settings_lock:
            if key is None:
                dropped = sorted(self._settings)
                self._settings.clear()
                return dropped
            if self._settings.pop(key, None) is None:
                return []
            return [key]

    def is_excluded(self, path: str, root: str, settings: RootSettings) -> bool:
        relative = os.path.relpath(path, root)
        if relative == ".." or relative.startswith(".." + os.sep):
            logger.debug("Not analyzed, outside of %s: %s", root, path)
            return True
        return is_generated_file(relative) or settings.options.is_excluded(relative)

    def analyze(self, unit: SourceUnit, root: str) -> AnalysisResult:
        """Diagnostics for `unit`; failures become a non-fatal plugin error."""
        try:
            settings = self.settings_for(root)
            if self.is_excluded(unit.path, root, settings):
                logger.debug("Excluded from analysis: %s", unit.path)
                return AnalysisResult(unit.path)
            errors = self.finder.check(
                unit, self._resource_target(settings), debug=settings.options.debug
            )
            return AnalysisResult(unit.path, errors)
        except Exception as e:
            return self._failed(unit.path, e)

    def get_fixes(self, unit: SourceUnit, root: str, offset: int) -> AnalysisResult:
        """Diagnostics with fixes at `offset`, as asked for by an editor."""
        try:
            settings = self.settings_for(root)
            if self.is_excluded(unit.path, root, settings):
                return AnalysisResult(unit.path)
            errors = self.finder.fixes_at(
                unit, offset, self._resource_target(settings), debug=settings.options.debug
            )
            return AnalysisResult(unit.path, errors)
        except Exception as e:
            return self._failed(unit.path, e)

    def _resource_target(self, settings: RootSettings) -> Optional[str]:
        return str(settings.arb_file) if settings.arb_file is not None else None

    def _failed(self, path: str, error: Exception) -> AnalysisResult:
        logger.exception("Error while analysing file %s", path)
        return AnalysisResult(
            path,
            plugin_error=PluginError(
                is_fatal=False,
                message=f"string_literal_finder. Unexpected error: {error}",
                stack_trace=traceback.format_exc(),
            ),
        )
