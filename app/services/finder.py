"""Finder service: wraps string_literal_finder and maps to API models."""

from deps import HTTPException, List, Optional

from string_literal_finder.issue import (
    AnalysisErrorFixes,
    LinkedEditGroup,
    PluginError,
    Position,
    PrioritizedSourceChange,
    SourceFileEdit,
)
from string_literal_finder.plugin import AnalysisResult, StringLiteralFinderPlugin
from string_literal_finder.reporter import ReportGenerator
from string_literal_finder.source import SourceUnit

from ..schemas import (
    AnalysisErrorFixesOut,
    AnalysisErrorOut,
    AnalysisErrorsResponse,
    AnalyzeRequest,
    GetFixesRequest,
    GetFixesResponse,
    LinkedEditGroupOut,
    LinkedEditSuggestionOut,
    LocationOut,
    PluginErrorOut,
    PositionOut,
    PrioritizedSourceChangeOut,
    SourceChangeOut,
    SourceEditOut,
    SourceFileEditOut,
)
from .tree_loader import TreeFormatError, to_unit_root


def _position_out(p: Optional[Position]) -> Optional[PositionOut]:
    if p is None:
        return None
    return PositionOut(file=p.file, offset=p.offset)


def _file_edit_out(e: SourceFileEdit) -> SourceFileEditOut:
    return SourceFileEditOut(
        file=e.file,
        file_stamp=e.file_stamp,
        edits=[SourceEditOut(offset=s.offset, length=s.length, replacement=s.replacement) for s in e.edits],
    )


def _group_out(g: LinkedEditGroup) -> LinkedEditGroupOut:
    return LinkedEditGroupOut(
        positions=[_position_out(p) for p in g.positions],
        length=g.length,
        suggestions=[LinkedEditSuggestionOut(value=s.value, kind=s.kind.value) for s in g.suggestions],
    )


def _fix_out(f: PrioritizedSourceChange) -> PrioritizedSourceChangeOut:
    change = f.change
    return PrioritizedSourceChangeOut(
        priority=f.priority,
        change=SourceChangeOut(
            message=change.message,
            edits=[_file_edit_out(e) for e in change.edits],
            linked_edit_groups=[_group_out(g) for g in change.linked_edit_groups],
            selection=_position_out(change.selection),
            id=change.id,
        ),
    )


def _error_to_out(e: AnalysisErrorFixes) -> AnalysisErrorFixesOut:
    error = e.error
    loc = error.location
    return AnalysisErrorFixesOut(
        error=AnalysisErrorOut(
            severity=error.severity.value,
            type=error.type.value,
            location=LocationOut(
                file=loc.file,
                offset=loc.offset,
                length=loc.length,
                start_line=loc.start_line,
                start_column=loc.start_column,
                end_line=loc.end_line,
                end_column=loc.end_column,
            ),
            message=error.message,
            code=error.code,
            correction=error.correction,
            has_fix=error.has_fix,
        ),
        fixes=[_fix_out(f) for f in e.fixes],
    )


def _plugin_error_out(p: Optional[PluginError]) -> Optional[PluginErrorOut]:
    if p is None:
        return None
    return PluginErrorOut(is_fatal=p.is_fatal, message=p.message, stack_trace=p.stack_trace)


class FinderService:
    """Wraps StringLiteralFinderPlugin for use by the API."""

    def __init__(self, plugin: Optional[StringLiteralFinderPlugin] = None):
        self.plugin = plugin or StringLiteralFinderPlugin()

    def build_unit(self, req: AnalyzeRequest) -> SourceUnit:
        """Source unit for a request; malformed trees are a client error."""
        try:
            root = to_unit_root(req.unit)
        except TreeFormatError as e:
            raise HTTPException(400, str(e))
        if root.end > len(req.content):
            raise HTTPException(400, "Tree extends past the end of content")
        return SourceUnit(path=req.file, content=req.content, root=root, exists=req.exists)

    def analyze(self, req: AnalyzeRequest) -> AnalysisErrorsResponse:
        """Full replacement set of diagnostics for the requested file."""
        result = self.plugin.analyze(self.build_unit(req), req.root)
        return AnalysisErrorsResponse(
            file=result.file,
            errors=[_error_to_out(e) for e in result.errors],
            plugin_error=_plugin_error_out(result.plugin_error),
        )

    def get_fixes(self, req: GetFixesRequest) -> GetFixesResponse:
        result = self.plugin.get_fixes(self.build_unit(req), req.root, req.offset)
        return GetFixesResponse(
            fixes=[_error_to_out(e) for e in result.errors],
            plugin_error=_plugin_error_out(result.plugin_error),
        )

    def report(self, req: AnalyzeRequest) -> str:
        """Plain-text report for the requested file."""
        result: AnalysisResult = self.plugin.analyze(self.build_unit(req), req.root)
        text = ReportGenerator.generate_text_report(result.errors, result.file)
        if result.plugin_error is not None:
            text += f"\nAnalysis failed: {result.plugin_error.message}\n"
        return text

    def invalidate(self, root: Optional[str] = None) -> List[str]:
        return self.plugin.invalidate(root)

    def cached_root_count(self) -> int:
        return len(self.plugin.cached_roots())
