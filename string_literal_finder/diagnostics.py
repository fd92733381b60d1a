"""
Turns a found literal and its fixes into a diagnostic for the host.
"""

from typing import List

from .issue import (
    AnalysisError,
    AnalysisErrorFixes,
    ErrorType,
    Location,
    PrioritizedSourceChange,
    Severity,
)
from .scanner import FoundLiteral
from .source import SourceUnit

ERROR_CODE = "found_string_literal"
CORRECTION = (
    "Externalize string, add nonNls() decorator method "
    "or annotate the parameter with @NonNlsArg(), "
    "or add // NON-NLS to end of line."
)


class DiagnosticAssembler:
    """Packages literals of one unit as `found_string_literal` warnings."""

    def __init__(self, unit: SourceUnit):
        self.unit = unit

    def location(self, literal: FoundLiteral) -> Location:
        return Location(
            file=literal.file_path,
            offset=literal.char_offset,
            length=literal.char_length,
            start_line=literal.loc.line_number,
            start_column=literal.loc.column_number,
            end_line=literal.loc_end.line_number,
            end_column=literal.loc_end.column_number,
        )

    def assemble(
        self, literal: FoundLiteral, fixes: List[PrioritizedSourceChange]
    ) -> AnalysisErrorFixes:
        text = literal.string_value
        if text is None:
            text = self.unit.slice(literal.char_offset, literal.char_end).strip()
        return AnalysisErrorFixes(
            AnalysisError(
                severity=Severity.WARNING,
                type=ErrorType.LINT,
                location=self.location(literal),
                message=f"Found string literal: {text}",
                code=ERROR_CODE,
                correction=CORRECTION,
                has_fix=bool(fixes),
            ),
            fixes=list(fixes),
        )
