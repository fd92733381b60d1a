"""
Ranked fixes for a flagged literal.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .edit_builder import EditBuilder
from .issue import (
    APPLY_UNCONDITIONALLY,
    FILE_NOT_KNOWN_TO_EXIST,
    PrioritizedSourceChange,
    SourceChange,
    SourceEdit,
    SourceFileEdit,
)
from .lexer import TokenKind
from .scanner import FoundLiteral
from .source import SourceUnit
from .suppression import NON_NLS_MARKER
from .utils import camel_case

logger = logging.getLogger(__name__)

MARKER_PRIORITY = 1
EXPLANATION_PRIORITY = 2
MARKER_COMMENT = f" // {NON_NLS_MARKER}"
STATEMENT_TERMINATOR = ";"


class FixSynthesizer:
    """Builds the fixes for the literals of one source unit.

    One instance serves one analysis pass. It remembers the identifiers it
    handed out so that two different strings mapping to the same camel case
    key get distinct keys within the file.
    """

    def __init__(
        self,
        unit: SourceUnit,
        debug: bool = False,
        edit_builder: Optional[EditBuilder] = None,
    ):
        self.unit = unit
        self.debug = debug
        self.edit_builder = edit_builder or EditBuilder()
        self._issued: Dict[str, str] = {}

    def synthesize(
        self, literal: FoundLiteral, resource_target: Optional[str] = None
    ) -> List[PrioritizedSourceChange]:
        fixes = [self.marker_fix(literal)]
        extraction = self.extraction_fix(literal, resource_target)
        if extraction is not None:
            fixes.append(extraction)
        return sorted(fixes, key=lambda fix: fix.priority, reverse=True)

    @property
    def _file_stamp(self) -> int:
        return APPLY_UNCONDITIONALLY if self.unit.exists else FILE_NOT_KNOWN_TO_EXIST

    def marker_offset(self, literal: FoundLiteral) -> int:
        """After the last `;` on the literal's line, else the end of that line."""
        line_end = self.unit.line_info.get_line_end(literal.char_end)
        tokens = self.unit.tokens
        index = self.unit.token_index_at_or_after(literal.char_end)
        offset = line_end
        while tokens[index].kind != TokenKind.EOF and tokens[index].offset < line_end:
            if tokens[index].lexeme == STATEMENT_TERMINATOR:
                offset = tokens[index].end
            index += 1
        return offset

    def marker_fix(self, literal: FoundLiteral) -> PrioritizedSourceChange:
        return PrioritizedSourceChange(
            MARKER_PRIORITY,
            SourceChange(
                f"Add {MARKER_COMMENT.strip()}",
                edits=[
                    SourceFileEdit(
                        literal.file_path,
                        self._file_stamp,
                        [SourceEdit(self.marker_offset(literal), 0, MARKER_COMMENT)],
                    )
                ],
            ),
        )

    def identifier_for(self, value: str) -> Tuple[str, List[str]]:
        """Identifier for `value` plus the suggestions offered when renaming."""
        base = camel_case(value)
        key = base
        counter = 2
        while self._issued.get(key, value) != value:
            key = f"{base}{counter}"
            counter += 1
        self._issued[key] = value
        return key, [key, f"{base}{counter}"]

    def extraction_fix(
        self, literal: FoundLiteral, resource_target: Optional[str]
    ) -> Optional[PrioritizedSourceChange]:
        value = literal.string_value
        if resource_target is None or value is None:
            logger.debug(
                "No extraction for %s:%s, resource file: %s, static value: %r",
                literal.file_path,
                literal.loc,
                resource_target,
                value,
            )
            if not self.debug:
                return None
            return PrioritizedSourceChange(
                EXPLANATION_PRIORITY,
                SourceChange(
                    "Unable to extract string, "
                    f"resource file: {resource_target or 'not found'} / "
                    f"static value: {'available' if value is not None else 'none'}",
                ),
            )
        identifier, suggestions = self.identifier_for(value)
        return self.edit_builder.build(
            literal,
            identifier,
            resource_target,
            suggestions=suggestions,
            source_exists=self.unit.exists,
        )
