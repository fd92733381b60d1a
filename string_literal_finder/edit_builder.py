"""
Builds the two-file edit that moves a literal into the ARB resource file.
"""

import json
from typing import Optional, Sequence

from .issue import (
    APPLY_UNCONDITIONALLY,
    FILE_NOT_KNOWN_TO_EXIST,
    LinkedEditGroup,
    LinkedEditSuggestion,
    LinkedEditSuggestionKind,
    Position,
    PrioritizedSourceChange,
    SourceChange,
    SourceEdit,
    SourceFileEdit,
)
from .scanner import FoundLiteral

EXTRACT_STRING_PRIORITY = 10
EXTRACT_STRING_ID = "extract_string"

# Right after the opening "{\n" of the ARB document. A fixed anchor keeps
# repeated extractions stable without parsing the file.
ARB_EDIT_OFFSET = 2
ARB_INDENT = "  "
ACCESSOR = "loc"


class EditBuilder:
    """Creates the extraction fix for one literal."""

    def __init__(
        self,
        accessor: str = ACCESSOR,
        anchor_offset: int = ARB_EDIT_OFFSET,
        indent: str = ARB_INDENT,
    ):
        self.accessor = accessor
        self.anchor_offset = anchor_offset
        self.indent = indent

    def arb_lines(self, identifier: str, value: str) -> Sequence[str]:
        """The value entry and its metadata entry, newline terminated."""
        return (
            f'{self.indent}"{identifier}": {json.dumps(value, ensure_ascii=False)},\n',
            f'{self.indent}"@{identifier}": {{}},\n',
        )

    def reference(self, identifier: str) -> str:
        return f"{self.accessor}.{identifier}"

    def build(
        self,
        literal: FoundLiteral,
        identifier: str,
        resource_path: str,
        suggestions: Optional[Sequence[str]] = None,
        source_exists: bool = True,
    ) -> PrioritizedSourceChange:
        if literal.string_value is None:
            raise ValueError(f"Literal at {literal.loc} has no static value")

        first_line, second_line = self.arb_lines(identifier, literal.string_value)
        arb_edit = SourceFileEdit(
            resource_path,
            APPLY_UNCONDITIONALLY,
            [SourceEdit(self.anchor_offset, 0, first_line + second_line)],
        )
        source_edit = SourceFileEdit(
            literal.file_path,
            APPLY_UNCONDITIONALLY if source_exists else FILE_NOT_KNOWN_TO_EXIST,
            [SourceEdit(literal.char_offset, literal.char_length, self.reference(identifier))],
        )

        # Offsets point into the text after the edits above are applied.
        key_offset = self.anchor_offset + len(self.indent) + 1
        metadata_key_offset = self.anchor_offset + len(first_line) + len(self.indent) + 2
        reference_offset = literal.char_offset + len(self.accessor) + 1
        group = LinkedEditGroup(
            positions=[
                Position(resource_path, key_offset),
                Position(resource_path, metadata_key_offset),
                Position(literal.file_path, reference_offset),
            ],
            length=len(identifier),
            suggestions=[
                LinkedEditSuggestion(s, LinkedEditSuggestionKind.VARIABLE)
                for s in (suggestions or [identifier])
            ],
        )

        return PrioritizedSourceChange(
            EXTRACT_STRING_PRIORITY,
            SourceChange(
                f"Extract string with name {identifier}",
                edits=[arb_edit, source_edit],
                linked_edit_groups=[group],
                selection=Position(resource_path, self.anchor_offset),
                id=EXTRACT_STRING_ID,
            ),
        )
