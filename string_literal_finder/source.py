"""
Source units and line/column bookkeeping.
"""

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import List, Optional

from .ast import CompilationUnit
from .lexer import Token, tokenize


@dataclass(frozen=True)
class CharacterLocation:
    """1-based line and column."""
    line_number: int
    column_number: int

    def __str__(self) -> str:
        return f"{self.line_number}:{self.column_number}"


class LineInfo:
    """Offset table for converting character offsets to line/column."""

    def __init__(self, content: str):
        self.content = content
        self.line_starts: List[int] = [0]
        for i, ch in enumerate(content):
            if ch == "\n":
                self.line_starts.append(i + 1)

    def line_index(self, offset: int) -> int:
        return bisect_right(self.line_starts, offset) - 1

    def get_location(self, offset: int) -> CharacterLocation:
        index = self.line_index(offset)
        return CharacterLocation(index + 1, offset - self.line_starts[index] + 1)

    def line_number(self, offset: int) -> int:
        return self.line_index(offset) + 1

    def get_offset_of_line_after(self, offset: int) -> int:
        """Start of the line following the one containing `offset`."""
        index = self.line_index(offset)
        if index + 1 < len(self.line_starts):
            return self.line_starts[index + 1]
        return len(self.content)

    def get_line_end(self, offset: int) -> int:
        """Offset of the line break ending the line containing `offset`."""
        end = self.get_offset_of_line_after(offset)
        if end > 0 and end <= len(self.content) and self.content[end - 1:end] == "\n":
            end -= 1
            if end > 0 and self.content[end - 1] == "\r":
                end -= 1
        return end


@dataclass
class SourceUnit:
    """One resolved file handed over by the host for a single analysis pass."""
    path: str
    content: str
    root: CompilationUnit
    exists: bool = True
    tokens: Optional[List[Token]] = None
    line_info: LineInfo = field(init=False, repr=False)

    def __post_init__(self):
        self.line_info = LineInfo(self.content)
        if self.tokens is None:
            self.tokens = tokenize(self.content)
        self._token_offsets = [t.offset for t in self.tokens]
        self.root.link()

    def token_index_at_or_after(self, offset: int) -> int:
        """Index of the first token starting at or after `offset` (EOF at worst)."""
        index = bisect_left(self._token_offsets, offset)
        return min(index, len(self.tokens) - 1)

    def slice(self, offset: int, end: int) -> str:
        if len(self.content) < end:
            return ""
        return self.content[offset:end]
