"""
Diagnostic and fix data models returned to the host.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# Version guard values for SourceFileEdit.
APPLY_UNCONDITIONALLY = 0
FILE_NOT_KNOWN_TO_EXIST = -1


class Severity(Enum):
    """Issue severity levels."""
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class ErrorType(Enum):
    LINT = "LINT"
    HINT = "HINT"


class LinkedEditSuggestionKind(Enum):
    VARIABLE = "VARIABLE"
    METHOD = "METHOD"
    TYPE = "TYPE"
    PARAMETER = "PARAMETER"


@dataclass(frozen=True)
class Location:
    """Where a diagnostic applies; lines and columns are 1-based."""
    file: str
    offset: int
    length: int
    start_line: int
    start_column: int
    end_line: int
    end_column: int

    def contains(self, offset: int) -> bool:
        return self.offset <= offset <= self.offset + self.length


@dataclass(frozen=True)
class Position:
    file: str
    offset: int


@dataclass(frozen=True)
class SourceEdit:
    """Replace `length` characters at `offset` with `replacement`."""
    offset: int
    length: int
    replacement: str

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass
class SourceFileEdit:
    """Edits for one file, applied together against one snapshot."""
    file: str
    file_stamp: int
    edits: List[SourceEdit] = field(default_factory=list)


@dataclass(frozen=True)
class LinkedEditSuggestion:
    value: str
    kind: LinkedEditSuggestionKind = LinkedEditSuggestionKind.VARIABLE


@dataclass
class LinkedEditGroup:
    """Positions that hold the same identifier, renamed together."""
    positions: List[Position]
    length: int
    suggestions: List[LinkedEditSuggestion] = field(default_factory=list)


@dataclass
class SourceChange:
    message: str
    edits: List[SourceFileEdit] = field(default_factory=list)
    linked_edit_groups: List[LinkedEditGroup] = field(default_factory=list)
    selection: Optional[Position] = None
    id: Optional[str] = None


@dataclass
class PrioritizedSourceChange:
    """A candidate fix; the host offers the highest priority first."""
    priority: int
    change: SourceChange


@dataclass
class AnalysisError:
    severity: Severity
    type: ErrorType
    location: Location
    message: str
    code: str
    correction: Optional[str] = None
    has_fix: bool = False


@dataclass
class AnalysisErrorFixes:
    """A diagnostic together with its ranked fixes."""
    error: AnalysisError
    fixes: List[PrioritizedSourceChange] = field(default_factory=list)


@dataclass
class PluginError:
    """Non-fatal failure notification for the host."""
    is_fatal: bool
    message: str
    stack_trace: str
