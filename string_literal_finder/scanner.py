"""
Finds the string literals of a source unit that should be localized.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .ast import StringLiteral
from .source import CharacterLocation, SourceUnit
from .suppression import SuppressionClassifier
from .type_matcher import DEFAULT_IGNORE_SET, IgnoreSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoundLiteral:
    """Information about a string literal found in source code."""
    file_path: str
    char_offset: int
    char_length: int
    loc: CharacterLocation
    loc_end: CharacterLocation
    string_value: Optional[str]
    node: StringLiteral = field(compare=False, repr=False)

    @property
    def char_end(self) -> int:
        return self.char_offset + self.char_length


class LiteralScanner:
    """Visits string literals in document order and skips suppressed ones."""

    def __init__(self, ignore_set: IgnoreSet = DEFAULT_IGNORE_SET):
        self.ignore_set = ignore_set

    def scan(self, unit: SourceUnit) -> Iterator[FoundLiteral]:
        classifier = SuppressionClassifier(unit, self.ignore_set)
        line_info = unit.line_info
        for node in unit.root.walk():
            if not isinstance(node, StringLiteral):
                continue
            if classifier.should_suppress(node):
                continue
            found = FoundLiteral(
                file_path=unit.path,
                char_offset=node.offset,
                char_length=node.length,
                loc=line_info.get_location(node.offset),
                loc_end=line_info.get_location(node.end),
                string_value=node.string_value,
                node=node,
            )
            logger.debug(
                "Found string literal (%s) %s - parent: %s",
                found.loc,
                unit.slice(node.offset, node.end),
                type(node.parent).__name__,
            )
            yield found
