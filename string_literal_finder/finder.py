"""
Main finder class that coordinates scanning, fixes and diagnostics for a file.
"""

import logging
from typing import List, Optional

from .diagnostics import DiagnosticAssembler
from .fixes import FixSynthesizer
from .issue import AnalysisErrorFixes
from .scanner import FoundLiteral, LiteralScanner
from .source import SourceUnit
from .type_matcher import DEFAULT_IGNORE_SET, IgnoreSet

logger = logging.getLogger(__name__)


class StringLiteralFinder:
    """Finds localizable string literals of a resolved unit and proposes fixes.

    A pass over one unit keeps no state once it returns, so the same finder
    may serve different files from several threads.
    """

    def __init__(self, ignore_set: IgnoreSet = DEFAULT_IGNORE_SET):
        self.scanner = LiteralScanner(ignore_set)

    def find(self, unit: SourceUnit) -> List[FoundLiteral]:
        return list(self.scanner.scan(unit))

    def check(
        self,
        unit: SourceUnit,
        resource_target: Optional[str] = None,
        debug: bool = False,
    ) -> List[AnalysisErrorFixes]:
        """One diagnostic per literal that is not suppressed."""
        synthesizer = FixSynthesizer(unit, debug=debug)
        assembler = DiagnosticAssembler(unit)
        errors: List[AnalysisErrorFixes] = []
        for literal in self.scanner.scan(unit):
            try:
                fixes = synthesizer.synthesize(literal, resource_target)
                errors.append(assembler.assemble(literal, fixes))
            except Exception:
                logger.exception(
                    "Dropping literal at %s:%s, unable to build fixes",
                    unit.path,
                    literal.loc,
                )
        logger.debug("Found %d literals in %s", len(errors), unit.path)
        return errors

    def fixes_at(
        self,
        unit: SourceUnit,
        offset: int,
        resource_target: Optional[str] = None,
        debug: bool = False,
    ) -> List[AnalysisErrorFixes]:
        """Diagnostics whose range contains `offset` and that offer fixes."""
        return [
            e
            for e in self.check(unit, resource_target, debug)
            if e.error.location.file == unit.path
            and e.error.location.contains(offset)
            and e.fixes
        ]
