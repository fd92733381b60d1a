"""
String literal finder: flags string literals that should be localized and
proposes fixes that move them into an ARB resource file.
"""

from .finder import StringLiteralFinder
from .issue import AnalysisErrorFixes, PrioritizedSourceChange, Severity
from .plugin import AnalysisResult, StringLiteralFinderPlugin
from .scanner import FoundLiteral, LiteralScanner
from .source import SourceUnit
from .suppression import SuppressionClassifier

__all__ = [
    'StringLiteralFinder',
    'StringLiteralFinderPlugin',
    'AnalysisResult',
    'AnalysisErrorFixes',
    'PrioritizedSourceChange',
    'Severity',
    'FoundLiteral',
    'LiteralScanner',
    'SourceUnit',
    'SuppressionClassifier',
]
