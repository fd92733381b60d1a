"""
Nominal type matching against the ignore set.
"""

import logging
from typing import Iterable, Optional, Tuple

from .elements import NominalType

logger = logging.getLogger(__name__)

# Supertype chains deeper than this are not followed.
MAX_SUPERTYPE_DEPTH = 32


class TypeChecker:
    """Matches a type, or any of its supertypes, against one nominal type."""

    def __init__(self, library: str, name: str):
        self.library = library
        self.name = name

    @classmethod
    def from_url(cls, url: str) -> "TypeChecker":
        """Build from `package:some/lib.dart#TypeName`."""
        library, _, name = url.partition("#")
        if not name:
            raise ValueError(f"Type url needs a '#Name' suffix: {url}")
        return cls(library, name)

    @property
    def url(self) -> str:
        return f"{self.library}#{self.name}"

    def is_exactly(self, candidate: NominalType) -> bool:
        return candidate.name == self.name and candidate.library == self.library

    def is_assignable_from(self, candidate: Optional[NominalType]) -> bool:
        """True if `candidate` is this type or a transitive subtype of it."""
        if candidate is None:
            logger.warning("Unable to match unresolved type against %s", self.url)
            return False
        pending = [(candidate, 0)]
        seen = set()
        while pending:
            current, depth = pending.pop()
            if self.is_exactly(current):
                return True
            if depth >= MAX_SUPERTYPE_DEPTH or current.url in seen:
                continue
            seen.add(current.url)
            pending.extend((s, depth + 1) for s in current.supertypes)
        return False

    def has_annotation_of(self, annotations: Iterable[NominalType]) -> bool:
        return any(self.is_assignable_from(a) for a in annotations)

    def __repr__(self) -> str:
        return f"TypeChecker({self.url})"


class IgnoreSet:
    """Types whose constructor calls and receivers never carry user-facing text."""

    def __init__(self, checkers: Iterable[TypeChecker]):
        self.checkers: Tuple[TypeChecker, ...] = tuple(checkers)

    def matches(self, candidate: Optional[NominalType]) -> bool:
        if candidate is None:
            logger.warning("Unable to match unresolved type against ignore set")
            return False
        return any(c.is_assignable_from(candidate) for c in self.checkers)


LOGGER_CHECKER = TypeChecker.from_url("package:logging/src/logger.dart#Logger")
NON_NLS_CHECKER = TypeChecker.from_url(
    "package:string_literal_finder_annotations/string_literal_finder_annotations.dart#NonNlsArg"
)

DEFAULT_IGNORE_SET = IgnoreSet([
    TypeChecker.from_url("package:flutter/src/painting/image_resolution.dart#AssetImage"),
    TypeChecker.from_url("package:flutter/src/widgets/navigator.dart#RouteSettings"),
    LOGGER_CHECKER,
])


def is_logging_facility(candidate: Optional[NominalType]) -> bool:
    """True if `candidate` is the logger type or a subtype of it."""
    return LOGGER_CHECKER.is_assignable_from(candidate)


def matches(ignore_set: IgnoreSet, candidate: Optional[NominalType]) -> bool:
    return ignore_set.matches(candidate)
