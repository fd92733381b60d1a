"""
Decides whether a string literal is user-facing text or can be ignored.

The classifier walks from the literal up to the compilation unit. At each
ancestor it knows the two nodes it came through, which is how a call site
finds the argument slot holding the literal.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from .ast import (
    ArgumentList,
    AstNode,
    ImportDirective,
    InstanceCreationExpression,
    MethodInvocation,
    NamedExpression,
    StringLiteral,
)
from .elements import ExecutableElement, ParameterElement
from .exceptions import ResolutionError
from .lexer import TokenKind
from .source import SourceUnit
from .type_matcher import (
    DEFAULT_IGNORE_SET,
    NON_NLS_CHECKER,
    IgnoreSet,
    is_logging_facility,
    matches,
)

logger = logging.getLogger(__name__)

NON_NLS_MARKER = "NON-NLS"


class AncestorKind(Enum):
    IMPORT = "import"
    CONSTRUCTION = "construction"
    CALL = "call"
    OTHER = "other"


def ancestor_kind(node: AstNode) -> AncestorKind:
    if isinstance(node, ImportDirective):
        return AncestorKind.IMPORT
    if isinstance(node, InstanceCreationExpression):
        return AncestorKind.CONSTRUCTION
    if isinstance(node, MethodInvocation):
        return AncestorKind.CALL
    return AncestorKind.OTHER


@dataclass(frozen=True)
class WalkContext:
    """An ancestor plus the child and grandchild the walk arrived through."""
    node: AstNode
    child: Optional[AstNode] = None
    grandchild: Optional[AstNode] = None

    def up(self) -> Optional["WalkContext"]:
        if self.node.parent is None:
            return None
        return WalkContext(self.node.parent, self.node, self.child)


class SuppressionClassifier:
    """Applies the ignore rules to literals of one source unit."""

    def __init__(
        self,
        unit: SourceUnit,
        ignore_set: IgnoreSet = DEFAULT_IGNORE_SET,
        marker: str = NON_NLS_MARKER,
    ):
        self.unit = unit
        self.ignore_set = ignore_set
        self.marker = marker
        self._rules: Dict[AncestorKind, Callable[[WalkContext], bool]] = {
            AncestorKind.IMPORT: self._in_import,
            AncestorKind.CONSTRUCTION: self._in_ignored_construction,
            AncestorKind.CALL: self._in_ignored_call,
        }

    def should_suppress(self, literal: StringLiteral) -> bool:
        context: Optional[WalkContext] = WalkContext(literal)
        while context is not None:
            rule = self._rules.get(ancestor_kind(context.node))
            if rule is not None:
                try:
                    if rule(context):
                        return True
                except Exception:
                    loc = self.unit.line_info.get_location(literal.offset)
                    logger.exception(
                        "Error while analysing node %r at %s:%s",
                        self.unit.slice(literal.offset, literal.end),
                        self.unit.path,
                        loc,
                    )
            context = context.up()
        return self.has_line_end_marker(literal)

    def _in_import(self, context: WalkContext) -> bool:
        return True

    def _in_ignored_construction(self, context: WalkContext) -> bool:
        node = context.node
        if matches(self.ignore_set, node.static_type):
            return True
        return self._argument_is_non_nls(
            node.argument_list, node.constructor, context
        )

    def _in_ignored_call(self, context: WalkContext) -> bool:
        node = context.node
        target = node.target
        if target is not None:
            if target.static_type is None:
                logger.warning(
                    "Unable to resolve type for target %r in %s",
                    self.unit.slice(target.offset, target.end),
                    self.unit.path,
                )
            elif is_logging_facility(target.static_type) or matches(
                self.ignore_set, target.static_type
            ):
                return True
        return self._argument_is_non_nls(node.argument_list, node.method, context)

    def _argument_is_non_nls(
        self,
        argument_list: Optional[ArgumentList],
        executable: Optional[ExecutableElement],
        context: WalkContext,
    ) -> bool:
        """True if the argument holding the literal binds to a @NonNlsArg parameter."""
        # the literal may sit in the target or type arguments instead
        if argument_list is None or context.child is not argument_list:
            return False
        if executable is None:
            raise ResolutionError("Unable to resolve the invoked callable")
        param = self._parameter_for(argument_list, executable, context.grandchild)
        return NON_NLS_CHECKER.has_annotation_of(param.annotations)

    def _parameter_for(
        self,
        argument_list: ArgumentList,
        executable: ExecutableElement,
        argument: AstNode,
    ) -> ParameterElement:
        arguments = argument_list.arguments
        position = next((i for i, a in enumerate(arguments) if a is argument), None)
        if position is None:
            raise ResolutionError("Argument is not part of its argument list")
        if isinstance(argument, NamedExpression):
            param = executable.named_parameter(argument.label)
            if param is None:
                raise ResolutionError(
                    f"Unable to find parameter of name {argument.label} for {executable.name}"
                )
            return param
        positional_index = sum(
            1 for a in arguments[:position] if not isinstance(a, NamedExpression)
        )
        positional = executable.positional_parameters()
        if positional_index >= len(positional):
            raise ResolutionError(
                f"No positional parameter {positional_index} for {executable.name}"
            )
        return positional[positional_index]

    def has_line_end_marker(self, literal: AstNode) -> bool:
        """True if a comment on the literal's last line contains the marker."""
        unit = self.unit
        line_info = unit.line_info
        line_number = line_info.line_number(literal.end)
        index = unit.token_index_at_or_after(literal.end)
        tokens = unit.tokens
        while (
            tokens[index].kind != TokenKind.EOF
            and line_info.line_number(tokens[index].offset) == line_number
        ):
            index += 1
        for comment in tokens[index].preceding_comments:
            if line_info.line_number(comment.offset) != line_number:
                continue
            if self.marker in comment.text:
                return True
        return False
