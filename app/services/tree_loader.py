"""Converts the serialized resolved tree into finder nodes."""

from deps import List, Optional

from string_literal_finder.ast import (
    AdjacentStrings,
    ArgumentList,
    AstNode,
    CompilationUnit,
    ImportDirective,
    InstanceCreationExpression,
    MethodInvocation,
    NamedExpression,
    SimpleStringLiteral,
    StringInterpolation,
)
from string_literal_finder.elements import ExecutableElement, NominalType, ParameterElement

from ..schemas import ExecutableIn, NodeIn, TypeIn

TARGET_ROLE = "target"
_DIRECTIVES = {"import": "import", "export": "export", "part": "part"}


class TreeFormatError(ValueError):
    """The serialized tree does not describe a valid unit."""


def to_type(t: Optional[TypeIn]) -> Optional[NominalType]:
    if t is None:
        return None
    return NominalType(t.name, t.library, tuple(to_type(s) for s in t.supertypes))


def to_executable(e: Optional[ExecutableIn]) -> Optional[ExecutableElement]:
    if e is None:
        return None
    return ExecutableElement(
        e.name,
        tuple(
            ParameterElement(p.name, p.is_named, tuple(to_type(a) for a in p.annotations))
            for p in e.parameters
        ),
    )


def to_node(node: NodeIn) -> AstNode:
    """Build the finder node for `node` and its subtree."""
    children: List[AstNode] = [to_node(c) for c in node.children]
    common = dict(
        offset=node.offset,
        length=node.length,
        children=children,
        static_type=to_type(node.static_type),
    )
    kind = node.kind
    if kind == "compilation_unit":
        return CompilationUnit(**common)
    if kind in _DIRECTIVES:
        return ImportDirective(keyword=_DIRECTIVES[kind], **common)
    if kind == "argument_list":
        return ArgumentList(**common)
    if kind == "named_expression":
        if not node.label:
            raise TreeFormatError(f"named_expression at {node.offset} needs a label")
        return NamedExpression(label=node.label, **common)
    if kind == "instance_creation":
        return InstanceCreationExpression(constructor=to_executable(node.element), **common)
    if kind == "method_invocation":
        target = None
        for child_in, child in zip(node.children, children):
            if child_in.role == TARGET_ROLE:
                target = child
        return MethodInvocation(method=to_executable(node.element), target=target, **common)
    if kind == "simple_string":
        if node.value is None:
            raise TreeFormatError(f"simple_string at {node.offset} needs a value")
        return SimpleStringLiteral(value=node.value, **common)
    if kind == "string_interpolation":
        return StringInterpolation(**common)
    if kind == "adjacent_strings":
        return AdjacentStrings(**common)
    return AstNode(**common)


def to_unit_root(node: NodeIn) -> CompilationUnit:
    root = to_node(node)
    if not isinstance(root, CompilationUnit):
        raise TreeFormatError(f"Tree root must be a compilation_unit, got {node.kind}")
    return root
