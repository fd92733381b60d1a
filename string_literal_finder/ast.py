"""
Resolved syntax tree consumed by the finder.

The host hands over a tree whose names and types are already resolved. Only
the node kinds the suppression rules look at get their own class; everything
else is a plain `AstNode`.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .elements import ExecutableElement, NominalType


@dataclass(eq=False)
class AstNode:
    """Base node. Identity based equality so nodes can be located in lists."""
    offset: int
    length: int
    children: List["AstNode"] = field(default_factory=list)
    static_type: Optional[NominalType] = None
    parent: Optional["AstNode"] = field(default=None, repr=False)

    @property
    def end(self) -> int:
        return self.offset + self.length

    def walk(self) -> Iterator["AstNode"]:
        """Depth-first pre-order traversal of this node and its descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def link(self) -> "AstNode":
        """Set `parent` on every descendant. Returns self."""
        stack: List[AstNode] = [self]
        while stack:
            node = stack.pop()
            for child in node.children:
                child.parent = node
                stack.append(child)
        return self


@dataclass(eq=False)
class CompilationUnit(AstNode):
    pass


@dataclass(eq=False)
class ImportDirective(AstNode):
    """An import, export or part directive."""
    keyword: str = "import"


@dataclass(eq=False)
class ArgumentList(AstNode):

    @property
    def arguments(self) -> List[AstNode]:
        return self.children


@dataclass(eq=False)
class NamedExpression(AstNode):
    """`label: expression` inside an argument list."""
    label: str = ""


@dataclass(eq=False)
class InstanceCreationExpression(AstNode):
    """`Type(args)` or `new Type(args)`; `static_type` is the created type."""
    constructor: Optional[ExecutableElement] = None

    @property
    def argument_list(self) -> Optional[ArgumentList]:
        for child in self.children:
            if isinstance(child, ArgumentList):
                return child
        return None


@dataclass(eq=False)
class MethodInvocation(AstNode):
    """`target.name(args)` or `name(args)`."""
    method: Optional[ExecutableElement] = None
    target: Optional[AstNode] = None

    def __post_init__(self):
        if self.target is not None and not any(c is self.target for c in self.children):
            self.children.insert(0, self.target)

    @property
    def argument_list(self) -> Optional[ArgumentList]:
        for child in self.children:
            if isinstance(child, ArgumentList):
                return child
        return None


@dataclass(eq=False)
class StringLiteral(AstNode):
    """Common base of all string literal kinds."""

    @property
    def string_value(self) -> Optional[str]:
        return None


@dataclass(eq=False)
class SimpleStringLiteral(StringLiteral):
    value: str = ""

    @property
    def string_value(self) -> Optional[str]:
        return self.value


@dataclass(eq=False)
class StringInterpolation(StringLiteral):
    """`'Hello $name'`; children are the interpolated expressions."""
    pass


@dataclass(eq=False)
class AdjacentStrings(StringLiteral):
    """`'a' 'b'`; children are the individual literals."""
    pass
