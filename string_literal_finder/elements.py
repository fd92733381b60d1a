"""
Resolved element model: nominal types, parameters and callables.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class NominalType:
    """A named type together with its declared supertypes."""
    name: str
    library: str = ""
    supertypes: Tuple["NominalType", ...] = ()

    @property
    def url(self) -> str:
        """Canonical `library#Name` form used to identify the type."""
        return f"{self.library}#{self.name}"


@dataclass(frozen=True)
class ParameterElement:
    """A formal parameter of a constructor, method or function."""
    name: str
    is_named: bool = False
    annotations: Tuple[NominalType, ...] = ()

    @property
    def is_positional(self) -> bool:
        return not self.is_named


@dataclass(frozen=True)
class ExecutableElement:
    """A resolved constructor, method or function."""
    name: str = ""
    parameters: Tuple[ParameterElement, ...] = ()

    def positional_parameters(self) -> List[ParameterElement]:
        return [p for p in self.parameters if p.is_positional]

    def named_parameter(self, name: str) -> Optional[ParameterElement]:
        for param in self.parameters:
            if param.is_named and param.name == name:
                return param
        return None
