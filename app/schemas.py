"""Pydantic request/response models."""

from typing import List, Optional

from pydantic import BaseModel, Field


# --- Resolved tree (request) ---


class TypeIn(BaseModel):
    """Nominal type with its declared supertypes."""

    name: str
    library: str = Field(default="", description="Defining library, e.g. package:logging/src/logger.dart")
    supertypes: List["TypeIn"] = Field(default_factory=list)


class ParameterIn(BaseModel):
    """Formal parameter of a resolved callable."""

    name: str
    is_named: bool = False
    annotations: List[TypeIn] = Field(default_factory=list, description="Types of the annotations on the parameter")


class ExecutableIn(BaseModel):
    """Resolved constructor, method or function."""

    name: str = ""
    parameters: List[ParameterIn] = Field(default_factory=list)


class NodeIn(BaseModel):
    """One node of the resolved syntax tree."""

    kind: str = Field(
        ...,
        description=(
            "compilation_unit, import, instance_creation, method_invocation, argument_list, "
            "named_expression, simple_string, string_interpolation, adjacent_strings; anything else is a plain node"
        ),
    )
    offset: int = Field(..., ge=0)
    length: int = Field(..., ge=0)
    children: List["NodeIn"] = Field(default_factory=list)
    role: Optional[str] = Field(default=None, description="'target' marks the receiver of a method invocation")
    static_type: Optional[TypeIn] = None
    element: Optional[ExecutableIn] = Field(default=None, description="Invoked constructor or method")
    value: Optional[str] = Field(default=None, description="Value of a simple string literal")
    label: Optional[str] = Field(default=None, description="Label of a named argument")


class AnalyzeRequest(BaseModel):
    """A resolved file of an analysis root."""

    file: str = Field(..., description="Absolute path of the analyzed file")
    root: str = Field(..., description="Absolute path of the analysis root containing the file")
    content: str = Field(..., description="Current text of the file")
    exists: bool = Field(default=True, description="Whether the file exists on disk")
    unit: NodeIn = Field(..., description="Resolved compilation unit")


class GetFixesRequest(AnalyzeRequest):
    """Request for the fixes available at an offset."""

    offset: int = Field(..., ge=0)


class InvalidateRequest(BaseModel):
    root: Optional[str] = Field(default=None, description="Root to invalidate; all roots when omitted")


# --- Diagnostics and fixes (response) ---


class LocationOut(BaseModel):
    file: str
    offset: int
    length: int
    start_line: int
    start_column: int
    end_line: int
    end_column: int


class AnalysisErrorOut(BaseModel):
    """Single string literal diagnostic."""

    severity: str = Field(..., description="ERROR, WARNING, or INFO")
    type: str
    location: LocationOut
    message: str
    code: str
    correction: Optional[str] = None
    has_fix: bool = False


class PositionOut(BaseModel):
    file: str
    offset: int


class SourceEditOut(BaseModel):
    offset: int
    length: int
    replacement: str


class SourceFileEditOut(BaseModel):
    file: str
    file_stamp: int = Field(..., description="0 applies unconditionally, -1 means the file may not exist yet")
    edits: List[SourceEditOut] = Field(default_factory=list)


class LinkedEditSuggestionOut(BaseModel):
    value: str
    kind: str


class LinkedEditGroupOut(BaseModel):
    positions: List[PositionOut]
    length: int
    suggestions: List[LinkedEditSuggestionOut] = Field(default_factory=list)


class SourceChangeOut(BaseModel):
    message: str
    edits: List[SourceFileEditOut] = Field(default_factory=list)
    linked_edit_groups: List[LinkedEditGroupOut] = Field(default_factory=list)
    selection: Optional[PositionOut] = None
    id: Optional[str] = None


class PrioritizedSourceChangeOut(BaseModel):
    priority: int
    change: SourceChangeOut


class AnalysisErrorFixesOut(BaseModel):
    error: AnalysisErrorOut
    fixes: List[PrioritizedSourceChangeOut] = Field(default_factory=list)


class PluginErrorOut(BaseModel):
    is_fatal: bool
    message: str
    stack_trace: str


# --- Responses ---


class AnalysisErrorsResponse(BaseModel):
    """Response for POST /analysis/errors; replaces earlier diagnostics of the file."""

    file: str
    errors: List[AnalysisErrorFixesOut] = Field(default_factory=list)
    plugin_error: Optional[PluginErrorOut] = Field(default=None, description="Set when the analysis failed")


class GetFixesResponse(BaseModel):
    """Response for POST /edit/fixes."""

    fixes: List[AnalysisErrorFixesOut] = Field(default_factory=list)
    plugin_error: Optional[PluginErrorOut] = None


class InvalidateResponse(BaseModel):
    invalidated: List[str] = Field(default_factory=list)


class PluginInfo(BaseModel):
    name: str
    version: str
    file_globs: List[str]


TypeIn.model_rebuild()
NodeIn.model_rebuild()
