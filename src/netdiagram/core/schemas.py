"""
Pydantic schemas for network diagrams.

This module defines the query-result envelope handed over by the query
execution layer, the user configuration of a diagram, the renderer-agnostic
graph model and the service map used for focusing.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# bool first so that True/False survive smart-mode union validation untouched
Scalar = Optional[Union[bool, int, float, str]]
ColumnarResult = Dict[str, List[Scalar]]


# Query result

class FieldDescriptor(BaseModel):
    """A column of the query result. Position in the field list matters."""

    name: str = Field(..., description="Column name in the result set")
    type: Optional[str] = Field(None, description="Column type reported by the query engine")


class VizMetadata(BaseModel):
    fields: List[FieldDescriptor] = Field(default_factory=list)


class RawVizData(BaseModel):
    """Query result as delivered to a visualization."""

    model_config = ConfigDict(populate_by_name=True)

    data: ColumnarResult = Field(default_factory=dict, description="Column name -> values")
    metadata: VizMetadata = Field(default_factory=VizMetadata)
    json_data: Optional[List[Dict[str, Scalar]]] = Field(
        None, alias="jsonData", description="Row-oriented copy of the same result"
    )


# User configuration

class ValueOptions(BaseModel):
    """Source/destination selection made in the data panel."""

    source: List[FieldDescriptor] = Field(default_factory=list)
    dest: List[FieldDescriptor] = Field(default_factory=list)

    @field_validator("source", "dest", mode="before")
    @classmethod
    def _coerce_names(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (str, dict)):
            value = [value]
        return [{"name": item} if isinstance(item, str) else item for item in value]


class DiagramConfig(BaseModel):
    """User configuration of one diagram, injected by the caller."""

    value_options: ValueOptions = Field(default_factory=ValueOptions)
    panel_title: Optional[str] = Field(None, description="Title set in the panel options")
    layout_title: Optional[str] = Field(None, description="Title set in the layout config")


# Graph model

class GraphNode(BaseModel):
    id: int = Field(..., ge=1, description="1-based id, assigned in first-seen order")
    label: str
    title: str


class GraphEdge(BaseModel):
    """Directed edge. Endpoints are None when the row label has no node."""

    model_config = ConfigDict(populate_by_name=True)

    from_: Optional[int] = Field(None, alias="from")
    to: Optional[int] = None
    title: Scalar = None


class GraphModel(BaseModel):
    """The graph handed to the rendering layer."""

    nodes: List[GraphNode] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)

    def to_vis(self) -> Dict[str, Any]:
        """Serialize in the shape vis-network expects (absent endpoints omitted)."""
        return {
            "nodes": [node.model_dump() for node in self.nodes],
            "edges": [edge.model_dump(by_alias=True, exclude_none=True) for edge in self.edges],
        }


class EdgeValueRange(BaseModel):
    min: Optional[float] = None
    max: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.min is None or self.max is None


class NetworkDiagram(BaseModel):
    """A built diagram: resolved fields, graph and edge value range."""

    title: str = ""
    source_field: FieldDescriptor
    dest_field: FieldDescriptor
    value_field: FieldDescriptor
    graph: GraphModel
    value_range: EdgeValueRange = Field(default_factory=EdgeValueRange)


# Service map

class TraceGroup(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trace_group: str = Field(..., alias="traceGroup")
    target_resource: List[str] = Field(default_factory=list, alias="targetResource")


class ServiceEntry(BaseModel):
    """One service of the service map; `id` is the node id known to the renderer."""

    model_config = ConfigDict(populate_by_name=True)

    service_name: str = Field(..., alias="serviceName")
    id: int
    trace_groups: List[TraceGroup] = Field(default_factory=list, alias="traceGroups")
    target_services: List[str] = Field(default_factory=list, alias="targetServices")


ServiceObject = Dict[str, ServiceEntry]


class FocusStatus(str, Enum):
    """Outcome of a focus search."""
    EMPTY = "empty"
    FOUND = "found"
    NOT_FOUND = "not_found"


class FocusResult(BaseModel):
    status: FocusStatus
    node_id: Optional[int] = None

    @classmethod
    def empty(cls) -> "FocusResult":
        return cls(status=FocusStatus.EMPTY)

    @classmethod
    def found(cls, node_id: int) -> "FocusResult":
        return cls(status=FocusStatus.FOUND, node_id=node_id)

    @classmethod
    def not_found(cls) -> "FocusResult":
        return cls(status=FocusStatus.NOT_FOUND)
