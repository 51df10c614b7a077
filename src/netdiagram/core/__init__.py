"""Tabular-to-graph transformation and focus search.

- Column access and field selection (columns)
- Node registry (nodes)
- Edge builder (edges)
- Graph model builder (builder)
- Focus resolver (focus)
"""

from .errors import NetDiagramError, ConfigurationError, InputError
from .schemas import (
    FieldDescriptor,
    RawVizData,
    ValueOptions,
    DiagramConfig,
    GraphNode,
    GraphEdge,
    GraphModel,
    EdgeValueRange,
    NetworkDiagram,
    ServiceEntry,
    ServiceObject,
    FocusStatus,
    FocusResult,
)
from .columns import FieldResolution, resolve_fields, get_column, rows_to_columns, columns_of
from .nodes import NodeRegistry, build_nodes
from .edges import build_edges, edge_value_range
from .builder import GraphModelBuilder, build_graph
from .focus import FocusController, resolve_focus
from .interfaces import IGraphRenderer

__all__ = [
    # Errors
    "NetDiagramError",
    "ConfigurationError",
    "InputError",
    # Schemas
    "FieldDescriptor",
    "RawVizData",
    "ValueOptions",
    "DiagramConfig",
    "GraphNode",
    "GraphEdge",
    "GraphModel",
    "EdgeValueRange",
    "NetworkDiagram",
    "ServiceEntry",
    "ServiceObject",
    "FocusStatus",
    "FocusResult",
    # Building
    "FieldResolution",
    "resolve_fields",
    "get_column",
    "rows_to_columns",
    "columns_of",
    "NodeRegistry",
    "build_nodes",
    "build_edges",
    "edge_value_range",
    "GraphModelBuilder",
    "build_graph",
    # Focus
    "FocusController",
    "resolve_focus",
    "IGraphRenderer",
]
