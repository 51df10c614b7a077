"""
Graph model builder.

Composes field selection, column extraction, node registry and edge builder
into a renderer-agnostic graph. Every call starts from scratch; inputs are
never mutated.
"""

import logging
from typing import Optional, Sequence

from netdiagram.core.columns import FieldResolution, columns_of, get_column, resolve_fields
from netdiagram.core.edges import build_edges, edge_value_range
from netdiagram.core.nodes import NodeRegistry
from netdiagram.core.schemas import (
    ColumnarResult,
    DiagramConfig,
    FieldDescriptor,
    GraphModel,
    NetworkDiagram,
    RawVizData,
    ValueOptions,
)
from netdiagram.core.visualization import validate_value_options

logger = logging.getLogger(__name__)


def build_graph(
    data: ColumnarResult,
    fields: Sequence[FieldDescriptor],
    value_options: Optional[ValueOptions] = None,
) -> GraphModel:
    """Build the graph of a columnar query result.

    Raises:
        ConfigurationError: fewer than two fields.
    """
    return _build(data, resolve_fields(fields, value_options))


def _build(data: ColumnarResult, resolved: FieldResolution) -> GraphModel:
    source_column = get_column(data, resolved.source.name)
    dest_column = get_column(data, resolved.dest.name)
    value_column = get_column(data, resolved.value.name)

    registry = NodeRegistry.from_columns(source_column, dest_column)
    edges = build_edges(source_column, dest_column, value_column, registry)
    return GraphModel(nodes=registry.nodes, edges=edges)


class GraphModelBuilder:
    """Builds complete diagrams for one user configuration."""

    def __init__(self, config: Optional[DiagramConfig] = None):
        self.config = config or DiagramConfig()
        validate_value_options(self.config.value_options)

    @property
    def title(self) -> str:
        return self.config.panel_title or self.config.layout_title or ""

    def build(self, raw: RawVizData) -> NetworkDiagram:
        resolved = resolve_fields(raw.metadata.fields, self.config.value_options)
        data = columns_of(raw)

        graph = _build(data, resolved)
        logger.debug(
            f"Built diagram {resolved.source.name} -> {resolved.dest.name}: "
            f"{len(graph.nodes)} nodes, {len(graph.edges)} edges"
        )

        return NetworkDiagram(
            title=self.title,
            source_field=resolved.source,
            dest_field=resolved.dest,
            value_field=resolved.value,
            graph=graph,
            value_range=edge_value_range(data.get(resolved.value.name, [])),
        )
