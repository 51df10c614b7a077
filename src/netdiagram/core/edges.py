"""Edge builder: one directed edge per result row."""

import logging
from typing import List, Sequence

from netdiagram.core.nodes import NodeRegistry
from netdiagram.core.schemas import EdgeValueRange, GraphEdge, Scalar

logger = logging.getLogger(__name__)


def _at(column: Sequence[Scalar], index: int) -> Scalar:
    return column[index] if index < len(column) else None


def build_edges(
    source_column: Sequence[Scalar],
    dest_column: Sequence[Scalar],
    value_column: Sequence[Scalar],
    registry: NodeRegistry,
) -> List[GraphEdge]:
    """Pair source and destination labels row by row.

    The row count is the length of the value column. Labels without a node
    leave the endpoint empty; the edge is kept either way.
    """
    rows = len(value_column)
    for name, column in (("source", source_column), ("destination", dest_column)):
        if len(column) != rows:
            logger.warning(
                f"The {name} column has {len(column)} values but the value column has {rows}"
            )

    edges: List[GraphEdge] = []
    unresolved = 0
    for i in range(rows):
        edge = GraphEdge(
            from_=registry.id_for(_at(source_column, i)),
            to=registry.id_for(_at(dest_column, i)),
            title=value_column[i],
        )
        if edge.from_ is None or edge.to is None:
            unresolved += 1
        edges.append(edge)

    if unresolved:
        logger.debug(f"{unresolved} of {rows} edges have an unresolved endpoint")
    return edges


def edge_value_range(value_column: Sequence[Scalar]) -> EdgeValueRange:
    """Min and max of the numeric values of the value column."""
    numbers = [
        v for v in value_column
        if isinstance(v, (int, float)) and not isinstance(v, bool)
    ]
    if not numbers:
        return EdgeValueRange()
    return EdgeValueRange(min=min(numbers), max=max(numbers))
