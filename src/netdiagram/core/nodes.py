"""Node registry: deduplicates label values into sequentially numbered nodes."""

from typing import Dict, Iterable, List, Optional, Sequence

from netdiagram.core.schemas import GraphNode, Scalar


def unique(values: Iterable[Scalar]) -> List[str]:
    """Distinct labels in first-occurrence order. None is dropped."""
    seen: Dict[str, None] = {}
    for value in values:
        if value is None:
            continue
        label = str(value)
        if label not in seen:
            seen[label] = None
    return list(seen)


def build_nodes(source_column: Sequence[Scalar], dest_column: Sequence[Scalar]) -> List[GraphNode]:
    """Build the node set of a diagram.

    Labels from the source column come first, then the destination labels not
    already seen. Ids count up from 1 in that order.
    """
    labels = unique(unique(source_column) + unique(dest_column))
    return [
        GraphNode(id=index, label=label, title=label)
        for index, label in enumerate(labels, start=1)
    ]


class NodeRegistry:
    """Label -> node id lookup over a built node list."""

    def __init__(self, nodes: List[GraphNode]):
        self.nodes = nodes
        # labels are unique by construction, so this matches a first-match scan
        self._ids: Dict[str, int] = {node.label: node.id for node in nodes}

    @classmethod
    def from_columns(cls, source_column: Sequence[Scalar], dest_column: Sequence[Scalar]) -> "NodeRegistry":
        return cls(build_nodes(source_column, dest_column))

    def id_for(self, label: Scalar) -> Optional[int]:
        if label is None:
            return None
        return self._ids.get(str(label))

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, label: object) -> bool:
        return label is not None and str(label) in self._ids
