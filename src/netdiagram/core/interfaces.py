from abc import ABC, abstractmethod
from typing import Any, Dict

from netdiagram.core.schemas import GraphModel


# Abstract Interfaces
class IGraphRenderer(ABC):
    """What the core needs from a graph drawing library."""

    @abstractmethod
    def render(self, graph: GraphModel, options: Dict[str, Any]) -> Any: ...

    @abstractmethod
    def focus(self, node_id: int, animation: bool = True) -> None:
        """Center the view on a node."""
        ...
