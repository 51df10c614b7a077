"""Focus search over a service map."""

import logging
from typing import Mapping, Optional

from netdiagram.core.interfaces import IGraphRenderer
from netdiagram.core.schemas import FocusResult, FocusStatus, ServiceEntry

logger = logging.getLogger(__name__)


def resolve_focus(query: str, service_map: Mapping[str, ServiceEntry]) -> FocusResult:
    """Resolve a typed service name to a node id.

    Matching is exact and case-sensitive. An empty query is not an error and
    neither is an unknown name; both are reported through the result status.
    """
    if not query:
        return FocusResult.empty()
    entry = service_map.get(query)
    if entry is None:
        return FocusResult.not_found()
    return FocusResult.found(entry.id)


class FocusController:
    """Drives the renderer and the invalid-input flag from search actions."""

    def __init__(self, renderer: IGraphRenderer, service_map: Mapping[str, ServiceEntry]):
        self.renderer = renderer
        self.service_map = service_map
        self.invalid = False
        self.last_result: Optional[FocusResult] = None

    def search(self, query: str) -> FocusResult:
        result = resolve_focus(query, self.service_map)
        if result.status == FocusStatus.FOUND:
            self.renderer.focus(result.node_id, animation=True)
        elif result.status == FocusStatus.NOT_FOUND:
            logger.info(f"No service named '{query}' in the service map")
        self.invalid = result.status == FocusStatus.NOT_FOUND
        self.last_result = result
        return result
