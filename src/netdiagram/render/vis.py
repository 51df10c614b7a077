"""Standalone HTML export drawn by vis-network (loaded from a CDN)."""

import json
import logging
from html import escape
from pathlib import Path
from typing import Any, Dict, Optional

from netdiagram.config import get_settings
from netdiagram.core.interfaces import IGraphRenderer
from netdiagram.core.schemas import GraphModel

logger = logging.getLogger(__name__)

HTML_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<script src="{script_url}"></script>
<style>
  body {{ font-family: sans-serif; margin: 0; }}
  #title {{ display: flex; justify-content: center; margin: 10px; }}
</style>
</head>
<body>
<div id="title">{title}</div>
<div id="network"></div>
<script>
  const GRAPH = {graph};
  const OPTIONS = {options};
  const FOCUS = {focus};
  const network = new vis.Network(
    document.getElementById("network"),
    {{ nodes: new vis.DataSet(GRAPH.nodes), edges: new vis.DataSet(GRAPH.edges) }},
    OPTIONS
  );
  if (FOCUS !== null) {{
    network.once("stabilizationIterationsDone", function () {{
      network.focus(FOCUS.nodeId, {{ animation: FOCUS.animation }});
    }});
  }}
</script>
</body>
</html>
"""


def _to_script(value: Any) -> str:
    # keep embedded labels from closing the script element
    return json.dumps(value).replace("</", "<\\/")


class VisHtmlRenderer(IGraphRenderer):
    """Renders a graph to a self-contained HTML page."""

    def __init__(self, title: str = "", script_url: Optional[str] = None):
        self.title = title
        self.script_url = script_url or get_settings().vis_network_url
        self.focus_node: Optional[int] = None
        self.focus_animation = True

    def focus(self, node_id: int, animation: bool = True) -> None:
        """Focus the node once the layout has stabilized."""
        self.focus_node = node_id
        self.focus_animation = animation

    def render(self, graph: GraphModel, options: Dict[str, Any]) -> str:
        focus = None
        if self.focus_node is not None:
            focus = {"nodeId": self.focus_node, "animation": self.focus_animation}
        return HTML_PAGE.format(
            title=escape(self.title),
            script_url=escape(self.script_url, quote=True),
            graph=_to_script(graph.to_vis()),
            options=_to_script(options),
            focus=_to_script(focus),
        )

    def write(self, graph: GraphModel, options: Dict[str, Any], path: Path) -> Path:
        path.write_text(self.render(graph, options), encoding="utf-8")
        logger.info(f"Wrote {len(graph.nodes)} nodes and {len(graph.edges)} edges to {path}")
        return path
