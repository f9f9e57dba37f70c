# hexgraph/exporters/d2_exporter.py
"""
D2 Diagram Exporter

Nodes are grouped into one container per architectural layer; edges
reference nodes by their container path (``domain.n_123``). Edge ends that
are not nodes of the graph are emitted as top-level ids.

Docs: https://d2lang.com/
"""

import re
from typing import Dict, List, Optional

from hexgraph import config
from hexgraph.exporters.base import FormatExporter
from hexgraph.exporters.mermaid_exporter import mermaid_id
from hexgraph.graph.layer import LAYER_ORDER
from hexgraph.visual.visual_schema import VisualEdge, VisualGraph, VisualNode

# VisualNode.shape → D2 shape
D2_SHAPE_MAP = {
    "box": "rectangle",
    "rounded": "rectangle",
    "circle": "circle",
    "cylinder": "cylinder",
    "hexagon": "hexagon",
}


def _sanitize_id(id_str: str) -> str:
    """Make ID safe for D2"""
    # Same grammar as Mermaid: alphanumeric and underscore
    return mermaid_id(id_str)


def _container_id(layer_name: str) -> str:
    return re.sub(r"[^a-z0-9_]", "_", layer_name.lower())


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _quote(text: str) -> str:
    return '"' + _escape(text) + '"'


class D2Exporter(FormatExporter):
    def __init__(self, direction: Optional[str] = None):
        self.direction = direction or config.D2_DIRECTION

    def export(self, visual_graph: VisualGraph) -> str:
        lines = [f"direction: {self.direction}", ""]

        # Group nodes by layer, in layer order, unknown names last
        groups: Dict[str, List[VisualNode]] = {}
        for node in visual_graph.nodes:
            groups.setdefault(node.layer, []).append(node)
        known = [str(layer) for layer in LAYER_ORDER]
        ordered = [name for name in known if name in groups]
        ordered += sorted(name for name in groups if name not in known)

        paths: Dict[str, str] = {}
        for layer_name in ordered:
            container = _container_id(layer_name)
            lines.append(f"{container}: {_quote(layer_name + ' Layer')} {{")
            for node in groups[layer_name]:
                node_id = _sanitize_id(node.id)
                paths[node.id] = f"{container}.{node_id}"
                lines.append(f"  {self._render_node(node_id, node)}")
            lines.append("}")
            lines.append("")

        for edge in visual_graph.edges:
            lines.append(self._render_edge(edge, paths))

        return "\n".join(lines) + "\n"

    def _render_node(self, node_id: str, node: VisualNode) -> str:
        label = '"' + _escape(node.label) + "\\n(" + _escape(node.role) + ")" + '"'
        shape = D2_SHAPE_MAP.get(node.shape, "rectangle")
        return f"{node_id}: {label} {{ shape: {shape}; style: {{ fill: {_quote(node.color)} }} }}"

    def _render_edge(self, edge: VisualEdge, paths: Dict[str, str]) -> str:
        source = paths.get(edge.source) or _sanitize_id(edge.source)
        target = paths.get(edge.target) or _sanitize_id(edge.target)
        return f"{source} -> {target}: {_quote(edge.relationship)}"

    def format_name(self) -> str:
        return "D2"

    def file_extension(self) -> str:
        return "d2"
