# hexgraph/exporters/mermaid_exporter.py
"""
Mermaid flowchart exporter.

Node ids are rewritten into Mermaid's identifier grammar ([A-Za-z0-9_],
not starting with a digit). The rewrite is a pure function of the id, so
exporting the same graph twice gives byte-identical text.
"""

import re
from typing import Optional

from hexgraph import config
from hexgraph.exporters.base import FormatExporter
from hexgraph.visual.visual_schema import VisualGraph, VisualNode

_NODE_ID_WRAPPER = re.compile(r"^NodeId\((.*)\)$")

# VisualNode.shape → Mermaid node brackets
MERMAID_SHAPES = {
    "box": ("[", "]"),
    "rounded": ("(", ")"),
    "circle": ("((", "))"),
    "cylinder": ("[(", ")]"),
    "hexagon": ("{{", "}}"),
}


def mermaid_id(raw_id: str) -> str:
    match = _NODE_ID_WRAPPER.match(raw_id)
    text = match.group(1) if match else raw_id
    text = re.sub(r"[^a-zA-Z0-9_]", "_", text.replace("::", "_"))
    if not text or text[0].isdigit():
        text = "n_" + text
    return text


def _label(text: str) -> str:
    # Escape quotes in label
    return text.replace('"', "'")


class MermaidExporter(FormatExporter):
    def __init__(self, direction: Optional[str] = None):
        self.direction = direction or config.MERMAID_DIRECTION

    def export(self, visual_graph: VisualGraph) -> str:
        lines = [f"graph {self.direction}"]

        for node in visual_graph.nodes:
            node_id = mermaid_id(node.id)
            lines.append(f"  {self._render_node(node_id, node)}")
            lines.append(f"  style {node_id} fill:{node.color},stroke:#333,stroke-width:1px")

        lines.append("")

        for edge in visual_graph.edges:
            lines.append(
                f"  {mermaid_id(edge.source)} -->|{_label(edge.relationship)}| {mermaid_id(edge.target)}"
            )

        return "\n".join(lines) + "\n"

    def _render_node(self, node_id: str, node: VisualNode) -> str:
        opening, closing = MERMAID_SHAPES.get(node.shape, MERMAID_SHAPES["box"])
        label = f"{_label(node.label)}\\n({_label(node.role)})"
        return f'{node_id}{opening}"{label}"{closing}'

    def format_name(self) -> str:
        return "Mermaid"

    def file_extension(self) -> str:
        return "mmd"
