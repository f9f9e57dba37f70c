# hexgraph/exporters/dot_exporter.py
"""
DOT (GraphViz) exporter.

    digraph hex_architecture {
      rankdir=TB;
      node [shape=box, style=rounded];

      "NodeId(1)" [label="Product\n(Entity)", shape=box, fillcolor=lightblue, style="rounded,filled"];

      "NodeId(3)" -> "NodeId(2)" [label="Depends"];
    }
"""

import re
from typing import Optional

from hexgraph import config
from hexgraph.exporters.base import FormatExporter
from hexgraph.visual.visual_schema import VisualEdge, VisualGraph, VisualNode

_BARE_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def quote_id(text: str) -> str:
    """Bare token when DOT accepts one, otherwise a quoted string."""
    if _BARE_ID.match(text):
        return text
    return '"' + _escape(text) + '"'


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


class DotExporter(FormatExporter):
    def __init__(self, rankdir: Optional[str] = None):
        self.rankdir = rankdir or config.DOT_RANKDIR

    def export(self, visual_graph: VisualGraph) -> str:
        lines = [
            "digraph hex_architecture {",
            f"  rankdir={self.rankdir};",
            "  node [shape=box, style=rounded];",
            "",
        ]

        for node in visual_graph.nodes:
            lines.append(f"  {self._render_node(node)}")

        lines.append("")

        for edge in visual_graph.edges:
            lines.append(f"  {self._render_edge(edge)}")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _render_node(self, node: VisualNode) -> str:
        label = _escape(node.label) + "\\n(" + _escape(node.role) + ")"
        return (
            f'{quote_id(node.id)} [label="{label}", shape={quote_id(node.shape)}, '
            f'fillcolor={quote_id(node.color)}, style="rounded,filled"];'
        )

    def _render_edge(self, edge: VisualEdge) -> str:
        return (
            f'{quote_id(edge.source)} -> {quote_id(edge.target)} '
            f'[label="{_escape(edge.relationship)}"];'
        )

    def format_name(self) -> str:
        return "DOT (GraphViz)"

    def file_extension(self) -> str:
        return "dot"
