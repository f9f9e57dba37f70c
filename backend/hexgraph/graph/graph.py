"""
Immutable architecture graph.

A Graph is built once (by GraphBuilder or the component registry) and then
only read. Nodes live in a read-only mapping keyed by NodeId; edges keep
their insertion order so exports are stable.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Tuple, Union, ValuesView

from hexgraph.graph.edge import Edge
from hexgraph.graph.layer import LAYER_ORDER, Layer
from hexgraph.graph.metadata import GraphMetadata
from hexgraph.graph.node import Node
from hexgraph.graph.node_id import NodeId
from hexgraph.graph.role import Role

logger = logging.getLogger(__name__)


class Graph:

    __slots__ = ("_nodes", "_edges", "_metadata")

    def __init__(
        self,
        nodes: Optional[Dict[NodeId, Node]] = None,
        edges: Optional[Iterable[Edge]] = None,
        metadata: Optional[GraphMetadata] = None,
    ):
        self._nodes = MappingProxyType(dict(nodes or {}))
        self._edges: Tuple[Edge, ...] = tuple(edges or ())
        self._metadata = metadata or GraphMetadata()

    @staticmethod
    def builder():
        from hexgraph.graph.builder import GraphBuilder

        return GraphBuilder()

    # ------------------------------------------------------------------ #
    # Counts
    # ------------------------------------------------------------------ #

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def layer_count(self) -> int:
        return len({node.layer for node in self._nodes.values()})

    def is_empty(self) -> bool:
        return not self._nodes

    @property
    def metadata(self) -> GraphMetadata:
        return self._metadata

    # ------------------------------------------------------------------ #
    # Access
    # ------------------------------------------------------------------ #

    def nodes(self) -> ValuesView[Node]:
        return self._nodes.values()

    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def get_node(self, node_id: NodeId) -> Optional[Node]:
        return self._nodes.get(node_id)

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def nodes_by_layer(self, layer: Layer) -> List[Node]:
        return [n for n in self._nodes.values() if n.layer == layer]

    def nodes_by_role(self, role: Role) -> List[Node]:
        return [n for n in self._nodes.values() if n.role == role]

    def edges_from(self, source: NodeId) -> List[Edge]:
        return [e for e in self._edges if e.source == source]

    def edges_to(self, target: NodeId) -> List[Edge]:
        return [e for e in self._edges if e.target == target]

    def query(self):
        from hexgraph.graph.query import GraphQuery

        return GraphQuery(self)

    def analysis(self):
        from hexgraph.graph.analysis import GraphAnalysis

        return GraphAnalysis(self)

    def validator(self, strict_mode: bool = False):
        from hexgraph.validation import GraphValidator

        return GraphValidator(self, strict_mode=strict_mode)

    # ------------------------------------------------------------------ #
    # Human-readable output
    # ------------------------------------------------------------------ #

    def describe(self) -> str:
        return f"Graph with {self.node_count()} nodes and {self.edge_count()} edges"

    def pretty_print(self) -> str:
        lines = [
            f"{self._metadata.description}:",
            f"  Nodes: {self.node_count()}",
            f"  Edges: {self.edge_count()}",
            "",
            "By Layer:",
        ]
        for layer in LAYER_ORDER:
            count = len(self.nodes_by_layer(layer))
            if count:
                lines.append(f"  {layer}: {count}")
        if self._metadata.attributes:
            lines.extend(["", "Attributes:"])
            for key in sorted(self._metadata.attributes):
                lines.append(f"  {key}: {self._metadata.get_attribute(key)}")
        return "\n".join(lines)

    def to_ascii_art(self) -> str:
        lines = ["Architecture:"]
        for layer in LAYER_ORDER:
            nodes = sorted(self.nodes_by_layer(layer), key=lambda n: n.type_name)
            if not nodes:
                continue
            lines.append("")
            lines.append(f"{layer} Layer:")
            for node in nodes:
                lines.append(f"  └─ {node.type_name}")
        return "\n".join(lines) + "\n"

    # ------------------------------------------------------------------ #
    # Export shortcuts
    # ------------------------------------------------------------------ #

    def _export(self, exporter) -> str:
        from hexgraph.exporters import ExportGraph

        return ExportGraph(exporter).execute(self)

    def to_dot(self) -> str:
        from hexgraph.exporters import DotExporter

        return self._export(DotExporter())

    def to_mermaid(self) -> str:
        from hexgraph.exporters import MermaidExporter

        return self._export(MermaidExporter())

    def to_json(self) -> str:
        from hexgraph.exporters import JsonExporter

        return self._export(JsonExporter())

    def to_d2(self) -> str:
        from hexgraph.exporters import D2Exporter

        return self._export(D2Exporter())

    def save_visualization(self, path: Union[str, Path], exporter) -> Path:
        """Render with *exporter* and write the text to *path* (UTF-8)."""
        from hexgraph.errors import ExportError

        content = self._export(exporter)
        target = Path(path)
        try:
            target.write_text(content, encoding="utf-8")
        except (OSError, UnicodeError) as e:
            raise ExportError(f"Failed to write file {target}: {e}", code="E_HEX_IO_001") from e
        logger.info("Wrote %s visualization to %s", exporter.format_name(), target)
        return target

    def __repr__(self) -> str:
        return f"<Graph nodes={self.node_count()} edges={self.edge_count()}>"
