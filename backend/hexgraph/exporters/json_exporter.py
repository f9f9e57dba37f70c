# hexgraph/exporters/json_exporter.py
"""
Structured document exporter for force-directed graph consumers.

    {"nodes": [{"id", "label", "layer", "role", "color", "shape"}],
     "edges": [{"source", "target", "relationship"}]}
"""

import logging
from typing import List

from pydantic import BaseModel, ValidationError

from hexgraph.errors import ExportError
from hexgraph.exporters.base import FormatExporter
from hexgraph.visual.visual_schema import VisualEdge, VisualGraph, VisualNode

logger = logging.getLogger(__name__)


class VisualNodeModel(BaseModel):
    id: str
    label: str
    layer: str
    role: str
    color: str
    shape: str


class VisualEdgeModel(BaseModel):
    source: str
    target: str
    relationship: str


class VisualDocument(BaseModel):
    nodes: List[VisualNodeModel] = []
    edges: List[VisualEdgeModel] = []

    @classmethod
    def from_visual_graph(cls, visual_graph: VisualGraph) -> "VisualDocument":
        return cls(
            nodes=[
                VisualNodeModel(
                    id=n.id, label=n.label, layer=n.layer, role=n.role, color=n.color, shape=n.shape
                )
                for n in visual_graph.nodes
            ],
            edges=[
                VisualEdgeModel(source=e.source, target=e.target, relationship=e.relationship)
                for e in visual_graph.edges
            ],
        )

    def to_visual_graph(self) -> VisualGraph:
        return VisualGraph(
            nodes=[VisualNode(**n.model_dump()) for n in self.nodes],
            edges=[VisualEdge(**e.model_dump()) for e in self.edges],
        )


def parse_visual_document(text: str) -> VisualDocument:
    """Parse text produced by JsonExporter back into the document model."""
    try:
        return VisualDocument.model_validate_json(text)
    except ValidationError as e:
        raise ExportError(
            f"Invalid visual graph document: {e.error_count()} error(s)",
            next_steps=["Regenerate the document with JsonExporter"],
        ) from e


class JsonExporter(FormatExporter):
    def __init__(self, indent: int = 2):
        self.indent = indent

    def export(self, visual_graph: VisualGraph) -> str:
        try:
            document = VisualDocument.from_visual_graph(visual_graph)
            return document.model_dump_json(indent=self.indent)
        except (ValidationError, ValueError) as e:
            logger.error("JSON serialization failed: %s", e)
            raise ExportError(f"JSON serialization failed: {e}") from e

    def format_name(self) -> str:
        return "JSON (D3.js)"

    def file_extension(self) -> str:
        return "json"
