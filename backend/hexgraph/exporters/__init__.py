"""
Pluggable text exporters for the architecture graph.
"""

from typing import Callable, Dict, List

from hexgraph.errors import UnknownFormatError
from hexgraph.exporters.base import FormatExporter
from hexgraph.exporters.dot_exporter import DotExporter
from hexgraph.exporters.mermaid_exporter import MermaidExporter, mermaid_id
from hexgraph.exporters.json_exporter import (
    JsonExporter,
    VisualDocument,
    parse_visual_document,
)
from hexgraph.exporters.d2_exporter import D2Exporter
from hexgraph.exporters.export_graph import ExportGraph

# Format name or file extension → exporter factory
EXPORTERS: Dict[str, Callable[[], FormatExporter]] = {
    "dot": DotExporter,
    "graphviz": DotExporter,
    "mermaid": MermaidExporter,
    "mmd": MermaidExporter,
    "json": JsonExporter,
    "d2": D2Exporter,
}


def available_formats() -> List[str]:
    return sorted(EXPORTERS)


def get_exporter(name: str) -> FormatExporter:
    factory = EXPORTERS.get(name.strip().lower())
    if factory is None:
        raise UnknownFormatError(
            f"Unknown export format '{name}'",
            next_steps=[f"Use one of: {', '.join(available_formats())}"],
        )
    return factory()


__all__ = [
    "FormatExporter",
    "DotExporter",
    "MermaidExporter",
    "mermaid_id",
    "JsonExporter",
    "VisualDocument",
    "parse_visual_document",
    "D2Exporter",
    "ExportGraph",
    "EXPORTERS",
    "available_formats",
    "get_exporter",
]
