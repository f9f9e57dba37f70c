"""
hexgraph - architecture graph engine for hexagonal applications.

Components describe their layer and role; hexgraph assembles those
descriptions into an immutable graph that can be queried, validated and
exported as DOT, Mermaid, D2, JSON or an AI agent context.
"""

__version__ = "0.4.0"

from hexgraph.errors import (
    ContextSerializationError,
    ExportError,
    GraphValidationError,
    HexGraphError,
    UnknownFormatError,
)
from hexgraph.graph import (
    Edge,
    Graph,
    GraphBuilder,
    Layer,
    Node,
    NodeId,
    Relationship,
    Role,
)
from hexgraph.registry import (
    NodeInfo,
    Registrable,
    component,
    component_count,
    current_graph,
    refresh_graph,
    register,
)

__all__ = [
    "__version__",
    "ContextSerializationError",
    "ExportError",
    "GraphValidationError",
    "HexGraphError",
    "UnknownFormatError",
    "Edge",
    "Graph",
    "GraphBuilder",
    "Layer",
    "Node",
    "NodeId",
    "Relationship",
    "Role",
    "NodeInfo",
    "Registrable",
    "component",
    "component_count",
    "current_graph",
    "refresh_graph",
    "register",
]
