from enum import Enum
from types import MappingProxyType
from typing import Any

from hexgraph.graph.node_id import NodeId
from hexgraph.graph.role import Role

PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def serialize_graph_value(obj: Any):
    """
    Convert graph objects into JSON-compatible structures.
    Deterministic.
    Tolerant to primitives.
    """

    # Primitive values pass through
    if isinstance(obj, PRIMITIVE_TYPES):
        return obj

    # Identifiers and tags render as their display text
    if isinstance(obj, (NodeId, Role, Enum)):
        return str(obj)

    if isinstance(obj, (list, tuple)):
        return [serialize_graph_value(item) for item in obj]

    if isinstance(obj, (dict, MappingProxyType)):
        return {str(k): serialize_graph_value(v) for k, v in obj.items()}

    # Dataclass-like objects
    if hasattr(obj, "__dict__"):
        return {
            key: serialize_graph_value(value)
            for key, value in obj.__dict__.items()
            if not key.startswith("_")
        }

    return str(obj)


def serialize_node(node) -> dict:
    return {
        "id": str(node.id),
        "type_name": node.type_name,
        "layer": str(node.layer),
        "role": str(node.role),
        "module_path": node.module_path,
        "metadata": serialize_graph_value(node.metadata),
    }


def serialize_edge(edge) -> dict:
    return {
        "source": str(edge.source),
        "target": str(edge.target),
        "relationship": str(edge.relationship),
    }
