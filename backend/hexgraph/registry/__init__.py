"""
Self-registration of architecture components and the process graph cache.
"""

from hexgraph.registry.node_info import NodeInfo
from hexgraph.registry.registrable import Registrable, is_registrable
from hexgraph.registry.component_entry import ComponentEntry, resolve_dependency
from hexgraph.registry.component_registry import (
    ComponentRegistry,
    build_graph,
    component,
    component_count,
    current_graph,
    get_registry,
    refresh_graph,
    register,
    register_entry,
)

__all__ = [
    "NodeInfo",
    "Registrable",
    "is_registrable",
    "ComponentEntry",
    "resolve_dependency",
    "ComponentRegistry",
    "build_graph",
    "component",
    "component_count",
    "current_graph",
    "get_registry",
    "refresh_graph",
    "register",
    "register_entry",
]
