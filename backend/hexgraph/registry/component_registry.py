# hexgraph/registry/component_registry.py
"""
Component Registry - process-wide registration collection and graph cache.

Components contribute one ComponentEntry each, normally at import time via
the @component decorator (or an explicit register() call during bootstrap).
The graph is built from the collection on first request and cached for the
process; refresh_graph() swaps in a rebuilt graph in one assignment.
"""

import logging
import threading
from typing import Iterable, List, Optional

from hexgraph import config
from hexgraph.graph.builder import GraphBuilder
from hexgraph.graph.edge import Edge
from hexgraph.graph.graph import Graph
from hexgraph.graph.layer import Layer
from hexgraph.graph.node_id import NodeId
from hexgraph.graph.relationship import Relationship
from hexgraph.graph.role import Role
from hexgraph.registry.component_entry import NODE_INFO_ATTR, ComponentEntry
from hexgraph.registry.node_info import NodeInfo
from hexgraph.registry.registrable import is_registrable

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """
    Unordered, append-only bag of component entries.

    There is no unregistration; consumers must not rely on entry order.
    """

    def __init__(self, description: Optional[str] = None):
        self._entries: List[ComponentEntry] = []
        self._lock = threading.Lock()
        self.description = description

    def register_entry(self, entry: ComponentEntry) -> ComponentEntry:
        with self._lock:
            self._entries.append(entry)
        logger.debug("Registered component entry %r", entry.component or entry)
        return entry

    def register(self, component) -> type:
        """Register a class exposing node_info() and dependencies()."""
        if not is_registrable(component):
            raise TypeError(
                f"{component!r} must define node_info() and dependencies() to be registered"
            )
        self.register_entry(ComponentEntry.for_registrable(component))
        return component

    def entries(self) -> List[ComponentEntry]:
        with self._lock:
            return list(self._entries)

    def component_count(self) -> int:
        return len(self._entries)

    def build_graph(self) -> Graph:
        """
        One node per entry; one Depends edge per declared dependency.
        Duplicate ids keep the last entry; duplicate edges are kept.
        """
        builder = GraphBuilder(self.description or config.GRAPH_DESCRIPTION)

        for entry in self.entries():
            info = entry.node_info()
            node = info.to_node()
            builder.add_node(node)
            for dep_id in entry.dependencies():
                builder.add_edge(Edge(source=node.id, target=dep_id, relationship=Relationship.DEPENDS))

        graph = builder.build()
        logger.info(
            "Built architecture graph: %d nodes, %d edges from %d entries",
            graph.node_count(), graph.edge_count(), self.component_count(),
        )
        return graph


# Global registry instance
_global_registry = ComponentRegistry()

_current_graph: Optional[Graph] = None
_graph_lock = threading.Lock()


def get_registry() -> ComponentRegistry:
    return _global_registry


def register(component, registry: Optional[ComponentRegistry] = None) -> type:
    return (registry or _global_registry).register(component)


def register_entry(entry: ComponentEntry, registry: Optional[ComponentRegistry] = None) -> ComponentEntry:
    return (registry or _global_registry).register_entry(entry)


def component_count() -> int:
    return _global_registry.component_count()


def build_graph() -> Graph:
    return _global_registry.build_graph()


def current_graph() -> Graph:
    """The cached process graph, built on first call."""
    global _current_graph
    graph = _current_graph
    if graph is not None:
        return graph
    with _graph_lock:
        if _current_graph is None:
            _current_graph = _global_registry.build_graph()
        return _current_graph


def refresh_graph() -> Graph:
    """Rebuild from the registration collection and replace the cached graph."""
    global _current_graph
    with _graph_lock:
        graph = _global_registry.build_graph()
        _current_graph = graph
    logger.info("Architecture graph refreshed")
    return graph


# ------------------------------------------------------------------ #
# Declarative registration
# ------------------------------------------------------------------ #

def _check_dependency(dep):
    if not isinstance(dep, (NodeId, str, type)):
        raise TypeError(
            f"Dependencies must be classes, identifier strings or NodeIds, got {dep!r}"
        )
    return dep


def component(
    layer: Layer,
    role,
    *,
    name: Optional[str] = None,
    display_name: Optional[str] = None,
    depends_on: Iterable = (),
    metadata: Optional[dict] = None,
    registry: Optional[ComponentRegistry] = None,
):
    """
    Class decorator that registers the class as an architecture component.

        @component(Layer.ADAPTER, Role.ADAPTER, depends_on=[ProductRepository])
        class PostgresProductRepository(ProductRepository):
            ...

    ``name`` is the stable identifier the NodeId is derived from (default
    module.QualName); ``role`` may be a Role or any role name.
    """
    declared = tuple(_check_dependency(d) for d in depends_on)
    role = role if isinstance(role, Role) else Role.of(str(role))

    def decorator(cls):
        info = NodeInfo(
            layer=layer,
            role=role,
            type_name=display_name or cls.__name__,
            module_path=cls.__module__,
            key=name or f"{cls.__module__}.{cls.__qualname__}",
            metadata=dict(metadata or {}),
        )
        setattr(cls, NODE_INFO_ATTR, info)
        (registry or _global_registry).register_entry(
            ComponentEntry.from_info(info, declared, component=cls)
        )
        return cls

    return decorator
