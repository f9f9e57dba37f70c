from dataclasses import dataclass
from typing import Callable, List, Optional

from hexgraph.graph.layer import Layer
from hexgraph.graph.node import Node
from hexgraph.graph.role import Role


@dataclass(frozen=True)
class QueryFilter:
    kind: str
    value: object
    predicate: Callable[[Node], bool]


class GraphQuery:
    """
    Fluent node filter. All filters must match.

        graph.query().layer(Layer.PORT).type_name_contains("Repository").execute()
    """

    def __init__(self, graph):
        self._graph = graph
        self._filters: List[QueryFilter] = []

    def _add(self, kind: str, value, predicate) -> "GraphQuery":
        self._filters.append(QueryFilter(kind, value, predicate))
        return self

    def layer(self, layer: Layer) -> "GraphQuery":
        return self._add("layer", layer, lambda n: n.layer == layer)

    def role(self, role: Role) -> "GraphQuery":
        return self._add("role", role, lambda n: n.role == role)

    def type_name_contains(self, substring: str) -> "GraphQuery":
        return self._add("type_name", substring, lambda n: substring in n.type_name)

    def module_path_contains(self, substring: str) -> "GraphQuery":
        return self._add("module_path", substring, lambda n: substring in n.module_path)

    def describe(self) -> str:
        """Human-readable filter chain, e.g. ``layer=Port AND type_name~'Repo'``."""
        if not self._filters:
            return "all nodes"
        parts = []
        for f in self._filters:
            op = "=" if f.kind in ("layer", "role") else "~"
            value = f.value if op == "=" else repr(f.value)
            parts.append(f"{f.kind}{op}{value}")
        return " AND ".join(parts)

    def __repr__(self) -> str:
        return f"<GraphQuery {self.describe()}>"

    def _matches(self, node: Node) -> bool:
        return all(f.predicate(node) for f in self._filters)

    def execute(self) -> List[Node]:
        return [n for n in self._graph.nodes() if self._matches(n)]

    def count(self) -> int:
        return sum(1 for n in self._graph.nodes() if self._matches(n))

    def first(self) -> Optional[Node]:
        return next((n for n in self._graph.nodes() if self._matches(n)), None)
