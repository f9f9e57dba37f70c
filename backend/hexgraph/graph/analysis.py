"""
Structural analysis over a built Graph: cycles, coupling, roots/leaves and
recognisable architectural patterns.

Edges whose ends are not nodes are skipped during traversal.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from hexgraph.graph.node import Node
from hexgraph.graph.node_id import NodeId
from hexgraph.graph.role import Role


@dataclass(frozen=True)
class CouplingMetrics:
    afferent: int
    efferent: int
    instability: float


@dataclass(frozen=True)
class ArchitecturalPattern:
    name: str                       # Repository | CQRS | EventSourcing
    counts: Dict[str, int] = field(default_factory=dict)
    node_ids: List[NodeId] = field(default_factory=list)


class GraphAnalysis:

    def __init__(self, graph):
        self.graph = graph

    def _adjacency(self) -> Dict[NodeId, List[NodeId]]:
        adjacency: Dict[NodeId, List[NodeId]] = {}
        for edge in self.graph.edges():
            if self.graph.has_node(edge.source) and self.graph.has_node(edge.target):
                adjacency.setdefault(edge.source, []).append(edge.target)
        return adjacency

    def detect_cycles(self) -> List[List[NodeId]]:
        """Return each cycle found by depth-first search, as a list of ids.

        The search keeps its own stack of (node, remaining neighbors), so
        chain length is not bounded by the interpreter's recursion limit.
        """
        adjacency = self._adjacency()
        visited: Set[NodeId] = set()
        on_stack: Set[NodeId] = set()
        path: List[NodeId] = []
        cycles: List[List[NodeId]] = []

        def enter(node_id: NodeId):
            visited.add(node_id)
            on_stack.add(node_id)
            path.append(node_id)
            return node_id, iter(adjacency.get(node_id, []))

        for start in sorted(n.id for n in self.graph.nodes()):
            if start in visited:
                continue
            stack = [enter(start)]
            while stack:
                node_id, neighbors = stack[-1]
                neighbor = next(neighbors, None)
                if neighbor is None:
                    stack.pop()
                    path.pop()
                    on_stack.discard(node_id)
                elif neighbor not in visited:
                    stack.append(enter(neighbor))
                elif neighbor in on_stack:
                    cycles.append(path[path.index(neighbor):])
        return cycles

    def calculate_coupling(self, node_id: NodeId) -> Optional[CouplingMetrics]:
        if not self.graph.has_node(node_id):
            return None
        afferent = len(self.graph.edges_to(node_id))
        efferent = len(self.graph.edges_from(node_id))
        total = afferent + efferent
        instability = efferent / total if total else 0.0
        return CouplingMetrics(afferent=afferent, efferent=efferent, instability=instability)

    def find_leaf_nodes(self) -> List[Node]:
        sources = {e.source for e in self.graph.edges()}
        return [n for n in self.graph.nodes() if n.id not in sources]

    def find_root_nodes(self) -> List[Node]:
        targets = {e.target for e in self.graph.edges()}
        return [n for n in self.graph.nodes() if n.id not in targets]

    # ---------- pattern recognition ----------

    def identify_patterns(self) -> List[ArchitecturalPattern]:
        patterns: List[ArchitecturalPattern] = []

        repositories = sorted(n.id for n in self.graph.nodes_by_role(Role.REPOSITORY))
        if repositories:
            patterns.append(ArchitecturalPattern(
                name="Repository",
                counts={"repositories": len(repositories)},
                node_ids=repositories,
            ))

        directives = len(self.graph.nodes_by_role(Role.DIRECTIVE))
        queries = len(self.graph.nodes_by_role(Role.QUERY))
        if directives or queries:
            patterns.append(ArchitecturalPattern(
                name="CQRS",
                counts={"directives": directives, "queries": queries},
            ))

        events = len(self.graph.nodes_by_role(Role.DOMAIN_EVENT))
        aggregates = sorted(n.id for n in self.graph.nodes_by_role(Role.AGGREGATE))
        if events and aggregates:
            patterns.append(ArchitecturalPattern(
                name="EventSourcing",
                counts={"events": events, "aggregates": len(aggregates)},
                node_ids=aggregates,
            ))

        return patterns
