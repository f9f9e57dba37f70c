import logging
from typing import Dict, Iterable, List

from hexgraph.errors import GraphValidationError
from hexgraph.graph.edge import Edge
from hexgraph.graph.metadata import DEFAULT_DESCRIPTION, GraphMetadata
from hexgraph.graph.node import Node
from hexgraph.graph.node_id import NodeId

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Mutable accumulator for a Graph.

    - add_node() with an id already present replaces the earlier node
    - add_edge() always appends, even if its ids are not (yet) nodes
    - build() never validates; use build_validated() for that

    Single writer; not thread-safe.
    """

    def __init__(self, description: str = DEFAULT_DESCRIPTION):
        self._nodes: Dict[NodeId, Node] = {}
        self._edges: List[Edge] = []
        self._description = description
        self._attributes: Dict[str, str] = {}

    # ---------- accumulation ----------

    def with_description(self, description: str) -> "GraphBuilder":
        self._description = description
        return self

    def with_attribute(self, key: str, value: str) -> "GraphBuilder":
        self._attributes[key] = value
        return self

    def add_node(self, node: Node) -> "GraphBuilder":
        if node.id in self._nodes:
            logger.debug("Replacing node %s (%s)", node.id, node.type_name)
        self._nodes[node.id] = node
        return self

    def add_nodes(self, nodes: Iterable[Node]) -> "GraphBuilder":
        for node in nodes:
            self.add_node(node)
        return self

    def add_edge(self, edge: Edge) -> "GraphBuilder":
        self._edges.append(edge)
        return self

    def add_edges(self, edges: Iterable[Edge]) -> "GraphBuilder":
        self._edges.extend(edges)
        return self

    # ---------- output ----------

    def build(self):
        from hexgraph.graph.graph import Graph

        return Graph(
            nodes=dict(self._nodes),
            edges=list(self._edges),
            metadata=GraphMetadata(description=self._description, attributes=dict(self._attributes)),
        )

    def validate(self) -> List[GraphValidationError]:
        """Return one error per edge end that does not resolve to a node."""
        problems: List[GraphValidationError] = []
        for edge in self._edges:
            if edge.source not in self._nodes:
                problems.append(GraphValidationError(
                    f"Edge references non-existent source node {edge.source}",
                    code="E_HEX_GRAPH_001",
                    next_steps=["Ensure all edge sources exist as nodes"],
                ))
            if edge.target not in self._nodes:
                problems.append(GraphValidationError(
                    f"Edge references non-existent target node {edge.target}",
                    code="E_HEX_GRAPH_002",
                    next_steps=["Ensure all edge targets exist as nodes"],
                ))
        return problems

    def build_validated(self):
        problems = self.validate()
        if problems:
            raise problems[0]
        return self.build()
