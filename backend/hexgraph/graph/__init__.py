# Architecture graph model: ids, classification tags, nodes, edges, builder

from hexgraph.graph.layer import LAYER_ORDER, Layer
from hexgraph.graph.role import RECOMMENDED_ROLES, Role
from hexgraph.graph.relationship import Relationship
from hexgraph.graph.node_id import NodeId, qualified_name
from hexgraph.graph.node import Node
from hexgraph.graph.edge import Edge
from hexgraph.graph.metadata import GraphMetadata
from hexgraph.graph.graph import Graph
from hexgraph.graph.builder import GraphBuilder
from hexgraph.graph.query import GraphQuery
from hexgraph.graph.analysis import ArchitecturalPattern, CouplingMetrics, GraphAnalysis

__all__ = [
    "LAYER_ORDER",
    "Layer",
    "RECOMMENDED_ROLES",
    "Role",
    "Relationship",
    "NodeId",
    "qualified_name",
    "Node",
    "Edge",
    "GraphMetadata",
    "Graph",
    "GraphBuilder",
    "GraphQuery",
    "ArchitecturalPattern",
    "CouplingMetrics",
    "GraphAnalysis",
]
