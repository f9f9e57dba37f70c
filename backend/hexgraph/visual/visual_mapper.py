from hexgraph.graph.edge import Edge
from hexgraph.graph.node import Node
from hexgraph.visual.visual_schema import VisualEdge, VisualGraph, VisualNode
from hexgraph.visual.visual_style import VisualStyle


def map_node(node: Node, style: VisualStyle) -> VisualNode:
    return VisualNode(
        id=str(node.id),
        label=node.type_name,
        layer=str(node.layer),
        role=str(node.role),
        color=style.color_for_layer(node.layer),
        shape=style.node_shape,
    )


def map_edge(edge: Edge) -> VisualEdge:
    return VisualEdge(
        source=str(edge.source),
        target=str(edge.target),
        relationship=str(edge.relationship),
    )


def map_graph_to_visual(graph, style: VisualStyle) -> VisualGraph:
    """
    Transform the architecture graph into its display mirror.

    Nodes come out sorted by id so every export of the same graph is
    byte-identical; edges keep insertion order.
    """
    nodes = [map_node(node, style) for node in sorted(graph.nodes(), key=lambda n: n.id)]
    edges = [map_edge(edge) for edge in graph.edges()]
    return VisualGraph(nodes=nodes, edges=edges, style=style)
