from hexgraph.visual.visual_style import DEFAULT_SHAPE, VISUAL_STYLE, VisualStyle
from hexgraph.visual.visual_schema import VisualEdge, VisualGraph, VisualNode
from hexgraph.visual.visual_mapper import map_edge, map_graph_to_visual, map_node

__all__ = [
    "DEFAULT_SHAPE",
    "VISUAL_STYLE",
    "VisualStyle",
    "VisualEdge",
    "VisualGraph",
    "VisualNode",
    "map_edge",
    "map_graph_to_visual",
    "map_node",
]
