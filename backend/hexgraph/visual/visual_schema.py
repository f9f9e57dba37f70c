from dataclasses import dataclass, field
from typing import List, Optional

from hexgraph.visual.visual_style import VisualStyle


@dataclass(frozen=True)
class VisualNode:
    id: str                 # str(NodeId), e.g. "NodeId(1234)"
    label: str              # type name
    layer: str
    role: str
    color: str
    shape: str


@dataclass(frozen=True)
class VisualEdge:
    source: str
    target: str
    relationship: str


@dataclass
class VisualGraph:
    nodes: List[VisualNode] = field(default_factory=list)
    edges: List[VisualEdge] = field(default_factory=list)
    style: VisualStyle = field(default_factory=VisualStyle)

    @classmethod
    def from_graph(cls, graph, style: Optional[VisualStyle] = None) -> "VisualGraph":
        from hexgraph.visual.visual_mapper import map_graph_to_visual

        return map_graph_to_visual(graph, style or VisualStyle())
