from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from hexgraph.graph.node_id import NodeId
from hexgraph.graph.relationship import Relationship


@dataclass(frozen=True)
class Edge:
    """Directed edge. The target may not exist as a node in the graph."""
    source: NodeId
    target: NodeId
    relationship: Relationship
    metadata: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def get_metadata(self, key: str) -> Optional[str]:
        return self.metadata.get(key)

    def has_relationship(self, relationship: Relationship) -> bool:
        return self.relationship == relationship

    def connects(self, source: NodeId, target: NodeId) -> bool:
        return self.source == source and self.target == target

    def __str__(self) -> str:
        return f"{self.source} --[{self.relationship}]--> {self.target}"
