from dataclasses import dataclass, field
from typing import Dict, Optional

from hexgraph.graph.layer import Layer
from hexgraph.graph.node import Node
from hexgraph.graph.node_id import NodeId
from hexgraph.graph.role import Role


@dataclass(frozen=True)
class NodeInfo:
    """What a component declares about itself."""
    layer: Layer
    role: Role
    type_name: str                     # display name, e.g. "ProductRepository"
    module_path: str                   # declaring module, e.g. "shop.ports"
    key: Optional[str] = None          # stable identifier; defaults to module_path.type_name
    metadata: Dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def qualified_name(self) -> str:
        if self.key:
            return self.key
        if self.module_path:
            return f"{self.module_path}.{self.type_name}"
        return self.type_name

    def node_id(self) -> NodeId:
        return NodeId.from_name(self.qualified_name)

    def to_node(self) -> Node:
        return Node(
            id=self.node_id(),
            layer=self.layer,
            role=self.role,
            type_name=self.type_name,
            module_path=self.module_path,
            metadata=self.metadata,
        )
