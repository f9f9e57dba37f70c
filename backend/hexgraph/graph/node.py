from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from hexgraph.graph.layer import Layer
from hexgraph.graph.node_id import NodeId
from hexgraph.graph.role import Role


@dataclass(frozen=True)
class Node:
    id: NodeId
    layer: Layer
    role: Role
    type_name: str
    module_path: str
    metadata: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        # Read-only view; the node is shared between readers once built
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def get_metadata(self, key: str) -> Optional[str]:
        return self.metadata.get(key)

    def is_in_layer(self, layer: Layer) -> bool:
        return self.layer == layer

    def has_role(self, role: Role) -> bool:
        return self.role == role

    def __str__(self) -> str:
        return f"{self.type_name}::{self.role} ({self.layer} in {self.module_path})"
