from dataclasses import dataclass
from typing import Callable, List, Optional

from hexgraph.graph.node_id import NodeId, qualified_name
from hexgraph.registry.node_info import NodeInfo
from hexgraph.registry.registrable import is_registrable

NODE_INFO_ATTR = "__hexgraph_node_info__"


@dataclass(frozen=True)
class ComponentEntry:
    """
    One contribution to the registration collection.

    Holds producers rather than data: nothing is evaluated (and no instance
    of the component is created) until the graph is built.
    """
    node_info: Callable[[], NodeInfo]
    dependencies: Callable[[], List[NodeId]]
    component: Optional[type] = None

    @classmethod
    def for_registrable(cls, component) -> "ComponentEntry":
        return cls(
            node_info=component.node_info,
            dependencies=lambda: [resolve_dependency(d) for d in component.dependencies()],
            component=component,
        )

    @classmethod
    def from_info(cls, info: NodeInfo, depends_on=(), component=None) -> "ComponentEntry":
        declared = tuple(depends_on)
        return cls(
            node_info=lambda: info,
            dependencies=lambda: [resolve_dependency(d) for d in declared],
            component=component,
        )


def resolve_dependency(target) -> NodeId:
    """
    Turn a declared dependency into a NodeId.

    Accepts a NodeId, a stable identifier string, a class decorated with
    @component, or any Registrable class. Other classes fall back to their
    qualified module.QualName.
    """
    if isinstance(target, NodeId):
        return target
    if isinstance(target, str):
        return NodeId.from_name(target)
    info = target.__dict__.get(NODE_INFO_ATTR) if isinstance(target, type) else None
    if info is not None:
        return info.node_id()
    if is_registrable(target):
        return target.node_info().node_id()
    if isinstance(target, type):
        return NodeId.of(target)
    raise TypeError(f"Cannot resolve dependency {target!r} to a NodeId")
