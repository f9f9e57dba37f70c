from abc import ABC, abstractmethod
from typing import List

from hexgraph.graph.node_id import NodeId
from hexgraph.registry.node_info import NodeInfo


class Registrable(ABC):
    """
    Minimal contract for taking part in the architecture graph.

    Any class with ``node_info()`` and ``dependencies()`` classmethods can be
    registered; subclassing this is optional.
    """

    @classmethod
    @abstractmethod
    def node_info(cls) -> NodeInfo:
        pass

    @classmethod
    def dependencies(cls) -> List[NodeId]:
        return []

    @classmethod
    def register_self(cls) -> NodeId:
        return cls.node_info().node_id()


def is_registrable(component) -> bool:
    return callable(getattr(component, "node_info", None)) and callable(
        getattr(component, "dependencies", None)
    )
